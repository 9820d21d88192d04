"""Route file loading shared by every ``localroute`` command."""

import sys

from localroute.errors import ConfigurationError
from localroute.loader import load_route_file
from localroute.localizer import Localizer


def load_localizer(path: str) -> Localizer:
    """Load *path* into a Localizer, exiting with status 1 on failure."""
    try:
        config, registry = load_route_file(path)
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return Localizer(config, registry)
