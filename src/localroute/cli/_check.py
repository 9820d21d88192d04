"""``localroute check`` — registry validation command.

Loads a route file, validates it, and prints the results to stdout.
Exits with code 1 if errors are found.
"""

import argparse

from localroute.cli._load import load_localizer
from localroute.routing.validation import check_registry


def run_check(args: argparse.Namespace) -> None:
    """Validate a route file and raise ``SystemExit(1)`` on errors."""
    localizer = load_localizer(args.file)
    result = check_registry(localizer.registry, localizer.config)
    print(result.summary())
    if not result.ok:
        raise SystemExit(1)
