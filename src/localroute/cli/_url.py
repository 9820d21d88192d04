"""``localroute resolve`` and ``localroute detect``."""

import argparse
import sys

from localroute.cli._load import load_localizer
from localroute.errors import LocalRouteError


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` pairs into route values."""
    values: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            print(f"Error: --param expects NAME=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(1)
        values[name] = value
    return values


def run_resolve(args: argparse.Namespace) -> None:
    """Print the URL and link name of one route."""
    localizer = load_localizer(args.file)
    route_values = parse_params(args.param)
    try:
        resolved = localizer.resolve(args.controller, args.action, args.culture)
        url = localizer.url_for(args.controller, args.action, args.culture, **route_values)
    except LocalRouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(url)
    if resolved.link_name:
        print(f"link name: {resolved.link_name}")


def run_detect(args: argparse.Namespace) -> None:
    """Print the culture a path belongs to."""
    localizer = load_localizer(args.file)
    print(localizer.detect_culture(args.path))
