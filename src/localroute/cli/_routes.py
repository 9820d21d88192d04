"""``localroute routes`` — list every localized URL.

Prints one row per controller, action, and supported culture.
"""

import argparse
import sys

from localroute.cli._load import load_localizer
from localroute.errors import LocalRouteError


def run_routes(args: argparse.Namespace) -> None:
    """Print a CULTURE / ROUTE / URL table for a route file."""
    localizer = load_localizer(args.file)
    registry = localizer.registry
    cultures = localizer.config.cultures or (localizer.config.default_culture,)

    # Build rows: (culture, "controller.action", url)
    rows: list[tuple[str, str, str]] = []
    for controller, entry in registry.items():
        for action in entry.actions:
            for culture in cultures:
                try:
                    url = localizer.resolve(controller, action, culture).url
                except LocalRouteError as exc:
                    url = f"<error: {exc}>"
                rows.append((culture, f"{controller}.{action}", url))

    if not rows:
        print("No routes registered.", file=sys.stderr)
        return

    max_culture = max(max(len(r[0]) for r in rows), 7)  # "CULTURE" header
    max_route = max(max(len(r[1]) for r in rows), 5)  # "ROUTE" header

    fmt = f"{{:<{max_culture}}}  {{:<{max_route}}}  {{}}"
    print(fmt.format("CULTURE", "ROUTE", "URL"))
    sep_len = max_culture + max_route + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for culture, route, url in rows:
        print(fmt.format(culture, route, url))
