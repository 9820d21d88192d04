"""localroute CLI — inspect and validate localized route files.

Entry point registered as ``localroute`` in ``pyproject.toml``::

    [project.scripts]
    localroute = "localroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``localroute`` command."""
    parser = argparse.ArgumentParser(
        prog="localroute",
        description="localroute — per-culture URLs for controller/action routes.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registry loading and translation fallbacks",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- localroute routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every localized URL")
    routes_parser.add_argument("file", help="TOML route file")

    # -- localroute resolve -----------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve one route")
    resolve_parser.add_argument("file", help="TOML route file")
    resolve_parser.add_argument("controller", help="Controller key")
    resolve_parser.add_argument("action", help="Action key")
    resolve_parser.add_argument(
        "--culture",
        default=None,
        help="Culture code (defaults to the file's default culture)",
    )
    resolve_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Route value for a declared parameter (repeatable)",
    )

    # -- localroute detect ------------------------------------------------
    detect_parser = subparsers.add_parser("detect", help="Detect the culture of a path")
    detect_parser.add_argument("file", help="TOML route file")
    detect_parser.add_argument("path", help="URL path, e.g. /fi/tili/kirjaudu")

    # -- localroute check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a route file")
    check_parser.add_argument("file", help="TOML route file")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from localroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from localroute.cli._url import run_resolve

        run_resolve(args)
    elif args.command == "detect":
        from localroute.cli._url import run_detect

        run_detect(args)
    elif args.command == "check":
        from localroute.cli._check import run_check

        run_check(args)
