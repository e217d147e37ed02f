"""pagepath CLI — inspect how page paths map to routes.

Entry point registered as ``pagepath`` in ``pyproject.toml``::

    [project.scripts]
    pagepath = "pagepath.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pagepath`` command."""
    parser = argparse.ArgumentParser(
        prog="pagepath",
        description="pagepath — page file paths to router patterns, and back.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pagepath match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Derive a router match pattern")
    match_parser.add_argument("template", help="Page path with [param] segments")

    # -- pagepath params --------------------------------------------------
    params_parser = subparsers.add_parser(
        "params", help="Extract collection parameters from a resolved path"
    )
    params_parser.add_argument("template", help="Template path with {Type.field} segments")
    params_parser.add_argument("resolved", help="Concrete resolved path")

    # -- pagepath path ----------------------------------------------------
    path_parser = subparsers.add_parser("path", help="Print the URL path of a page file")
    path_parser.add_argument("file", help="Page file path relative to the pages directory")

    # -- pagepath derive --------------------------------------------------
    derive_parser = subparsers.add_parser(
        "derive", help="Fill a collection template with a node's fields"
    )
    derive_parser.add_argument("template", help="Template path with {Type.field} segments")
    derive_parser.add_argument(
        "--node",
        required=True,
        help='Node fields as a JSON object (e.g. \'{"name": "Blue Shoe"}\')',
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from pagepath.cli import _commands

    if args.command == "match":
        _commands.run_match(args)
    elif args.command == "params":
        _commands.run_params(args)
    elif args.command == "path":
        _commands.run_path(args)
    elif args.command == "derive":
        _commands.run_derive(args)
