"""Subcommand implementations for the ``pagepath`` CLI."""

import argparse
import json
import sys

from pagepath.pages.paths import create_path, derive_path
from pagepath.routing.match_path import derive_pattern
from pagepath.routing.params import extract_params


def run_match(args: argparse.Namespace) -> None:
    """Print the match pattern, or a note when the path is literal."""
    result = derive_pattern(args.template)
    if result.match_path is None:
        print(f"{args.template} (no dynamic segments)")
        return
    print(result.match_path)


def run_params(args: argparse.Namespace) -> None:
    params = extract_params(args.template, args.resolved)
    print(json.dumps(params, indent=2, sort_keys=True))


def run_path(args: argparse.Namespace) -> None:
    print(create_path(args.file))


def run_derive(args: argparse.Namespace) -> None:
    """Fill ``args.template`` with the JSON object given as ``--node``."""
    try:
        node = json.loads(args.node)
    except json.JSONDecodeError as exc:
        print(f"Error: --node is not valid JSON: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not isinstance(node, dict):
        print("Error: --node must be a JSON object", file=sys.stderr)
        raise SystemExit(1)

    print(derive_path(args.template, node))
