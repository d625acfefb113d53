"""CLI for normalize: graphql-scaffold normalize <expression> [--mode ruby|graphql]."""

from __future__ import annotations

import sys

from graphql_scaffold.cli.parse_common import parse_argv
from graphql_scaffold.normalize import (
    MalformedTypeError,
    TypeNotation,
    UnsupportedModeError,
    normalize_type_expression,
)


def run_normalize_argv() -> None:
    """Print `<type expression> null: <bool>` for one expression."""
    opts, rest = parse_argv(
        sys.argv[2:],
        flags=(("mode", "--mode", TypeNotation.HOST.value, None),),
        switches=("--verbose",),
    )
    if len(rest) != 1:
        print("Usage: graphql-scaffold normalize <expression> [--mode ruby|graphql]", file=sys.stderr)
        sys.exit(1)

    mode = opts["mode"].lower()
    if mode not in {m.value for m in TypeNotation}:
        print(f"Error: --mode must be ruby or graphql, got {opts['mode']}", file=sys.stderr)
        sys.exit(1)
    try:
        name, null = normalize_type_expression(rest[0], mode=mode)
    except (MalformedTypeError, UnsupportedModeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"{name} null: {'true' if null else 'false'}")
