"""Main CLI entry point for graphql-scaffold."""

import logging
import sys

from graphql_scaffold.cli import normalize_cmd, object_cmd


def _usage() -> None:
    print("Usage: graphql-scaffold <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  object <TypeName> [name:type ...]  - Generate a graphql-ruby object type file",
        file=sys.stderr,
    )
    print(
        "  normalize <expression>             - Print a type expression in ruby or graphql notation",
        file=sys.stderr,
    )
    print("Pass --verbose to any command for debug logging.", file=sys.stderr)


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2 or sys.argv[1] in {"-h", "--help"}:
        _usage()
        sys.exit(1)

    if "--verbose" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    command = sys.argv[1]
    if command == "object":
        object_cmd.run_object_argv()
    elif command == "normalize":
        normalize_cmd.run_normalize_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
