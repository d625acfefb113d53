"""CLI for object: graphql-scaffold object <TypeName> [name:type ...]."""

from __future__ import annotations

import sys
from pathlib import Path

from graphql_scaffold.cli.parse_common import parse_argv, path_resolver
from graphql_scaffold.config import load_generator_config
from graphql_scaffold.generator import run_generate_object


def run_object_argv() -> None:
    """Dispatch graphql-scaffold object <TypeName> [name:type ...] [options]."""
    if len(sys.argv) < 3 or sys.argv[2].startswith("--"):
        print("Usage: graphql-scaffold object <TypeName> [name:type ...] [options]", file=sys.stderr)
        print(
            "Options: --directory DIR, --project-root PATH, --node, --force, --pretend",
            file=sys.stderr,
        )
        sys.exit(1)

    type_name = sys.argv[2]
    opts, fields = parse_argv(
        sys.argv[3:],
        flags=(
            ("project_root", "--project-root", Path.cwd, path_resolver),
            ("directory", "--directory", None, None),
        ),
        switches=("--node", "--force", "--pretend", "--verbose"),
    )
    unknown = [a for a in fields if a.startswith("--")]
    if unknown:
        print(f"Error: Unknown option: {unknown[0]}", file=sys.stderr)
        sys.exit(1)

    project_root: Path = opts["project_root"]
    try:
        layout = load_generator_config(project_root)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if opts["directory"] is not None:
        layout = {**layout, "directory": opts["directory"]}

    try:
        code = run_generate_object(
            type_name=type_name,
            fields=fields,
            project_root=project_root,
            node=opts["--node"],
            force=opts["--force"],
            pretend=opts["--pretend"],
            layout=layout,
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)
