"""Shared CLI argument parsing: --flag value options, boolean --switches, positionals."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

FlagSpec = tuple[str, str, Any, "Callable[[str], Any] | None"]


def parse_argv(
    argv: list[str],
    flags: tuple[FlagSpec, ...] = (),
    switches: tuple[str, ...] = (),
) -> tuple[dict[str, Any], list[str]]:
    """Split argv into options and positionals in one pass.

    Each flag spec is (key, flag_str, default, converter), e.g.
    ("project_root", "--project-root", Path.cwd, path_resolver); a callable
    default is called, converter None keeps the string. Each switch is stored
    under its own name ("--force" -> True/False).
    A --flag with no value after it is left in the positionals.
    """
    by_flag = {flag_str: (key, converter) for key, flag_str, _d, converter in flags}
    result: dict[str, Any] = {s: False for s in switches}
    for key, _flag, default, _converter in flags:
        result[key] = default() if callable(default) else default

    rest: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in switches:
            result[arg] = True
            i += 1
        elif arg in by_flag and i + 1 < len(argv):
            key, converter = by_flag[arg]
            result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
            i += 2
        else:
            rest.append(arg)
            i += 1
    return result, rest


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --project-root)."""
    return Path(s).resolve()
