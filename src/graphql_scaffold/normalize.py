"""Type expression normalization between Ruby (host) and GraphQL (schema) notation.

Accepts any mix of the two styles:

    Int, Integer, String!, !ID, [Post], [Post!]!, PostType, Types::Post, types.post

and returns the expression in the requested notation plus the ``null:`` value
for a graphql-ruby field declaration.
"""

from __future__ import annotations

import logging
from enum import Enum

from graphql_scaffold.helpers import camelize

log = logging.getLogger(__name__)

# Scalars that are spelled the same in Ruby field declarations.
RUBY_SCALARS = frozenset({"Integer", "Float", "Boolean", "String", "ID"})
RUBY_SCALAR_ALIASES = {"Int": "Integer"}

TYPES_NAMESPACE = "Types::"
TYPES_NAMESPACE_GRAPHQL = "types."
TYPE_SUFFIX = "Type"


class TypeNotation(str, Enum):
    HOST = "ruby"
    SCHEMA = "graphql"


class UnsupportedModeError(ValueError):
    """Normalization target is not a TypeNotation."""


class MalformedTypeError(ValueError):
    """Type expression has no base name once markers are stripped."""


def _coerce_mode(mode: TypeNotation | str) -> TypeNotation:
    if isinstance(mode, TypeNotation):
        return mode
    try:
        return TypeNotation(mode)
    except ValueError:
        msg = f"Unexpected normalize mode: {mode!r}"
        raise UnsupportedModeError(msg) from None


def _base_name(name: str, mode: TypeNotation) -> str:
    if mode is TypeNotation.HOST:
        if name in RUBY_SCALAR_ALIASES:
            return RUBY_SCALAR_ALIASES[name]
        if name in RUBY_SCALARS:
            return name
        return f"{TYPES_NAMESPACE}{camelize(name)}{TYPE_SUFFIX}"
    if mode is TypeNotation.SCHEMA:
        return camelize(name)
    msg = f"Unexpected normalize mode: {mode!r}"
    raise UnsupportedModeError(msg)


def normalize_type_expression(
    type_expression: str,
    mode: TypeNotation | str,
    null: bool = True,
) -> tuple[str, bool]:
    """Return (type expression in `mode` notation, null: value).

    Markers are peeled in a fixed order: `!` prefix, `!` suffix, `[...]`,
    `Type` suffix, `Types::` prefix, `types.` prefix. Any `!` along the way sets
    null to False. A list takes the nullability of its innermost element, so
    "[Post!]" is null: false and "[Post]" is null: true.

    Raises UnsupportedModeError for an unknown mode and MalformedTypeError when
    nothing is left to name (e.g. "", "[]", "!").
    """
    mode = _coerce_mode(mode)
    expr = type_expression
    depth = 0
    while True:
        if expr.startswith("!"):
            expr, null = expr[1:], False
        elif expr.endswith("!"):
            expr, null = expr[:-1], False
        elif expr.startswith("[") and expr.endswith("]"):
            expr = expr[1:-1]
            depth += 1
        elif expr.endswith(TYPE_SUFFIX):
            expr = expr[: -len(TYPE_SUFFIX)]
        elif expr.startswith(TYPES_NAMESPACE):
            expr = expr[len(TYPES_NAMESPACE) :]
        elif expr.startswith(TYPES_NAMESPACE_GRAPHQL):
            expr = expr[len(TYPES_NAMESPACE_GRAPHQL) :]
        else:
            break

    if not expr:
        msg = f"Type expression has no type name: {type_expression!r}"
        raise MalformedTypeError(msg)

    name = "[" * depth + _base_name(expr, mode) + "]" * depth
    log.debug("normalized %r (%s) -> %s, null: %s", type_expression, mode.value, name, null)
    return name, null
