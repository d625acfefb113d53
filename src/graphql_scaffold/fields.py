"""User-provided `name:type` field arguments, normalized to graphql-ruby field declarations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from graphql_scaffold.normalize import TypeNotation, normalize_type_expression


class MalformedFieldError(ValueError):
    """Field argument is not `name:type`."""


@dataclass(frozen=True)
class NormalizedField:
    name: str
    type_expr: str
    null: bool

    def to_ruby(self) -> str:
        return f"field :{self.name}, {self.type_expr}, null: {'true' if self.null else 'false'}"


def parse_field(raw: str) -> NormalizedField:
    """Split on the first ':' and normalize the type to Ruby notation.

    "title:String!" -> NormalizedField("title", "String", False).
    Raises MalformedFieldError when the name or type is missing.
    """
    name, sep, raw_type = raw.partition(":")
    name = name.strip()
    raw_type = raw_type.strip()
    if not sep:
        msg = f"Field must be name:type, got {raw!r}"
        raise MalformedFieldError(msg)
    if not name:
        msg = f"Field is missing a name: {raw!r}"
        raise MalformedFieldError(msg)
    if not raw_type:
        msg = f"Field {name!r} is missing a type: {raw!r}"
        raise MalformedFieldError(msg)
    type_expr, null = normalize_type_expression(raw_type, mode=TypeNotation.HOST)
    return NormalizedField(name, type_expr, null)


def parse_fields(raws: Iterable[str]) -> list[NormalizedField]:
    """parse_field over each argument, order preserved."""
    return [parse_field(raw) for raw in raws]
