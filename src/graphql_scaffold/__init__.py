"""Scaffold graphql-ruby object types from a type name and `name:type` fields."""

from graphql_scaffold.fields import MalformedFieldError, NormalizedField, parse_field, parse_fields
from graphql_scaffold.generator import (
    GeneratedType,
    ObjectGenerator,
    TypeGenerator,
    run_generate_object,
)
from graphql_scaffold.normalize import (
    MalformedTypeError,
    TypeNotation,
    UnsupportedModeError,
    normalize_type_expression,
)

__all__ = [
    "GeneratedType",
    "MalformedFieldError",
    "MalformedTypeError",
    "NormalizedField",
    "ObjectGenerator",
    "TypeGenerator",
    "TypeNotation",
    "UnsupportedModeError",
    "normalize_type_expression",
    "parse_field",
    "parse_fields",
    "run_generate_object",
]
