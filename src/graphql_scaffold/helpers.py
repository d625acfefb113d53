"""Shared helpers for graphql_scaffold (inflection, file text).

Used by normalize, generator, and config.
"""

from __future__ import annotations

import re
from pathlib import Path

# --- Text ---

_CAMELIZE_HEAD = re.compile(r"^[a-z\d]*")
_CAMELIZE_SEGMENT = re.compile(r"(?:_|(/))([a-z\d]*)", re.IGNORECASE)
_UNDERSCORE_ACRONYM = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_UNDERSCORE_WORD = re.compile(r"([a-z\d])([A-Z])")


def camelize(name: str) -> str:
    """Upper camel case, ActiveSupport style (blog_post -> BlogPost, admin/user -> Admin::User).

    Characters already upper case are kept, so camelize(camelize(s)) == camelize(s).
    """
    head = _CAMELIZE_HEAD.sub(lambda m: m.group(0).capitalize(), name, count=1)
    return _CAMELIZE_SEGMENT.sub(
        lambda m: ("::" if m.group(1) else "") + m.group(2).capitalize(),
        head,
    )


def underscore(name: str) -> str:
    """Snake case, ActiveSupport style (BlogPostType -> blog_post_type, HTTPRequest -> http_request)."""
    s = name.replace("::", "/")
    s = _UNDERSCORE_ACRONYM.sub(r"\1_\2", s)
    s = _UNDERSCORE_WORD.sub(r"\1_\2", s)
    return s.replace("-", "_").lower()


def demodulize(name: str) -> str:
    """Last `::` segment (Types::BlogPostType -> BlogPostType)."""
    return name.rsplit("::", 1)[-1]


# --- File ---


def read_file_or_default(path: Path | None, default: str = "") -> str:
    """Return file text if path is a file, else default."""
    if path is not None and path.is_file():
        return path.read_text()
    return default
