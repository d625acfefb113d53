"""Generator layout configuration (directories, base class, file extension)."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".graphql-scaffold.yaml"
CONFIG_ENV_VAR = "GRAPHQL_SCAFFOLD_CONFIG"

# graphql-ruby install layout; override per project in .graphql-scaffold.yaml.
DEFAULT_GENERATOR_LAYOUT: dict[str, str] = {
    "directory": "app/graphql",
    "types_dir": "types",
    "base_class": "Types::BaseObject",
    "node_interface": "GraphQL::Types::Relay::Node",
    "file_extension": ".rb",
}


def resolve_generator_layout(layout: dict[str, Any] | None) -> dict[str, str]:
    """Return layout dict with defaults filled. Unknown keys are dropped."""
    if layout is None:
        return dict(DEFAULT_GENERATOR_LAYOUT)
    out = dict(DEFAULT_GENERATOR_LAYOUT)
    out.update({k: str(v) for k, v in layout.items() if k in out and v is not None})
    return out


def _config_path(project_root: Path) -> Path:
    """Config file path (env GRAPHQL_SCAFFOLD_CONFIG or project_root/.graphql-scaffold.yaml)."""
    if os.environ.get(CONFIG_ENV_VAR):
        return Path(os.environ[CONFIG_ENV_VAR]).resolve()
    return project_root / CONFIG_FILE_NAME


def load_generator_config(project_root: Path) -> dict[str, Any]:
    """Layout overrides from the `generator:` mapping of the config file, {} if there is none.

    Raises ValueError if the file is not a YAML mapping.
    """
    path = _config_path(project_root)
    if not path.is_file():
        log.debug("No generator config at %s", path)
        return {}
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    overrides = (data.get("generator") or {}) if isinstance(data, dict) else None
    if not isinstance(overrides, dict):
        msg = f"Invalid generator config (expected a mapping): {path}"
        raise ValueError(msg)
    log.debug("Loaded generator config %s: %s", path, overrides)
    return overrides
