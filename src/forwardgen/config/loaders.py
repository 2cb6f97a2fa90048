# src/forwardgen/config/loaders.py

"""Configuration loaders for environment and pyproject.toml.

Each loader returns a plain dictionary; the resolver merges and validates.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Any

# Python 3.11+ has tomllib in stdlib
import tomllib

from . import utils

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

log = logging.getLogger(__name__)


def load_env() -> Mapping[str, Any]:
    """Load option values from ``FORWARDGEN_*`` environment variables.

    Booleans are coerced from ``1/true/yes/on`` (and their negatives); type
    lists are split on ``;`` or ``,``. Variables that name no option are
    logged and dropped, so unrelated ``FORWARDGEN_*`` settings do not fail
    resolution.
    """
    # local import to keep loaders import-light
    from .core import BOOL_FIELDS, LIST_FIELDS, Settings

    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(utils.ENV_PREFIX):
            continue
        field_name = key[len(utils.ENV_PREFIX) :].lower()
        if field_name in utils.META_ENV_FIELDS:
            continue
        if field_name in BOOL_FIELDS:
            config[field_name] = utils.coerce_bool(value)
        elif field_name in LIST_FIELDS:
            config[field_name] = utils.split_type_list(value)
        elif field_name in Settings.model_fields:
            config[field_name] = value
        else:
            log.debug("Ignoring unrecognized environment variable %s", key)
    return config


def _read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file, returning an empty dict if it is missing or invalid."""
    if not path.exists():
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        log.debug("Ignoring unreadable config file %s: %s", path, e)
        return {}


def load_pyproject(path: Path | None = None) -> Mapping[str, Any]:
    """Load the ``[tool.forwardgen]`` table from pyproject.toml.

    Args:
        path: File to read; defaults to ``utils.get_pyproject_path()``.

    Returns:
        The table's values, with string type lists split like env values.
    """
    data = _read_toml(path or utils.get_pyproject_path())
    table = data.get("tool", {}).get(utils.CONFIG_TOOL_NAME, {})
    if not isinstance(table, dict):
        return {}

    from .core import LIST_FIELDS

    config: dict[str, Any] = {}
    for key, value in table.items():
        # TOML tables commonly use kebab-case keys
        field_name = str(key).replace("-", "_")
        config[field_name] = (
            utils.split_type_list(value) if field_name in LIST_FIELDS else value
        )
    return config
