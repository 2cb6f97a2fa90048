# src/forwardgen/config/utils.py

"""Configuration utilities shared by the loaders and the resolver.

Pure helpers only: path lookup and value coercion. Nothing here imports the
schema, so the loaders can use it without import-order coupling.
"""

from __future__ import annotations

import os
from pathlib import Path
import re
from typing import Any

# --- Constants ---

ENV_PREFIX = "FORWARDGEN_"
CONFIG_TOOL_NAME = "forwardgen"

PYPROJECT_PATH_VAR = "FORWARDGEN_PYPROJECT_PATH"

# Meta/control variables that steer resolution but aren't option fields
META_ENV_FIELDS = {"pyproject_path"}

_LIST_SEPARATORS = re.compile(r"[;,]")
_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


# --- Paths ---


def get_pyproject_path() -> Path:
    """Return the project pyproject.toml path, honoring ``FORWARDGEN_PYPROJECT_PATH``."""
    override = os.environ.get(PYPROJECT_PATH_VAR)
    if override:
        return Path(override)
    return Path.cwd() / "pyproject.toml"


# --- Coercion ---


def coerce_bool(value: str) -> bool | str:
    """Convert common boolean spellings; return the input unchanged otherwise.

    Unrecognized strings are passed through so schema validation can report
    them with a precise message.
    """
    text = value.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return value


def split_type_list(value: Any) -> Any:
    """Split ``"A;B, C"`` into ``["A", "B", "C"]``; non-strings pass through."""
    if not isinstance(value, str):
        return value
    return [item.strip() for item in _LIST_SEPARATORS.split(value) if item.strip()]


def env_key_for(field: str) -> str:
    """Return the environment variable name for a settings field."""
    return f"{ENV_PREFIX}{field.upper()}"
