# src/forwardgen/config/__init__.py

"""Configuration resolution for type-forward generation.

Options are resolved once at the entry point into an immutable
``GenerationOptions`` that flows through the generator unchanged.

Key exports:
- resolve_options: Main API for option resolution
- Settings: Pydantic schema for validation and defaults
- Origin, FieldOrigin, SourceMap: Provenance of resolved values
"""

from .core import (
    FieldOrigin,
    Origin,
    Settings,
    SourceMap,
    audit_lines,
    resolve_options,
)
from .loaders import load_env, load_pyproject

__all__ = [
    "FieldOrigin",
    "Origin",
    "Settings",
    "SourceMap",
    "audit_lines",
    "load_env",
    "load_pyproject",
    "resolve_options",
]
