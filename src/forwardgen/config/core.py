# src/forwardgen/config/core.py

"""Settings schema and layered resolution into ``GenerationOptions``.

Resolve once, freeze, then flow: configuration is merged from defaults,
pyproject.toml, the environment, and programmatic overrides, validated by a
pydantic schema, and handed to the generator as an immutable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, overload

from pydantic import BaseModel, Field, ValidationError, field_validator

from forwardgen.errors import ConfigurationError
from forwardgen.options import GenerationOptions

from . import utils

if TYPE_CHECKING:
    from collections.abc import Mapping

# --- Schema (Pydantic wall) ---

BOOL_FIELDS = frozenset(
    {
        "exclude_type_forwarded_to_declarations",
        "use_public_accessibility_for_generated_types",
    }
)
LIST_FIELDS = frozenset({"include_generated_types", "exclude_generated_types"})


class Settings(BaseModel):
    """Validation schema and defaults for every option field.

    Unknown keys are rejected so a misspelled option fails loudly instead of
    silently keeping its default.
    """

    exclude_type_forwarded_to_declarations: bool = Field(default=False)
    use_public_accessibility_for_generated_types: bool = Field(default=False)
    include_generated_types: tuple[str, ...] = Field(default=())
    exclude_generated_types: tuple[str, ...] = Field(default=())

    model_config = {"extra": "forbid"}

    @field_validator("include_generated_types", "exclude_generated_types", mode="before")
    @classmethod
    def normalize_type_names(cls, v: Any) -> Any:
        """Accept ``"A;B"`` strings, trim entries, and drop empty ones."""
        v = utils.split_type_list(v)
        if isinstance(v, list | tuple):
            return tuple(
                item.strip() if isinstance(item, str) else item
                for item in v
                if not (isinstance(item, str) and not item.strip())
            )
        return v


# --- Audit types ---


class Origin(str, Enum):
    """Where a resolved field value came from."""

    DEFAULT = "default"
    PROJECT = "project"
    ENV = "env"
    OVERRIDES = "overrides"


@dataclass(frozen=True)
class FieldOrigin:
    """Tracks the origin of one resolved field value."""

    origin: Origin
    env_key: str | None = None  # e.g., "FORWARDGEN_EXCLUDE_GENERATED_TYPES"
    file: str | None = None  # e.g., "/repo/pyproject.toml"


SourceMap = dict[str, FieldOrigin]

_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a ``.env`` file into the environment once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


# --- Public resolution API ---


@overload
def resolve_options(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[True],
) -> tuple[GenerationOptions, SourceMap]: ...


@overload
def resolve_options(
    overrides: Mapping[str, Any] | None = ...,
    *,
    explain: Literal[False] = ...,
) -> GenerationOptions: ...


def resolve_options(
    overrides: Mapping[str, Any] | None = None,
    *,
    explain: bool = False,
) -> GenerationOptions | tuple[GenerationOptions, SourceMap]:
    """Resolve generation options from all sources.

    Precedence: defaults < project (pyproject.toml) < env < overrides.

    Args:
        overrides: Programmatic values, highest precedence.
        explain: If True, also return a SourceMap recording each field's origin.

    Returns:
        GenerationOptions, or ``(GenerationOptions, SourceMap)`` if explain=True.

    Raises:
        ConfigurationError: If the merged values fail validation.

    Example:
        options = resolve_options({"use_public_accessibility_for_generated_types": True})
    """
    _try_load_dotenv()

    from .loaders import load_env, load_pyproject

    project_path = utils.get_pyproject_path()
    merged, sources = _resolve_layers(
        overrides=overrides or {},
        env=load_env(),
        project=load_pyproject(project_path),
        project_file=str(project_path),
    )

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        hint = None
        if err.get("type") == "extra_forbidden":
            hint = "Known options: " + ", ".join(sorted(Settings.model_fields))
        raise ConfigurationError(
            f"Configuration validation failed for {loc or 'options'}: {msg}",
            hint=hint,
        ) from e

    options = GenerationOptions(**settings.model_dump())
    return (options, sources) if explain else options


def audit_lines(options: GenerationOptions, sources: SourceMap) -> list[str]:
    """Render one ``field: value (origin)`` line per option field."""
    lines = []
    for name in Settings.model_fields:
        field_origin = sources.get(name, FieldOrigin(Origin.DEFAULT))
        label = field_origin.origin.value
        detail = field_origin.env_key or field_origin.file
        if detail:
            label = f"{label}: {detail}"
        lines.append(f"{name}: {getattr(options, name)!r} ({label})")
    return lines


# --- Internal helpers ---


def _resolve_layers(
    *,
    overrides: Mapping[str, Any],
    env: Mapping[str, Any],
    project: Mapping[str, Any],
    project_file: str,
) -> tuple[dict[str, Any], SourceMap]:
    """Merge layers in precedence order, recording each key's final origin."""
    merged: dict[str, Any] = {}
    sources: SourceMap = {name: FieldOrigin(Origin.DEFAULT) for name in Settings.model_fields}

    for key, value in project.items():
        merged[key] = value
        sources[key] = FieldOrigin(Origin.PROJECT, file=project_file)
    for key, value in env.items():
        merged[key] = value
        sources[key] = FieldOrigin(Origin.ENV, env_key=utils.env_key_for(key))
    for key, value in overrides.items():
        merged[key] = value
        sources[key] = FieldOrigin(Origin.OVERRIDES)

    return merged, sources
