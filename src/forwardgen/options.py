"""Generation options consumed by the selection policy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from forwardgen.errors import ConfigurationError

_BOOL_FIELDS = (
    "exclude_type_forwarded_to_declarations",
    "use_public_accessibility_for_generated_types",
)
_LIST_FIELDS = ("include_generated_types", "exclude_generated_types")


@dataclass(frozen=True)
class GenerationOptions:
    """Immutable snapshot of the options relevant to type forwarding.

    Usually produced by ``forwardgen.config.resolve_options()``, but can be
    constructed directly by hosts that resolve configuration themselves.

    Example:
        options = GenerationOptions(use_public_accessibility_for_generated_types=True)
    """

    #: Disables every type forward, regardless of the other fields.
    exclude_type_forwarded_to_declarations: bool = False
    #: Generated polyfills are ``public`` instead of ``internal``.
    use_public_accessibility_for_generated_types: bool = False
    #: When non-empty, only these fully-qualified names are generated.
    include_generated_types: tuple[str, ...] = ()
    #: Never generated. Takes precedence over *include_generated_types*.
    exclude_generated_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate field shapes and normalize type lists to tuples."""
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be a bool, got {type(value).__name__}",
                    hint=f"Pass {name}=True or {name}=False.",
                )

        for name in _LIST_FIELDS:
            object.__setattr__(self, name, _normalize_type_names(name, getattr(self, name)))

    def __str__(self) -> str:
        """Return a compact representation that skips empty type lists."""
        fields = [f"{name}={getattr(self, name)!r}" for name in _BOOL_FIELDS]
        fields.extend(
            f"{name}={getattr(self, name)!r}"
            for name in _LIST_FIELDS
            if getattr(self, name)
        )
        return f"GenerationOptions({', '.join(fields)})"


def _normalize_type_names(field_name: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"{field_name} must be a collection of type names",
            hint=f"Pass {field_name}=('System.Index', 'System.Range').",
        )
    names = tuple(value)
    for item in names:
        if not isinstance(item, str) or not item.strip():
            raise ConfigurationError(
                f"{field_name} entries must be non-empty strings, got {item!r}",
                hint="Use fully-qualified metadata names like 'System.Index'.",
            )
    return tuple(item.strip() for item in names)


__all__ = ["GenerationOptions"]
