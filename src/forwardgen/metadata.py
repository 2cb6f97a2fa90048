"""Metadata source protocol: what the resolver needs from a compilation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from forwardgen.errors import ConfigurationError
from forwardgen.language import LanguageVersion, parse_language_version


@runtime_checkable
class MetadataSource(Protocol):
    """Minimal compilation metadata: language gate and core library lookup."""

    def has_language_version_at_least(self, version: LanguageVersion) -> bool:
        """Whether the effective language version is at least ``version``."""
        ...

    def core_library_has_type(self, fully_qualified_name: str) -> bool:
        """Whether the assembly defining the root object type defines this type."""
        ...


@dataclass(frozen=True)
class InMemoryMetadataSource:
    """Metadata source backed by plain data.

    Stands in for a compiler front-end in tests and in hosts that already know
    the target's language version and core library contents.
    """

    language_version: LanguageVersion
    core_library_types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "language_version", parse_language_version(self.language_version)
        )
        types = self.core_library_types
        if isinstance(types, str) or not isinstance(types, Iterable):
            raise ConfigurationError(
                "core_library_types must be a collection of type names",
                hint="Pass core_library_types={'System.Index', 'System.Range'}.",
            )
        object.__setattr__(self, "core_library_types", frozenset(types))

    @classmethod
    def for_types(
        cls, language_version: LanguageVersion | int | str, *type_names: str
    ) -> InMemoryMetadataSource:
        """Build a source for ``language_version`` whose core library defines ``type_names``."""
        return cls(
            language_version=parse_language_version(language_version),
            core_library_types=frozenset(type_names),
        )

    def has_language_version_at_least(self, version: LanguageVersion) -> bool:
        return self.language_version >= version

    def core_library_has_type(self, fully_qualified_name: str) -> bool:
        return fully_qualified_name in self.core_library_types


__all__ = ["InMemoryMetadataSource", "MetadataSource"]
