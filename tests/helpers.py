"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: metadata sources and selection signals
that record what the code under test asked them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from forwardgen.language import LanguageVersion
from forwardgen.options import GenerationOptions

INDEX = "System.Index"
RANGE = "System.Range"
IS_EXTERNAL_INIT = "System.Runtime.CompilerServices.IsExternalInit"


@dataclass
class RecordingMetadataSource:
    """Metadata source double that records every query it answers."""

    language_version: LanguageVersion = LanguageVersion.CSHARP12
    present: frozenset[str] = frozenset()
    version_queries: list[LanguageVersion] = field(default_factory=list)
    type_queries: list[str] = field(default_factory=list)

    def has_language_version_at_least(self, version: LanguageVersion) -> bool:
        self.version_queries.append(version)
        return self.language_version >= version

    def core_library_has_type(self, fully_qualified_name: str) -> bool:
        self.type_queries.append(fully_qualified_name)
        return fully_qualified_name in self.present


@dataclass
class RecordingSelector:
    """Availability-selection signal that records calls and answers from a set."""

    selected: frozenset[str] = frozenset()
    select_all: bool = False
    calls: list[tuple[str, GenerationOptions]] = field(default_factory=list)

    def __call__(self, type_name: str, options: GenerationOptions) -> bool:
        self.calls.append((type_name, options))
        return self.select_all or type_name in self.selected


class CancelAfter:
    """Token that reports cancellation after being polled ``polls`` times."""

    def __init__(self, polls: int) -> None:
        self.remaining = polls
        self.poll_count = 0

    @property
    def is_cancellation_requested(self) -> bool:
        self.poll_count += 1
        if self.remaining <= 0:
            return True
        self.remaining -= 1
        return False
