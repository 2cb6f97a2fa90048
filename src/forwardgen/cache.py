"""Caller-owned memoization of availability results.

The core keeps no state between passes. Hosts that revisit the same
compilation (incremental builds, editor sessions) can hold an
``AvailabilityCache`` and key it by whatever identifies a compilation for them.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
import logging
import threading
from typing import TYPE_CHECKING

from forwardgen.availability import MIN_LANGUAGE_VERSION, resolve_available_core_lib_types
from forwardgen.cancellation import is_cancelled

if TYPE_CHECKING:
    from forwardgen.cancellation import CancellationSignal
    from forwardgen.language import LanguageVersion
    from forwardgen.metadata import MetadataSource

log = logging.getLogger(__name__)


@dataclass
class AvailabilityCache:
    """Maps compilation keys to resolved availability results.

    Entries are stored per ``(key, min_language_version)`` pair, since the
    language gate is part of the result.
    """

    _entries: dict[tuple[Hashable, LanguageVersion], tuple[str, ...]] = field(
        default_factory=dict
    )
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def get(
        self,
        key: Hashable,
        min_language_version: LanguageVersion = MIN_LANGUAGE_VERSION,
    ) -> tuple[str, ...] | None:
        """Return the stored result for ``key`` at this threshold, if any."""
        with self._lock:
            return self._entries.get((key, min_language_version))

    def set(
        self,
        key: Hashable,
        result: tuple[str, ...],
        min_language_version: LanguageVersion = MIN_LANGUAGE_VERSION,
    ) -> None:
        """Store ``result`` for ``key`` at this threshold, replacing any entry."""
        with self._lock:
            self._entries[(key, min_language_version)] = tuple(result)

    def clear(self) -> None:
        """Drop every stored result."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_or_resolve(
        self,
        key: Hashable,
        metadata: MetadataSource,
        min_language_version: LanguageVersion = MIN_LANGUAGE_VERSION,
        *,
        token: CancellationSignal | None = None,
    ) -> tuple[str, ...]:
        """Return the cached result for ``key``, resolving it on a miss.

        Results of a cancelled resolution are returned but never stored.
        Two threads missing the same key may both resolve; the result is a pure
        function of the compilation, so the later write is identical.
        """
        cached = self.get(key, min_language_version)
        if cached is not None:
            log.debug("Availability cache hit for %r at %s", key, min_language_version)
            return cached

        log.debug("Availability cache miss for %r at %s", key, min_language_version)
        result = resolve_available_core_lib_types(
            metadata, min_language_version, token=token
        )
        if not is_cancelled(token):
            self.set(key, result, min_language_version)
        return result


__all__ = ["AvailabilityCache"]
