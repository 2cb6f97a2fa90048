"""Output sinks: where emitted sources are registered.

A sink owns persistence and deduplication. Registration is write-once per
hint name within a single sink instance, mirroring how compiler hosts reject
a second source with the same hint name.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path, PurePath
from typing import Protocol, runtime_checkable

from forwardgen.emit import GeneratedArtifact
from forwardgen.errors import ArtifactConflictError

log = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Accepts generated sources keyed by hint name."""

    def add_source(self, hint_name: str, source_text: str) -> None:
        """Register ``source_text`` under ``hint_name``."""
        ...


class InMemorySink:
    """Collects generated sources in registration order."""

    def __init__(self) -> None:
        """Initialize an empty, process-local collection."""
        self._sources: dict[str, str] = {}

    def add_source(self, hint_name: str, source_text: str) -> None:
        _reject_duplicate(hint_name, self._sources)
        self._sources[hint_name] = source_text

    def get(self, hint_name: str) -> str | None:
        """Return the source registered under ``hint_name``, if any."""
        return self._sources.get(hint_name)

    @property
    def artifacts(self) -> tuple[GeneratedArtifact, ...]:
        """All registered sources as artifacts, in registration order."""
        return tuple(
            GeneratedArtifact(hint_name=name, source_text=text)
            for name, text in self._sources.items()
        )

    def __contains__(self, hint_name: object) -> bool:
        return hint_name in self._sources

    def __len__(self) -> int:
        return len(self._sources)


class DirectorySink:
    """Writes each generated source to ``root / hint_name``.

    Files left by earlier runs are overwritten, so re-running with identical
    inputs leaves byte-identical files behind.
    """

    def __init__(self, root: str | Path) -> None:
        """Create a sink writing below ``root``; the directory is created lazily."""
        self.root = Path(root)
        self._written: dict[str, Path] = {}

    def add_source(self, hint_name: str, source_text: str) -> None:
        _reject_duplicate(hint_name, self._written)
        _reject_unsafe(hint_name)

        self.root.mkdir(parents=True, exist_ok=True)
        path = self.root / hint_name
        # newline="" keeps the generated "\n" line endings on every platform
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(source_text)
        self._written[hint_name] = path
        log.debug("Wrote %s", path)

    @property
    def written_paths(self) -> tuple[Path, ...]:
        """Paths written by this sink, in registration order."""
        return tuple(self._written.values())

    def __len__(self) -> int:
        return len(self._written)


def _reject_duplicate(hint_name: str, seen: Mapping[str, object]) -> None:
    if hint_name in seen:
        raise ArtifactConflictError(
            f"A source named {hint_name!r} was already added",
            hint="Each hint name can be registered once per sink.",
            hint_name=hint_name,
        )


def _reject_unsafe(hint_name: str) -> None:
    parts = PurePath(hint_name).parts
    if (
        not hint_name
        or "/" in hint_name
        or "\\" in hint_name
        or len(parts) != 1
        or parts[0] in {".", ".."}
    ):
        raise ArtifactConflictError(
            f"Hint name {hint_name!r} is not a plain file name",
            hint="Hint names must not contain path separators or '..'.",
            hint_name=hint_name,
        )


__all__ = ["DirectorySink", "InMemorySink", "OutputSink"]
