"""Type-forward generation pass: resolve, select, emit."""

from __future__ import annotations

from collections.abc import Hashable
import logging
from typing import TYPE_CHECKING

from forwardgen.availability import MIN_LANGUAGE_VERSION, resolve_available_core_lib_types
from forwardgen.cancellation import is_cancelled
from forwardgen.emit import emit_type_forward
from forwardgen.errors import ConfigurationError
from forwardgen.selection import select_by_type_lists, select_core_lib_types

if TYPE_CHECKING:
    from forwardgen.cache import AvailabilityCache
    from forwardgen.cancellation import CancellationSignal
    from forwardgen.emit import GeneratedArtifact
    from forwardgen.language import LanguageVersion
    from forwardgen.metadata import MetadataSource
    from forwardgen.options import GenerationOptions
    from forwardgen.selection import AvailabilitySelector
    from forwardgen.sinks import OutputSink

log = logging.getLogger(__name__)


def generate_type_forwards(
    metadata: MetadataSource,
    options: GenerationOptions,
    sink: OutputSink,
    *,
    is_available_type_selected: AvailabilitySelector = select_by_type_lists,
    token: CancellationSignal | None = None,
    cache: AvailabilityCache | None = None,
    compilation_key: Hashable | None = None,
    min_language_version: LanguageVersion = MIN_LANGUAGE_VERSION,
) -> tuple[GeneratedArtifact, ...]:
    """Run one type-forward generation pass for a compilation.

    Args:
        metadata: Metadata for the compilation being generated.
        options: Resolved generation options.
        sink: Receives one source per selected forward.
        is_available_type_selected: Whether the wider pipeline generates a
            polyfill for a type; forwards are only emitted for those.
        token: Optional cancellation signal, polled between candidates.
        cache: Optional memoization of availability results; requires
            *compilation_key*.
        compilation_key: Identity of the compilation within *cache*.
        min_language_version: Language gate for availability resolution.

    Returns:
        The emitted artifacts, in candidate order. A cancelled pass returns
        whatever was emitted before cancellation was observed.

    Raises:
        ConfigurationError: If only one of *cache* and *compilation_key* is given.

    Example:
        sink = InMemorySink()
        metadata = InMemoryMetadataSource.for_types("latest", "System.Index")
        generate_type_forwards(metadata, GenerationOptions(), sink)
    """
    if (cache is None) != (compilation_key is None):
        raise ConfigurationError(
            "cache and compilation_key must be passed together",
            hint="Pass both to memoize availability, or neither.",
        )

    if cache is not None:
        available = cache.get_or_resolve(
            compilation_key, metadata, min_language_version, token=token
        )
    else:
        available = resolve_available_core_lib_types(
            metadata, min_language_version, token=token
        )

    selected = select_core_lib_types(available, options, is_available_type_selected)

    emitted: list[GeneratedArtifact] = []
    cancelled = False
    for name in selected:
        if is_cancelled(token):
            cancelled = True
            break
        emitted.append(emit_type_forward(sink, name))

    if cancelled:
        log.warning(
            "Type-forward generation cancelled after %d of %d forwards",
            len(emitted),
            len(selected),
        )
    else:
        log.debug(
            "Type forwards: %d available, %d emitted", len(available), len(emitted)
        )
    return tuple(emitted)


__all__ = ["generate_type_forwards"]
