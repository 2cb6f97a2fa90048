"""Phase 1: Resolve which candidate types the targeted core library defines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forwardgen.cancellation import is_cancelled
from forwardgen.candidates import MODREQ_CANDIDATE_TYPE_NAMES
from forwardgen.language import LanguageVersion

if TYPE_CHECKING:
    from collections.abc import Sequence

    from forwardgen.cancellation import CancellationSignal
    from forwardgen.metadata import MetadataSource

log = logging.getLogger(__name__)

#: Polyfills are only generated from C# 8 on, so forwards are never needed below it.
MIN_LANGUAGE_VERSION = LanguageVersion.CSHARP8


def resolve_available_core_lib_types(
    metadata: MetadataSource,
    min_language_version: LanguageVersion = MIN_LANGUAGE_VERSION,
    *,
    token: CancellationSignal | None = None,
    candidates: Sequence[str] = MODREQ_CANDIDATE_TYPE_NAMES,
) -> tuple[str, ...]:
    """Return the candidates defined in the core library, in candidate order.

    Args:
        metadata: Metadata for the current compilation.
        min_language_version: Below this version nothing is resolved.
        token: Optional cancellation signal, polled before each lookup.
        candidates: Names to check; defaults to the modreq candidate registry.

    Returns:
        The present candidate names. Empty when the language gate fails or
        when cancellation was observed (nothing partial is returned).
    """
    if not metadata.has_language_version_at_least(min_language_version):
        log.debug(
            "Language version below %s; no type forwards resolved",
            min_language_version,
        )
        return ()

    found: list[str] = []
    for name in candidates:
        if is_cancelled(token):
            log.debug("Availability resolution cancelled before %s", name)
            return ()
        if metadata.core_library_has_type(name):
            found.append(name)
        else:
            log.debug("%s not defined in core library", name)

    return tuple(found)


__all__ = ["MIN_LANGUAGE_VERSION", "resolve_available_core_lib_types"]
