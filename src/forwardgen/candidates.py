"""Fixed candidate data for type-forward generation."""

from __future__ import annotations

from typing import Final

#: Types that could require a ``modreq`` when used in signatures, in emission order.
MODREQ_CANDIDATE_TYPE_NAMES: Final[tuple[str, ...]] = (
    "System.Index",
    "System.Range",
    "System.Runtime.CompilerServices.IsExternalInit",
)

#: Forwards for these types are only emitted when generated polyfills are public.
PUBLIC_ONLY_FORWARD_TYPE_NAMES: Final[frozenset[str]] = frozenset(
    {"System.Index", "System.Range"}
)

__all__ = ["MODREQ_CANDIDATE_TYPE_NAMES", "PUBLIC_ONLY_FORWARD_TYPE_NAMES"]
