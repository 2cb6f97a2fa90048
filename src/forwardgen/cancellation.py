"""Cooperative cancellation for generation passes.

Work loops poll ``is_cancellation_requested`` between steps and stop early.
Cancellation never raises; callers inspect the token to tell a cancelled pass
from one that simply produced nothing.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable


@runtime_checkable
class CancellationSignal(Protocol):
    """Anything exposing a pollable cancellation flag."""

    @property
    def is_cancellation_requested(self) -> bool:
        """Whether the host asked for the remaining work to be abandoned."""
        ...


class CancellationToken:
    """Thread-safe, one-way cancellation flag."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent; there is no way to reset."""
        self._event.set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"


class _NeverCancelled:
    __slots__ = ()

    @property
    def is_cancellation_requested(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "CancellationToken.NONE"


#: Shared token that is never cancelled.
NONE: CancellationSignal = _NeverCancelled()


def is_cancelled(token: CancellationSignal | None) -> bool:
    """Return True when ``token`` is given and has been cancelled."""
    return token is not None and token.is_cancellation_requested


__all__ = ["NONE", "CancellationSignal", "CancellationToken", "is_cancelled"]
