"""Exception hierarchy for forwardgen."""

from __future__ import annotations


class ForwardgenError(Exception):
    """Base exception for all forwardgen errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ForwardgenError):
    """Options, language version, or settings resolution failed."""


class ArtifactConflictError(ForwardgenError):
    """An output sink rejected a generated artifact.

    Raised for duplicate hint names within one sink and for hint names that
    would escape the sink's output location.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        hint_name: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.hint_name = hint_name
