"""Phase 3: Render and register type-forward sources."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from forwardgen.sinks import OutputSink

log = logging.getLogger(__name__)

GENERATED_FILE_SUFFIX: Final[str] = ".g.cs"

_TYPE_FORWARD_TEMPLATE: Final[str] = "\n".join(
    (
        "// <auto-generated/>",
        "#pragma warning disable",
        "",
        "[assembly: global::System.Runtime.CompilerServices.TypeForwardedTo("
        "typeof(global::{type_name}))]",
    )
)


@dataclass(frozen=True)
class GeneratedArtifact:
    """One generated source file: the hint name it is registered under and its text."""

    hint_name: str
    source_text: str


def type_forward_hint_name(type_name: str) -> str:
    """Return the hint name for the forward of ``type_name``."""
    return f"{type_name}{GENERATED_FILE_SUFFIX}"


def build_type_forward_artifact(type_name: str) -> GeneratedArtifact:
    """Render the assembly-level ``TypeForwardedTo`` source for ``type_name``.

    ``type_name`` must be a fully-qualified metadata name that was already
    resolved and selected; it is not validated here.
    """
    return GeneratedArtifact(
        hint_name=type_forward_hint_name(type_name),
        source_text=_TYPE_FORWARD_TEMPLATE.format(type_name=type_name),
    )


def emit_type_forward(sink: OutputSink, type_name: str) -> GeneratedArtifact:
    """Build the forward for ``type_name`` and register it with ``sink``."""
    artifact = build_type_forward_artifact(type_name)
    sink.add_source(artifact.hint_name, artifact.source_text)
    log.debug("Emitted %s", artifact.hint_name)
    return artifact


__all__ = [
    "GENERATED_FILE_SUFFIX",
    "GeneratedArtifact",
    "build_type_forward_artifact",
    "emit_type_forward",
    "type_forward_hint_name",
]
