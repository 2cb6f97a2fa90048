"""forwardgen: Type-forward selection and emission for polyfill libraries.

Decides which well-known runtime types a compilation's core library already
defines, and emits ``TypeForwardedTo`` sources for the ones a polyfill library
would otherwise duplicate.

Public API:
    - generate_type_forwards(): One generation pass for a compilation
    - resolve_options(): Layered configuration into GenerationOptions
    - GenerationOptions: Immutable option snapshot
    - MetadataSource / InMemoryMetadataSource: Compilation metadata
    - InMemorySink / DirectorySink: Destinations for generated sources
"""

from __future__ import annotations

import logging

from forwardgen.availability import MIN_LANGUAGE_VERSION, resolve_available_core_lib_types
from forwardgen.cache import AvailabilityCache
from forwardgen.cancellation import CancellationToken
from forwardgen.candidates import MODREQ_CANDIDATE_TYPE_NAMES, PUBLIC_ONLY_FORWARD_TYPE_NAMES
from forwardgen.config import resolve_options
from forwardgen.emit import GeneratedArtifact, build_type_forward_artifact, emit_type_forward
from forwardgen.errors import ArtifactConflictError, ConfigurationError, ForwardgenError
from forwardgen.generator import generate_type_forwards
from forwardgen.language import LanguageVersion, parse_language_version
from forwardgen.metadata import InMemoryMetadataSource, MetadataSource
from forwardgen.options import GenerationOptions
from forwardgen.selection import is_core_lib_type_selected, select_by_type_lists
from forwardgen.sinks import DirectorySink, InMemorySink, OutputSink

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("forwardgen")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("forwardgen").addHandler(logging.NullHandler())

__all__ = [
    "MIN_LANGUAGE_VERSION",
    "MODREQ_CANDIDATE_TYPE_NAMES",
    "PUBLIC_ONLY_FORWARD_TYPE_NAMES",
    "ArtifactConflictError",
    "AvailabilityCache",
    "CancellationToken",
    "ConfigurationError",
    "DirectorySink",
    "ForwardgenError",
    "GeneratedArtifact",
    "GenerationOptions",
    "InMemoryMetadataSource",
    "InMemorySink",
    "LanguageVersion",
    "MetadataSource",
    "OutputSink",
    "build_type_forward_artifact",
    "emit_type_forward",
    "generate_type_forwards",
    "is_core_lib_type_selected",
    "parse_language_version",
    "resolve_available_core_lib_types",
    "resolve_options",
    "select_by_type_lists",
]
