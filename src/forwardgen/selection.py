"""Phase 2: Decide which available types get a type forward."""

from __future__ import annotations

from collections.abc import Callable
import logging

from forwardgen.candidates import PUBLIC_ONLY_FORWARD_TYPE_NAMES
from forwardgen.options import GenerationOptions

log = logging.getLogger(__name__)

#: Signal from the wider pipeline: is this type selected for generation at all?
AvailabilitySelector = Callable[[str, GenerationOptions], bool]


def select_by_type_lists(type_name: str, options: GenerationOptions) -> bool:
    """Select a type for generation from the include/exclude lists.

    Exclusion wins. With no include list every type is selected.
    """
    if type_name in options.exclude_generated_types:
        return False
    if not options.include_generated_types:
        return True
    return type_name in options.include_generated_types


def is_core_lib_type_selected(
    type_name: str,
    options: GenerationOptions,
    is_available_type_selected: AvailabilitySelector = select_by_type_lists,
) -> bool:
    """Return whether a type forward should be emitted for ``type_name``.

    Checks run in a fixed order and stop at the first rejection; the
    availability signal is never evaluated when forwards are disabled.
    """
    if options.exclude_type_forwarded_to_declarations:
        return False

    # No polyfill for this type means nothing to forward either
    if not is_available_type_selected(type_name, options):
        return False

    if type_name in PUBLIC_ONLY_FORWARD_TYPE_NAMES:
        return options.use_public_accessibility_for_generated_types

    return True


def select_core_lib_types(
    available: tuple[str, ...],
    options: GenerationOptions,
    is_available_type_selected: AvailabilitySelector = select_by_type_lists,
) -> tuple[str, ...]:
    """Filter resolved names down to the selected ones, preserving order."""
    selected = tuple(
        name
        for name in available
        if is_core_lib_type_selected(name, options, is_available_type_selected)
    )
    log.debug("Selected %d of %d available type forwards", len(selected), len(available))
    return selected


__all__ = [
    "AvailabilitySelector",
    "is_core_lib_type_selected",
    "select_by_type_lists",
    "select_core_lib_types",
]
