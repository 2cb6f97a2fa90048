"""Type-forward selection policy."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from forwardgen.candidates import MODREQ_CANDIDATE_TYPE_NAMES
from forwardgen.options import GenerationOptions
from forwardgen.selection import (
    is_core_lib_type_selected,
    select_by_type_lists,
    select_core_lib_types,
)
from tests.helpers import INDEX, IS_EXTERNAL_INIT, RANGE, RecordingSelector

pytestmark = pytest.mark.unit

_type_names = st.sampled_from(MODREQ_CANDIDATE_TYPE_NAMES + ("System.Half",))
_options = st.builds(
    GenerationOptions,
    exclude_type_forwarded_to_declarations=st.booleans(),
    use_public_accessibility_for_generated_types=st.booleans(),
)


def _select_all(_name: str, _options: GenerationOptions) -> bool:
    return True


def _select_none(_name: str, _options: GenerationOptions) -> bool:
    return False


# --- Priority chain ---


def test_disabled_forwards_skip_the_selection_signal() -> None:
    selector = RecordingSelector(select_all=True)
    options = GenerationOptions(
        exclude_type_forwarded_to_declarations=True,
        use_public_accessibility_for_generated_types=True,
    )

    assert not is_core_lib_type_selected(IS_EXTERNAL_INIT, options, selector)
    assert selector.calls == []


def test_unselected_type_is_not_forwarded(public_options: GenerationOptions) -> None:
    selector = RecordingSelector(selected=frozenset({RANGE}))

    assert not is_core_lib_type_selected(INDEX, public_options, selector)
    assert selector.calls == [(INDEX, public_options)]


@pytest.mark.parametrize("name", [INDEX, RANGE])
def test_index_and_range_follow_public_accessibility(
    name: str,
    public_options: GenerationOptions,
    internal_options: GenerationOptions,
) -> None:
    assert is_core_lib_type_selected(name, public_options, _select_all)
    assert not is_core_lib_type_selected(name, internal_options, _select_all)


def test_other_types_ignore_public_accessibility(
    public_options: GenerationOptions,
    internal_options: GenerationOptions,
) -> None:
    assert is_core_lib_type_selected(IS_EXTERNAL_INIT, public_options, _select_all)
    assert is_core_lib_type_selected(IS_EXTERNAL_INIT, internal_options, _select_all)


def test_default_signal_is_type_lists() -> None:
    options = GenerationOptions(exclude_generated_types=(IS_EXTERNAL_INIT,))

    assert not is_core_lib_type_selected(IS_EXTERNAL_INIT, options)
    assert is_core_lib_type_selected(IS_EXTERNAL_INIT, GenerationOptions())


# --- Default availability signal ---


def test_type_lists_select_everything_without_include_list() -> None:
    assert select_by_type_lists(INDEX, GenerationOptions())


def test_type_lists_restrict_to_include_list() -> None:
    options = GenerationOptions(include_generated_types=(RANGE,))

    assert select_by_type_lists(RANGE, options)
    assert not select_by_type_lists(INDEX, options)


def test_type_lists_exclusion_wins_over_inclusion() -> None:
    options = GenerationOptions(
        include_generated_types=(INDEX, RANGE),
        exclude_generated_types=(INDEX,),
    )

    assert not select_by_type_lists(INDEX, options)
    assert select_by_type_lists(RANGE, options)


# --- Filtering ---


def test_select_core_lib_types_preserves_order(internal_options: GenerationOptions) -> None:
    available = (INDEX, RANGE, IS_EXTERNAL_INIT)

    assert select_core_lib_types(available, internal_options, _select_all) == (
        IS_EXTERNAL_INIT,
    )
    assert select_core_lib_types(
        available,
        GenerationOptions(use_public_accessibility_for_generated_types=True),
        _select_all,
    ) == available


# --- Laws ---


@given(name=_type_names, options=_options, independently_selected=st.booleans())
@settings(max_examples=50, deadline=None, derandomize=True)
def test_selection_laws(
    name: str, options: GenerationOptions, independently_selected: bool
) -> None:
    """Property: selection is the fixed boolean chain for every input."""
    selector = _select_all if independently_selected else _select_none
    result = is_core_lib_type_selected(name, options, selector)

    if options.exclude_type_forwarded_to_declarations or not independently_selected:
        assert result is False
    elif name in (INDEX, RANGE):
        assert result is options.use_public_accessibility_for_generated_types
    else:
        assert result is True
