"""Candidate registry contents and ordering."""

from __future__ import annotations

import pytest

from forwardgen.candidates import (
    MODREQ_CANDIDATE_TYPE_NAMES,
    PUBLIC_ONLY_FORWARD_TYPE_NAMES,
)

pytestmark = pytest.mark.unit


def test_registry_lists_modreq_candidates_in_fixed_order() -> None:
    assert MODREQ_CANDIDATE_TYPE_NAMES == (
        "System.Index",
        "System.Range",
        "System.Runtime.CompilerServices.IsExternalInit",
    )


def test_registry_is_immutable_and_unique() -> None:
    assert isinstance(MODREQ_CANDIDATE_TYPE_NAMES, tuple)
    assert len(set(MODREQ_CANDIDATE_TYPE_NAMES)) == len(MODREQ_CANDIDATE_TYPE_NAMES)


def test_public_only_names_are_index_and_range() -> None:
    assert frozenset({"System.Index", "System.Range"}) == PUBLIC_ONLY_FORWARD_TYPE_NAMES
    assert PUBLIC_ONLY_FORWARD_TYPE_NAMES <= set(MODREQ_CANDIDATE_TYPE_NAMES)
