"""Exception hierarchy and hint propagation."""

from __future__ import annotations

import pytest

from forwardgen.errors import ArtifactConflictError, ConfigurationError, ForwardgenError

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("cls", [ConfigurationError, ArtifactConflictError])
def test_errors_share_the_base_class(cls: type[ForwardgenError]) -> None:
    err = cls("boom", hint="try this")

    assert isinstance(err, ForwardgenError)
    assert str(err) == "boom"
    assert err.hint == "try this"


def test_hint_defaults_to_none() -> None:
    assert ForwardgenError("x").hint is None


def test_artifact_conflict_carries_hint_name() -> None:
    err = ArtifactConflictError("dup", hint_name="System.Index.g.cs")

    assert err.hint_name == "System.Index.g.cs"
    assert err.hint is None
