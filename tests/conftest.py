"""Pytest configuration and fixtures.

Provides environment isolation and shared option fixtures. Environment
fixtures are autouse; test doubles live in tests/helpers.py.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from forwardgen.options import GenerationOptions

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_forwardgen_env(request, monkeypatch, tmp_path):
    """Clear FORWARDGEN_* variables and point config at an empty pyproject.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FORWARDGEN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FORWARDGEN_PYPROJECT_PATH", str(tmp_path / "missing.toml"))


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def public_options() -> GenerationOptions:
    """Forwarding enabled with public accessibility."""
    return GenerationOptions(use_public_accessibility_for_generated_types=True)


@pytest.fixture
def internal_options() -> GenerationOptions:
    """Forwarding enabled with internal (default) accessibility."""
    return GenerationOptions()
