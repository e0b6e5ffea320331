"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_url() -> str:
    """Sample URL that exercises scheme and expansion codes."""
    return "http://www.eff.org"


@pytest.fixture
def sample_payload() -> bytes:
    """Encoded form of sample_url."""
    return b"\x00eff\x08"


@pytest.fixture
def sample_uuid_urn() -> str:
    """Sample urn:uuid URN."""
    return "urn:uuid:12345678-1234-5678-1234-567812345678"
