"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from proxchat.geometry import ReachabilityTable, TableConfig, build_reachability_table, get_default_table


@pytest.fixture
def table() -> ReachabilityTable:
    """Process-wide default reachability table."""
    return get_default_table()


@pytest.fixture
def tiny_table() -> ReachabilityTable:
    """Single-entry table (bit width 0)."""
    return build_reachability_table(TableConfig(interaction_radius=1.0))


@pytest.fixture
def sample_text() -> str:
    """Sample chat message for testing."""
    return "hi"


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, proximity world!"
