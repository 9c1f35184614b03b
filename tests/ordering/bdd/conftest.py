"""Shared BDD fixtures for the Ordering domain."""

import pytest


def _names(raw: str) -> list[str]:
    """Split '"A", "B" and "C"' into ['A', 'B', 'C']."""
    return [part.strip().strip('"') for part in raw.replace(" and ", ", ").split(",") if part.strip()]


@pytest.fixture()
def names():
    return _names


@pytest.fixture()
def state():
    """Ids and outcomes carried from one step to the next."""
    return {}
