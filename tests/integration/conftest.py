"""Fixtures for end-to-end tests against the assembled storefront app.

The app pushes the domain context per request, so these tests never push one
themselves. Every domain's stores are wiped after each test.
"""

import pytest
from fastapi.testclient import TestClient


def _reset(domain):
    from protean import current_domain

    with domain.domain_context():
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def client():
    """TestClient over the real app; entering it runs the lifespan, which seeds the menu."""
    from app import app, identity, menu, ordering

    with TestClient(app) as test_client:
        yield test_client

    for domain in (identity, menu, ordering):
        _reset(domain)
