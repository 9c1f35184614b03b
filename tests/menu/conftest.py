import os

import pytest


@pytest.fixture(scope="session")
def _menu_domain(request):
    """Initialize the menu domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from menu.domain import menu

    menu.init()
    return menu


@pytest.fixture(autouse=True)
def run_around_menu_tests(_menu_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _menu_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()
