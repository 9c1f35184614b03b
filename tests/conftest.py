import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Sets the protean config overlay and makes sure tests never open real
    WhatsApp links.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["MESSAGING_ADAPTER"] = "fake"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Start every test with a clean messaging channel."""
    from notifications.channel import reset_channels

    reset_channels()

    yield

    reset_channels()


@pytest.fixture()
def sent_messages():
    """Messages recorded by the fake messaging adapter during the test."""
    from notifications.channel import get_channel

    return get_channel("fake").sent_messages
