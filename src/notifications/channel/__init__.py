"""Messaging adapter registry.

Provides singleton access to the configured messaging adapter. The fake
adapter is the default; ``MESSAGING_ADAPTER=whatsapp_link`` switches to the
``wa.me`` hand-off links the restaurant actually uses.
"""

import os

_channel_instances: dict[str, object] = {}

FAKE = "fake"
WHATSAPP_LINK = "whatsapp_link"


def get_channel(adapter: str | None = None):
    """Return the configured messaging adapter (singleton per adapter name).

    Args:
        adapter: "fake" or "whatsapp_link". Defaults to ``MESSAGING_ADAPTER``.
    """
    adapter = adapter or os.getenv("MESSAGING_ADAPTER", FAKE)

    if adapter not in _channel_instances:
        if adapter == FAKE:
            from notifications.channel.fake_messaging import FakeMessagingAdapter

            _channel_instances[adapter] = FakeMessagingAdapter()
        elif adapter == WHATSAPP_LINK:
            from notifications.channel.whatsapp_link import WhatsAppLinkAdapter

            _channel_instances[adapter] = WhatsAppLinkAdapter()
        else:
            raise ValueError(f"Unknown messaging adapter: {adapter}")

    return _channel_instances[adapter]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
