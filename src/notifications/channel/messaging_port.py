"""Messaging channel port — abstract interface for outbound text messages."""

from abc import ABC, abstractmethod


class MessagingPort(ABC):
    """Abstract interface for messaging adapters (WhatsApp and friends)."""

    @abstractmethod
    def send(self, to: str, body: str, message_type: str | None = None) -> dict:
        """Hand a text message to the outbound surface.

        Args:
            to: Recipient phone number, digits only, with country code.
            body: Fully formatted message text.
            message_type: Template the body was rendered from, e.g. "NewOrder".

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
