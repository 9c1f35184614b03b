"""WhatsApp click-to-chat adapter.

The restaurant has no WhatsApp Business API account: the message is handed
off as a ``wa.me`` link with the text pre-filled, which the staff or shopper
opens to actually send it.
"""

from urllib.parse import quote
from uuid import uuid4

import structlog

from notifications.channel.messaging_port import MessagingPort

logger = structlog.get_logger(__name__)

WA_ME_URL = "https://wa.me/{phone}?text={text}"


def build_link(to: str, body: str) -> str:
    return WA_ME_URL.format(phone=to, text=quote(body, safe=""))


class WhatsAppLinkAdapter(MessagingPort):
    def send(self, to: str, body: str, message_type: str | None = None) -> dict:
        if not to:
            return {"message_id": None, "status": "failed", "error": "Recipient phone is empty"}

        url = build_link(to, body)
        logger.info("WhatsApp hand-off link ready", to=to, message_type=message_type, url=url)
        return {"message_id": f"wa-{uuid4().hex[:12]}", "status": "sent", "url": url}
