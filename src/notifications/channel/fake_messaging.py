"""In-memory messaging adapter used by tests and local runs."""

from uuid import uuid4

from notifications.channel.messaging_port import MessagingPort


class FakeMessagingAdapter(MessagingPort):
    """Keeps every outbound WhatsApp message in memory instead of sending it.

    Messages are recorded with their message type so a test can pick out the
    restaurant's order message or a courier's assignment. Individual phone
    numbers can be marked unreachable to simulate a courier that cannot be
    contacted while the restaurant still receives its messages.
    """

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Message delivery failed"
        self.unreachable: set[str] = set()

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Message delivery failed",
        unreachable: tuple[str, ...] = (),
    ):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.unreachable = set(unreachable)

    def send(self, to: str, body: str, message_type: str | None = None) -> dict:
        if not self.should_succeed or to in self.unreachable:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"msg-{uuid4().hex[:12]}"
        self.sent_messages.append({"message_id": message_id, "to": to, "message_type": message_type, "body": body})

        return {"message_id": message_id, "status": "sent"}

    def messages_of_type(self, message_type: str) -> list[dict]:
        return [m for m in self.sent_messages if m["message_type"] == message_type]

    def reset(self):
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "Message delivery failed"
        self.unreachable = set()
