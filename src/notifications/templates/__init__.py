"""Template registry — maps MessageType to template classes."""

from notifications.message_types import MessageType
from notifications.templates.courier_assignment import CourierAssignmentTemplate
from notifications.templates.new_order import NewOrderTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    MessageType.NEW_ORDER.value: NewOrderTemplate,
    MessageType.COURIER_ASSIGNMENT.value: CourierAssignmentTemplate,
}


def get_template(message_type: str):
    """Look up a template class by message type string."""
    template_cls = TEMPLATE_REGISTRY.get(message_type)
    if template_cls is None:
        raise ValueError(f"No template registered for message type: {message_type}")
    return template_cls
