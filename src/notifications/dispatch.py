"""Outbound order and courier messages.

Renders the message for an order or a courier assignment and hands it to the
configured messaging adapter. A failing channel never breaks the ordering
flow: the failure is logged and returned to the caller as a failed result.
"""

import re

import structlog

from notifications.channel import get_channel
from notifications.message_types import MessageType
from notifications.templates import get_template
from shared.settings import get_settings

logger = structlog.get_logger(__name__)

COUNTRY_CODE = "55"


def courier_recipient(phone: str) -> str:
    """Courier phones are typed locally; keep the digits and prefix Brazil's code."""
    return COUNTRY_CODE + re.sub(r"\D", "", phone or "")


def _format_timestamp(value) -> str:
    return value.strftime("%d/%m/%Y %H:%M:%S") if value else ""


def new_order_context(order, payment: dict) -> dict:
    return {
        "reference": order.reference,
        "customer_name": order.customer.name,
        "customer_phone": order.customer.phone,
        "fulfillment_type": order.fulfillment_type,
        "delivery_address": order.delivery_address,
        "items": [
            {
                "quantity": line.quantity,
                "name": line.product.name,
                "line_total": line.line_total,
                "observation": line.observation,
            }
            for line in order.lines
        ],
        "total": order.total,
        "payment_method": payment.get("method", order.payment_method),
        "pix_key": payment.get("pix_key"),
        "card": payment.get("card"),
        "placed_at": _format_timestamp(order.created_at),
    }


def courier_context(assignment, order) -> dict:
    return {
        "reference": order.reference,
        "customer_name": order.customer.name,
        "customer_phone": order.customer.phone,
        "address": order.delivery_address or order.customer.address,
        "total": order.total,
        "estimated_time": assignment.estimated_time,
    }


def _send(to: str, message_type: str, context: dict, **log_context) -> dict:
    rendered = get_template(message_type).render(context)

    try:
        result = get_channel().send(to=to, body=rendered["body"], message_type=message_type)
    except Exception as e:
        logger.error("Message dispatch failed", message_type=message_type, error=str(e), **log_context)
        return {"message_id": None, "status": "failed", "error": str(e)}

    if result.get("status") == "sent":
        logger.info("Message sent", message_type=message_type, message_id=result.get("message_id"), **log_context)
    else:
        logger.warning(
            "Message was not sent",
            message_type=message_type,
            error=result.get("error"),
            **log_context,
        )
    return result


def notify_new_order(order, payment: dict, settings=None) -> dict:
    """Send the new order to the restaurant's WhatsApp number.

    Args:
        order: The freshly placed ``Order``.
        payment: Dict with ``method`` plus ``pix_key`` for PIX or ``card``
                (holder, last digits, expiry) for card payments.
    """
    settings = settings or get_settings()
    return _send(
        settings.whatsapp_number,
        MessageType.NEW_ORDER.value,
        new_order_context(order, payment),
        order_id=str(order.id),
    )


def notify_courier(assignment, order) -> dict:
    """Send the pickup details to the courier assigned to ``order``."""
    return _send(
        courier_recipient(assignment.courier_phone),
        MessageType.COURIER_ASSIGNMENT.value,
        courier_context(assignment, order),
        order_id=str(order.id),
        assignment_id=str(assignment.id),
    )
