"""Checkout — turns the session cart into an order.

The handler checks the delivery address, prices the delivery, asks the Order
aggregate to snapshot the cart, clears the cart and tells the restaurant about
the new order. Everything runs in the command's unit of work: a failed check
leaves no order behind and the cart untouched.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from notifications.dispatch import notify_new_order
from ordering.cart.cart import ShoppingCart
from ordering.checkout.pricing import delivery_fee_for
from ordering.domain import logger, ordering
from ordering.order.order import FulfillmentType, Order, PaymentMethod
from shared.settings import get_settings


class MissingAddress(ValidationError):
    """Delivery was chosen without an address to deliver to."""

    def __init__(self):
        super().__init__({"delivery_address": ["A delivery address is required for delivery orders"]})


CARD_FIELDS = ("card_number", "card_holder", "card_expiry", "card_cvv")


def card_details(command) -> dict:
    """Card data for the order message, or ValidationError if any field is blank.

    Only the holder, the last four digits and the expiry leave checkout; the
    full number and the CVV are never forwarded.
    """
    values = {field: (getattr(command, field) or "").strip() for field in CARD_FIELDS}
    missing = [field for field, value in values.items() if not value]
    if missing:
        raise ValidationError({field: ["Required for card payments"] for field in missing})

    digits = "".join(ch for ch in values["card_number"] if ch.isdigit())
    return {
        "holder": values["card_holder"],
        "last_digits": digits[-4:],
        "expiry": values["card_expiry"],
    }


@ordering.command(part_of="Order")
class PlaceOrder:
    cart_id = Identifier(required=True)
    customer_name = String(required=True, max_length=255)
    customer_phone = String(required=True, max_length=30)
    customer_address = String(max_length=500)
    payment_method = String(choices=PaymentMethod, required=True)
    fulfillment_type = String(choices=FulfillmentType, default=FulfillmentType.DELIVERY.value)
    delivery_address = String(max_length=500)
    card_number = String(max_length=30)
    card_holder = String(max_length=255)
    card_expiry = String(max_length=7)
    card_cvv = String(max_length=4)
    total = Float()  # Optional: checked against the recomputed total


@ordering.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        settings = get_settings()
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.get(command.cart_id)

        fulfillment_type = FulfillmentType(command.fulfillment_type)
        delivery_address = (command.delivery_address or "").strip() or None
        if fulfillment_type == FulfillmentType.DELIVERY and delivery_address is None:
            raise MissingAddress()
        if not cart.lines:
            raise ValidationError({"cart_id": ["Cannot check out an empty cart"]})

        payment = {"method": command.payment_method}
        if command.payment_method == PaymentMethod.PIX.value:
            payment["pix_key"] = settings.pix_key
        else:
            payment["card"] = card_details(command)

        subtotal = cart.total_price()
        delivery_fee = delivery_fee_for(subtotal, fulfillment_type, settings)

        order = Order.create(
            lines=cart.snapshot_lines(),
            customer={
                "name": command.customer_name,
                "phone": command.customer_phone,
                "address": command.customer_address,
            },
            payment_method=command.payment_method,
            fulfillment_type=fulfillment_type.value,
            delivery_address=delivery_address,
            delivery_fee=delivery_fee,
            total=command.total,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        notify_new_order(order, payment, settings)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            reference=order.reference,
            total=order.total,
            fulfillment_type=order.fulfillment_type,
        )
        return str(order.id)
