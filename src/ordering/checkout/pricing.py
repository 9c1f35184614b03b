"""Delivery fee rules applied at checkout."""

from ordering.order.order import FulfillmentType


def delivery_fee_for(subtotal: float, fulfillment_type, settings) -> float:
    """Fee for the chosen fulfillment.

    Pickup is free. Delivery costs the base fee, plus the small-order
    surcharge when the cart is below the restaurant's minimum order.
    """
    if FulfillmentType(fulfillment_type) == FulfillmentType.PICKUP:
        return 0.0

    fee = settings.delivery_fee
    if subtotal < settings.minimum_order:
        fee += settings.small_order_surcharge
    return round(fee, 2)
