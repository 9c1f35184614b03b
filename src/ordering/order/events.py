"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A cart was turned into an order at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    reference = String(required=True, max_length=50)
    customer_name = String(required=True, max_length=255)
    customer_phone = String(required=True, max_length=30)
    payment_method = String(required=True, max_length=10)
    fulfillment_type = String(required=True, max_length=10)
    item_count = Integer(required=True)
    subtotal = Float(required=True)
    delivery_fee = Float(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """Staff (or a delivered courier run) moved the order one step forward."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
    changed_at = DateTime(required=True)
