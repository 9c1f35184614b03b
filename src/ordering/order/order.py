"""Order aggregate — the append-only ledger entry created at checkout.

An order is created once from a snapshot of the cart and afterwards only
moves through its status machine. Nothing is ever deleted.

State Machine:
    PENDING → PREPARING → READY → DELIVERED

Only the single next step is accepted; asking for the current status again is
a no-op. Skipped or backward moves are rejected by ``transition()``.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, ValueObject

from ordering.domain import ordering
from ordering.order.events import OrderPlaced, OrderStatusChanged
from ordering.snapshot import ProductSnapshot
from ordering.transitions import next_status, resolve_transition

# Caller-supplied totals may differ from the recomputed one by rounding only
TOTAL_TOLERANCE = 0.005


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"


class PaymentMethod(Enum):
    PIX = "pix"
    CARD = "card"


class FulfillmentType(Enum):
    DELIVERY = "delivery"
    PICKUP = "pickup"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PREPARING},
    OrderStatus.PREPARING: {OrderStatus.READY},
    OrderStatus.READY: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
}


def transition(current, requested) -> OrderStatus:
    """Resolve a requested order status against the current one."""
    return resolve_transition(OrderStatus, _VALID_TRANSITIONS, current, requested)


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class CustomerInfo:
    """Who placed the order, copied from the account at checkout time."""

    name = String(required=True, max_length=255)
    phone = String(required=True, max_length=30)
    address = String(max_length=500)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLine:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)
    observation = String(max_length=500)

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    reference = String(required=True, max_length=50)
    lines = HasMany(OrderLine)
    customer = ValueObject(CustomerInfo, required=True)
    payment_method = String(choices=PaymentMethod, required=True)
    fulfillment_type = String(choices=FulfillmentType, default=FulfillmentType.DELIVERY.value)
    delivery_address = String(max_length=500)
    subtotal = Float(default=0.0)
    delivery_fee = Float(default=0.0)
    total = Float(default=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        lines,
        customer,
        payment_method,
        fulfillment_type=FulfillmentType.DELIVERY.value,
        delivery_address=None,
        delivery_fee=0.0,
        total=None,
    ):
        """Create a pending order from a snapshot of cart lines.

        Args:
            lines: List of dicts with product_id, name, price, original_price,
                   quantity and observation (see ``ShoppingCart.snapshot_lines``).
            customer: Dict with name, phone and address, or a ``CustomerInfo``.
            total: Optional total computed by the caller. It must agree with
                   the sum of the lines plus ``delivery_fee``.
        """
        if not lines:
            raise ValidationError({"lines": ["An order needs at least one line"]})
        if isinstance(customer, dict):
            customer = CustomerInfo(**customer)

        order_lines = [
            OrderLine(
                product=ProductSnapshot(
                    product_id=line["product_id"],
                    name=line["name"],
                    price=line["price"],
                    original_price=line.get("original_price"),
                ),
                quantity=line["quantity"],
                observation=line.get("observation"),
            )
            for line in lines
        ]
        subtotal = round(sum(line.line_total for line in order_lines), 2)
        computed_total = round(subtotal + delivery_fee, 2)
        if total is not None and abs(total - computed_total) > TOTAL_TOLERANCE:
            raise ValidationError(
                {"total": [f"Total {total:.2f} does not match items plus delivery fee ({computed_total:.2f})"]}
            )

        now = datetime.now(UTC)
        order = cls(
            reference=f"ORDER-{int(now.timestamp() * 1000)}",
            customer=customer,
            payment_method=payment_method,
            fulfillment_type=fulfillment_type,
            delivery_address=delivery_address,
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            total=computed_total,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        for line in order_lines:
            order.add_lines(line)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                reference=order.reference,
                customer_name=customer.name,
                customer_phone=customer.phone,
                payment_method=payment_method,
                fulfillment_type=fulfillment_type,
                item_count=sum(line.quantity for line in order_lines),
                subtotal=subtotal,
                delivery_fee=delivery_fee,
                total=computed_total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def update_status(self, status) -> bool:
        """Move to ``status``. Returns False when the order is already there."""
        current = OrderStatus(self.status)
        target = transition(current, status)
        if target == current:
            return False

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
        return True

    def advance(self):
        """Move one step forward, the way the staff dashboard button does."""
        target = next_status(_VALID_TRANSITIONS, OrderStatus(self.status))
        if target is None:
            raise ValidationError({"status": ["Order has already been delivered"]})
        self.update_status(target)

    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)
