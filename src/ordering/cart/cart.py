"""Shopping Cart aggregate — the session cart a shopper fills before checkout.

One cart per browsing session. A line is a "slot" identified by the product
and the free-text observation together: adding the same product with the same
observation grows the existing line, a different observation opens a new one.
Totals only ever use the snapshot ``price``; ``original_price`` is display data.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Integer, String, ValueObject

from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from ordering.domain import ordering
from ordering.snapshot import ProductSnapshot


def normalize_observation(observation):
    """Blank or whitespace-only observations count as no observation."""
    if observation is None:
        return None
    observation = observation.strip()
    return observation or None


@ordering.entity(part_of="ShoppingCart")
class CartLine:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)
    observation = String(max_length=500)
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


@ordering.aggregate
class ShoppingCart:
    session_id = String(max_length=255)
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def _line(self, line_id):
        return next((line for line in self.lines if str(line.id) == str(line_id)), None)

    def _slot(self, product_id, observation):
        return next(
            (
                line
                for line in self.lines
                if str(line.product.product_id) == str(product_id) and line.observation == observation
            ),
            None,
        )

    def add_item(self, product, quantity=1, observation=None):
        """Add ``quantity`` of a product, merging into a matching slot if there is one.

        ``product`` is a ``ProductSnapshot`` or a dict with its fields. Callers
        pass a positive quantity.
        """
        if isinstance(product, dict):
            product = ProductSnapshot(
                product_id=product["product_id"],
                name=product["name"],
                price=product["price"],
                original_price=product.get("original_price"),
            )
        observation = normalize_observation(observation)
        now = datetime.now(UTC)

        existing = self._slot(product.product_id, observation)
        if existing:
            existing.quantity += quantity
            line_id = str(existing.id)
        else:
            line = CartLine(product=product, quantity=quantity, observation=observation, added_at=now)
            self.add_lines(line)
            line_id = str(line.id)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                line_id=line_id,
                product_id=str(product.product_id),
                quantity=quantity,
                observation=observation,
            )
        )
        return line_id

    def remove_item(self, line_id):
        """Drop a line. Unknown ids are ignored."""
        line = self._line(line_id)
        if line is None:
            return

        self.remove_lines(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), line_id=str(line_id)))

    def set_quantity(self, line_id, quantity):
        """Replace a line's quantity. Zero or less removes the line."""
        if quantity <= 0:
            self.remove_item(line_id)
            return

        line = self._line(line_id)
        if line is None or line.quantity == quantity:
            return

        previous_quantity = line.quantity
        line.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                line_id=str(line_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def clear(self):
        if not self.lines:
            return

        for line in list(self.lines):
            self.remove_lines(line)
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(CartCleared(cart_id=str(self.id), cleared_at=now))

    # -------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def total_price(self) -> float:
        return round(sum(line.line_total for line in self.lines), 2)

    def snapshot_lines(self) -> list[dict]:
        """Deep copy of the lines, detached from the cart."""
        return [
            {
                "product_id": str(line.product.product_id),
                "name": line.product.name,
                "price": line.product.price,
                "original_price": line.product.original_price,
                "quantity": line.quantity,
                "observation": line.observation,
            }
            for line in self.lines
        ]
