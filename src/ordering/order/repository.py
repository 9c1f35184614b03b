"""Repository for the Order aggregate — the ledger's read side."""

from protean.exceptions import ObjectNotFoundError

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus


@ordering.repository(part_of=Order)
class OrderRepository:
    def find(self, order_id) -> Order | None:
        """Return the order, or None if it does not exist."""
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            return None

    def find_by_reference(self, reference) -> Order | None:
        orders = self._dao.query.filter(reference=reference).limit(1).all().items
        return orders[0] if orders else None

    def all_orders(self) -> list[Order]:
        """Every order, oldest first."""
        return self._dao.query.order_by("created_at").limit(None).all().items

    def by_status(self, status) -> list[Order]:
        query = self._dao.query.filter(status=OrderStatus(status).value)
        return query.order_by("created_at").limit(None).all().items

    def by_customer_phone(self, phone) -> list[Order]:
        """Orders whose customer snapshot carries ``phone``, in creation order."""
        return [o for o in self.all_orders() if o.customer and o.customer.phone == phone]
