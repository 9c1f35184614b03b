"""Dispatch board read paths.

Both views are plain filters over the stores; a restaurant has tens of
open orders at most.
"""

from protean.utils.globals import current_domain

from ordering.delivery.assignment import DeliveryAssignment
from ordering.order.order import Order, OrderStatus


def active_assignments() -> list[DeliveryAssignment]:
    """Assignments not yet delivered."""
    return current_domain.repository_for(DeliveryAssignment).active()


def ready_for_assignment() -> list[Order]:
    """Ready orders with no courier currently on them."""
    busy = {str(a.order_id) for a in active_assignments()}
    ready = current_domain.repository_for(Order).by_status(OrderStatus.READY)
    return [order for order in ready if str(order.id) not in busy]
