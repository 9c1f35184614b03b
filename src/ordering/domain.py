"""Ordering bounded context — Cart, Order Ledger, Checkout and Delivery.

Handles the session cart, the checkout flow that snapshots a cart into an
order, the order status machine driven by staff, and the courier assignments
layered on top of ready orders.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
