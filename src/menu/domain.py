"""Menu bounded context — the restaurant's Catalog Store.

Holds categories and products, the admin operations that edit them (including
reordering fed by the sortable-list collaborator), and the read paths the
storefront renders.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

menu = Domain(name="menu")

logger = structlog.get_logger(__name__)
