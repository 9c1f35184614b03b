"""Identity bounded context — shopper accounts.

Accounts are keyed by phone number, which is also what ties a shopper to the
customer snapshot stored on their orders.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

# Configure logging for the application
configure_logging()

logger = structlog.get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
