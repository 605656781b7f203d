"""Ordering bounded context: order placement and the order ledger.

Prices carts against the catalogue, applies campaign bundles and keeps the
append-only record of placed orders.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
