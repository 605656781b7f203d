"""Catalogue bounded context: the menu and promotional offers.

Owns the MenuItem and Offer aggregates and the read-side lookups the ordering
workflow prices carts against.
"""

import structlog
from protean.domain import Domain

# Domain Composition Root
catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
