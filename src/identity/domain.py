"""Identity bounded context: customer and staff accounts.

Answers one question for the rest of the system: does this username exist.
"""

import structlog
from protean.domain import Domain

# Domain Composition Root
identity = Domain(name="identity")

logger = structlog.get_logger(__name__)
