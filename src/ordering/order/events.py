"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer's cart was priced and recorded as an order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    username = String(required=True)
    line_count = Integer(required=True)
    total = Float(required=True)
    eta = DateTime(required=True)
    placed_at = DateTime(required=True)
