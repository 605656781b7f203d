"""Order aggregate: the persisted, immutable record of a placed order.

An Order is written once, when it is placed, and afterwards only read back
(listed per username). It deliberately exposes no methods that change state.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from ordering.domain import ordering


@ordering.entity(part_of="Order")
class OrderLine:
    """One priced line of an order, a snapshot of the menu item at placement time.

    ``position`` keeps the line in the place the customer put it in the cart.
    """

    position = Integer(required=True, min_value=0)
    item_id = Integer(required=True)
    title = String(required=True, max_length=255)
    description = Text()
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    line_total = Float(required=True, min_value=0.0)


@ordering.aggregate
class Order:
    username = String(required=True, max_length=100)
    lines = HasMany(OrderLine)
    total = Float(required=True, min_value=0.0)
    offer_id = String(max_length=255)
    eta = DateTime(required=True)
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def place(cls, record):
        """Build the aggregate for an ``OrderRecord`` produced by the ledger."""
        from ordering.order.events import OrderPlaced

        order = cls(
            id=record.id,
            username=record.username,
            total=float(record.total),
            offer_id=record.offer_id,
            eta=record.eta,
            created_at=record.created_at,
        )
        for position, line in enumerate(record.lines):
            order.add_lines(
                OrderLine(
                    position=position,
                    item_id=line.item_id,
                    title=line.title,
                    description=line.description,
                    unit_price=float(line.unit_price),
                    quantity=line.quantity,
                    line_total=float(line.line_total),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=record.id,
                username=record.username,
                line_count=len(record.lines),
                total=float(record.total),
                eta=record.eta,
                placed_at=record.created_at,
            )
        )
        return order

    def ordered_lines(self) -> list[OrderLine]:
        return sorted(self.lines, key=lambda line: line.position)
