"""Protean-backed order store used by the ledger."""

from ordering.domain import ordering
from ordering.ledger import OrderRecord
from ordering.order.order import Order
from ordering.pricing import PricedLine, to_money


def record_from_order(order: Order) -> OrderRecord:
    return OrderRecord(
        id=str(order.id),
        username=order.username,
        lines=tuple(
            PricedLine(
                item_id=line.item_id,
                title=line.title,
                description=line.description,
                unit_price=to_money(line.unit_price),
                quantity=line.quantity,
                line_total=to_money(line.line_total),
            )
            for line in order.ordered_lines()
        ),
        total=to_money(order.total),
        eta=order.eta,
        created_at=order.created_at,
        offer_id=order.offer_id,
    )


class OrderBook:
    """Append-only: orders go in through ``add`` and come back out as detached records."""

    def __init__(self, domain=ordering):
        self._domain = domain

    def add(self, record: OrderRecord) -> None:
        with self._domain.domain_context():
            self._domain.repository_for(Order).add(Order.place(record))

    def find_by_username(self, username: str) -> list[OrderRecord]:
        with self._domain.domain_context():
            orders = self._domain.repository_for(Order).find_by_username(username)
            return [record_from_order(order) for order in orders]
