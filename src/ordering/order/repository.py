"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    def find_by_username(self, username: str) -> list[Order]:
        """All orders filed under ``username``, oldest first."""
        orders = self._dao.query.filter(username=username).limit(None).all().items
        return sorted(orders, key=lambda order: order.created_at)
