"""Persistence tests for OrderBook, the store behind the ledger."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

from ordering.domain import ordering
from ordering.ledger import ETA_OFFSET, OrderRecord
from ordering.order.book import OrderBook
from ordering.order.order import Order
from ordering.pricing import PricedLine
from protean import current_domain

PLACED_AT = datetime(2026, 3, 14, 8, 30, tzinfo=UTC)


def _record(order_id, username="ada", placed_at=PLACED_AT, item_ids=(1,)):
    lines = tuple(
        PricedLine(
            item_id=item_id,
            title=f"Item {item_id}",
            description=None,
            unit_price=Decimal("39.00"),
            quantity=1,
            line_total=Decimal("39.00"),
        )
        for item_id in item_ids
    )
    return OrderRecord(
        id=order_id,
        username=username,
        lines=lines,
        total=Decimal("39.00") * len(lines),
        eta=placed_at + ETA_OFFSET,
        created_at=placed_at,
    )


class TestOrderBook:
    def test_add_persists_order(self):
        book = OrderBook(ordering)

        book.add(_record("order-001"))

        order = current_domain.repository_for(Order).get("order-001")
        assert order.username == "ada"
        assert [record.id for record in book.find_by_username("ada")] == ["order-001"]

    def test_records_round_trip_through_store(self):
        book = OrderBook(ordering)
        book.add(_record("order-001", item_ids=(4, 2, 9)))

        (record,) = book.find_by_username("ada")

        assert record.id == "order-001"
        assert [line.item_id for line in record.lines] == [4, 2, 9]
        assert record.total == Decimal("117.00")
        assert record.lines[0].unit_price == Decimal("39.00")
        assert record.eta == PLACED_AT + ETA_OFFSET

    def test_find_by_username_is_oldest_first(self):
        book = OrderBook(ordering)
        book.add(_record("order-late", placed_at=PLACED_AT + timedelta(hours=1)))
        book.add(_record("order-early"))
        book.add(_record("order-other", username="grace"))

        records = book.find_by_username("ada")

        assert [record.id for record in records] == ["order-early", "order-late"]

    def test_unknown_username_has_no_records(self):
        assert OrderBook(ordering).find_by_username("nobody") == []

    def test_lists_every_order_beyond_a_page(self):
        book = OrderBook(ordering)
        for index in range(105):
            book.add(_record(f"order-{index:03d}", placed_at=PLACED_AT + timedelta(minutes=index)))

        records = book.find_by_username("ada")

        assert len(records) == 105
        assert records[0].id == "order-000"
        assert records[-1].id == "order-104"
