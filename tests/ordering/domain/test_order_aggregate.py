"""Tests for the Order aggregate built from a ledger record."""

from datetime import UTC, datetime
from decimal import Decimal

from ordering.ledger import ETA_OFFSET, OrderRecord
from ordering.order.events import OrderPlaced
from ordering.order.order import Order, OrderLine
from ordering.pricing import PricedLine
from protean.utils import DomainObjects
from protean.utils.reflection import declared_fields

PLACED_AT = datetime(2026, 3, 14, 8, 30, tzinfo=UTC)


def _record(**overrides):
    defaults = {
        "id": "order-001",
        "username": "ada",
        "lines": (
            PricedLine(
                item_id=3,
                title="Cappuccino",
                description="Espresso, steamed milk, foam",
                unit_price=Decimal("49.00"),
                quantity=2,
                line_total=Decimal("98.00"),
            ),
            PricedLine(
                item_id=5,
                title="Kanelbulle",
                description=None,
                unit_price=Decimal("29.00"),
                quantity=1,
                line_total=Decimal("29.00"),
            ),
        ),
        "total": Decimal("127.00"),
        "eta": PLACED_AT + ETA_OFFSET,
        "created_at": PLACED_AT,
    }
    defaults.update(overrides)
    return OrderRecord(**defaults)


class TestOrderStructure:
    def test_element_types(self):
        assert Order.element_type == DomainObjects.AGGREGATE
        assert OrderLine.element_type == DomainObjects.ENTITY
        assert OrderPlaced.element_type == DomainObjects.EVENT

    def test_declared_fields(self):
        fields = declared_fields(Order)
        for name in ("username", "lines", "total", "offer_id", "eta", "created_at"):
            assert name in fields


class TestPlaceOrder:
    def test_snapshot_of_record(self):
        order = Order.place(_record())

        assert str(order.id) == "order-001"
        assert order.username == "ada"
        assert order.total == 127.0
        assert order.eta == PLACED_AT + ETA_OFFSET
        assert order.created_at == PLACED_AT
        assert order.offer_id is None

    def test_lines_keep_cart_positions(self):
        order = Order.place(_record())

        lines = order.ordered_lines()
        assert [line.position for line in lines] == [0, 1]
        assert [line.item_id for line in lines] == [3, 5]
        assert lines[0].unit_price == 49.0
        assert lines[0].line_total == 98.0
        assert lines[1].description is None

    def test_raises_order_placed(self):
        order = Order.place(_record(offer_id="offer-7"))

        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == "order-001"
        assert event.line_count == 2
        assert event.total == 127.0
        assert event.placed_at == PLACED_AT
        assert order.offer_id == "offer-7"

    def test_event_version(self):
        event = Order.place(_record())._events[0]
        assert event.__version__ == "v1"
