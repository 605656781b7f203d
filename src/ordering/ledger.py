"""Order ledger: places orders and lists them back per customer.

``OrderLedger`` is the application service behind ``POST /api/order`` and
``GET /api/order/{username}``. Its collaborators are handed to it by the
process entry point:

- ``accounts``: answers ``exists(username)``
- ``pricing``: an ``OrderPricingEngine``
- ``orders``: an append-only store with ``add(record)`` and
  ``find_by_username(username)``

Placement is all-or-nothing: the cart is validated and priced completely
before anything is written, and the order is written with a single ``add``.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Protocol
from uuid import uuid4

import structlog

from ordering.pricing import CartLine, ItemNotFound, OrderPricingEngine, PricedLine
from shared.errors import BadRequest, BrewbarError, InternalError, NotFound, Unauthorized

logger = structlog.get_logger(__name__)

# Ready-by policy: every order is promised this long after it is placed
ETA_OFFSET = timedelta(minutes=15)


@dataclass(frozen=True)
class OrderRecord:
    id: str
    username: str
    lines: tuple[PricedLine, ...]
    total: Decimal
    eta: datetime
    created_at: datetime
    offer_id: str | None = None

    def as_document(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "items": [
                {
                    "id": line.item_id,
                    "title": line.title,
                    "desc": line.description,
                    "price": float(line.unit_price),
                    "quantity": line.quantity,
                    "total": float(line.line_total),
                }
                for line in self.lines
            ],
            "total": float(self.total),
            "eta": self.eta.isoformat(),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class PlacedOrder:
    id: str
    eta: datetime


class AccountLookup(Protocol):
    def exists(self, username: str) -> bool: ...


class OrderStore(Protocol):
    def add(self, record: OrderRecord) -> None: ...

    def find_by_username(self, username: str) -> list[OrderRecord]: ...


def utc_now() -> datetime:
    return datetime.now(UTC)


class OrderLedger:
    def __init__(
        self,
        accounts: AccountLookup,
        pricing: OrderPricingEngine,
        orders: OrderStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._accounts = accounts
        self._pricing = pricing
        self._orders = orders
        self._clock = clock

    def place_order(self, username: str, cart_lines: Sequence[CartLine]) -> PlacedOrder:
        cart = self._validated_cart(username, cart_lines)

        if not self._lookup(self._accounts.exists, username):
            raise Unauthorized()

        try:
            priced = self._pricing.price(cart)
        except ItemNotFound as exc:
            raise BadRequest(str(exc)) from exc
        except BrewbarError:
            raise
        except Exception as exc:
            logger.exception("order_pricing_failed", username=username)
            raise InternalError() from exc

        placed_at = self._clock()
        record = OrderRecord(
            id=str(uuid4()),
            username=username,
            lines=priced.lines,
            total=priced.total,
            eta=placed_at + ETA_OFFSET,
            created_at=placed_at,
            offer_id=priced.offer_id,
        )

        try:
            self._orders.add(record)
        except Exception as exc:
            logger.exception("order_persist_failed", order_id=record.id, username=username)
            raise InternalError() from exc

        logger.info(
            "order_placed",
            order_id=record.id,
            username=username,
            lines=len(record.lines),
            total=str(record.total),
            offer_id=record.offer_id,
        )
        return PlacedOrder(id=record.id, eta=record.eta)

    def list_orders(self, username: str) -> list[OrderRecord]:
        if not username:
            raise BadRequest()

        if not self._lookup(self._accounts.exists, username):
            raise NotFound()

        return self._lookup(self._orders.find_by_username, username)

    @staticmethod
    def _validated_cart(username, cart_lines) -> tuple[CartLine, ...]:
        if not username or not username.strip() or not cart_lines:
            raise BadRequest()

        for line in cart_lines:
            if line.item_id is None or line.quantity is None or line.quantity <= 0:
                raise BadRequest(f"Invalid quantity for item {line.item_id}")

        return tuple(cart_lines)

    @staticmethod
    def _lookup(call, *args):
        try:
            return call(*args)
        except BrewbarError:
            raise
        except Exception as exc:
            logger.exception("ledger_lookup_failed", lookup=getattr(call, "__qualname__", repr(call)))
            raise InternalError() from exc
