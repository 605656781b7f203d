"""Order pricing: turns a cart into priced lines and a grand total.

The engine is a pure function of the cart and two catalogue lookups handed
to it at construction time:

1. Every cart line is resolved against the menu, in cart order. The first
   unknown item id aborts pricing with ``ItemNotFound``.
2. Each line is priced at ``menu price * quantity``.
3. The offer lookup is asked for a bundle whose products are all in the cart.
4. Every line whose item belongs to that bundle is repriced so that its
   ``line_total`` equals the bundle price. This happens per matched line: a
   bundle of {A, B} with both in the cart charges the bundle price twice.
5. The total is the sum of the line totals.

Money is handled as ``Decimal`` rounded to cents.
"""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Convert a stored price (usually a float) into a Decimal rounded to cents."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class ItemNotFound(Exception):
    """A cart referenced a menu item id that does not exist."""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item with ID {item_id} not found in menu")


class MenuLookup(Protocol):
    def find_by_id(self, item_id: int): ...


class OfferLookup(Protocol):
    def find_matching_offer(self, item_ids): ...


@dataclass(frozen=True)
class CartLine:
    item_id: int
    quantity: int


@dataclass(frozen=True)
class PricedLine:
    item_id: int
    title: str
    description: str | None
    unit_price: Decimal
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class PricedOrder:
    lines: tuple[PricedLine, ...]
    total: Decimal
    offer_id: str | None = None


class OrderPricingEngine:
    def __init__(self, menu: MenuLookup, offers: OfferLookup):
        self._menu = menu
        self._offers = offers

    def price(self, cart_lines) -> PricedOrder:
        # The tuple is only built once every line has resolved
        lines = tuple(self._price_line(cart_line) for cart_line in cart_lines)

        offer = None
        if lines:
            offer = self._offers.find_matching_offer(frozenset(line.item_id for line in lines))

        if offer is not None:
            lines = tuple(
                self._apply_bundle(line, offer.bundle_price) if line.item_id in offer.product_ids else line
                for line in lines
            )

        total = sum((line.line_total for line in lines), Decimal("0.00"))
        offer_id = offer.offer_id if offer is not None else None

        logger.debug("cart_priced", lines=len(lines), total=str(total), offer_id=offer_id)
        return PricedOrder(lines=lines, total=total, offer_id=offer_id)

    def _price_line(self, cart_line: CartLine) -> PricedLine:
        item = self._menu.find_by_id(cart_line.item_id)
        if item is None:
            raise ItemNotFound(cart_line.item_id)

        unit_price = to_money(item.price)
        return PricedLine(
            item_id=item.item_id,
            title=item.title,
            description=item.description,
            unit_price=unit_price,
            quantity=cart_line.quantity,
            line_total=unit_price * cart_line.quantity,
        )

    @staticmethod
    def _apply_bundle(line: PricedLine, bundle_price) -> PricedLine:
        bundle_price = to_money(bundle_price)
        unit_price = (bundle_price / line.quantity).quantize(CENTS, rounding=ROUND_HALF_UP)
        # line_total is pinned to the bundle price; unit_price is its per-unit share
        return replace(line, unit_price=unit_price, line_total=bundle_price)
