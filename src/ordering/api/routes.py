"""FastAPI routes for the Ordering domain.

The ledger is composed by the process entry point and stored on
``app.state.ledger``; routes receive it through a dependency. Every log line
emitted while a request is handled carries the username it is for.
"""

from fastapi import APIRouter, Depends, Request

from ordering.api.schemas import OrderResponse, PlaceOrderRequest, PlacedOrderResponse
from ordering.ledger import OrderLedger
from ordering.pricing import CartLine
from shared.logging import add_context, clear_context

order_router = APIRouter(prefix="/api/order", tags=["orders"])


def get_ledger(request: Request) -> OrderLedger:
    return request.app.state.ledger


@order_router.post("", status_code=201, response_model=PlacedOrderResponse)
async def place_order(body: PlaceOrderRequest, ledger: OrderLedger = Depends(get_ledger)) -> PlacedOrderResponse:
    add_context(username=body.username)
    try:
        cart = [CartLine(item_id=item.id, quantity=item.quantity) for item in body.items]
        placed = ledger.place_order(body.username, cart)
        return PlacedOrderResponse(id=placed.id, eta=placed.eta.isoformat())
    finally:
        clear_context()


@order_router.get("/{username}", response_model=list[OrderResponse])
async def list_orders(username: str, ledger: OrderLedger = Depends(get_ledger)) -> list[OrderResponse]:
    add_context(username=username)
    try:
        return [OrderResponse(**record.as_document()) for record in ledger.list_orders(username)]
    finally:
        clear_context()
