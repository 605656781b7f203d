"""FastAPI endpoints for the Catalogue domain: the public menu and its administration."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddMenuItemRequest,
    CreateOfferRequest,
    MenuItemResponse,
    OfferResponse,
    StatusResponse,
    UpdateMenuItemRequest,
)
from catalogue.menu.item import MenuItem
from catalogue.menu.management import AddMenuItem, RemoveMenuItem, UpdateMenuItem
from catalogue.offer.creation import CreateOffer
from catalogue.offer.offer import Offer
from shared.auth import require_admin

menu_router = APIRouter(prefix="/api", tags=["menu"])
offer_router = APIRouter(prefix="/api", tags=["offers"])


# --- Menu endpoints ---


@menu_router.get("/coffee", response_model=list[MenuItemResponse])
async def list_menu() -> list[MenuItemResponse]:
    items = current_domain.repository_for(MenuItem).list_all()
    return [MenuItemResponse(**item.as_menu_entry()) for item in items]


@menu_router.post(
    "/menu",
    status_code=201,
    response_model=MenuItemResponse,
    dependencies=[Depends(require_admin)],
)
async def add_menu_item(body: AddMenuItemRequest) -> MenuItemResponse:
    command = AddMenuItem(
        item_id=body.id,
        title=body.title,
        description=body.desc,
        price=body.price,
    )
    item_id = current_domain.process(command, asynchronous=False)
    item = current_domain.repository_for(MenuItem).find_by_item_id(item_id)
    return MenuItemResponse(**item.as_menu_entry())


@menu_router.put("/menu/{item_id}", response_model=MenuItemResponse, dependencies=[Depends(require_admin)])
async def update_menu_item(item_id: int, body: UpdateMenuItemRequest) -> MenuItemResponse:
    command = UpdateMenuItem(
        item_id=item_id,
        title=body.title,
        description=body.desc,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    item = current_domain.repository_for(MenuItem).find_by_item_id(item_id)
    return MenuItemResponse(**item.as_menu_entry())


@menu_router.delete("/menu/{item_id}", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def remove_menu_item(item_id: int) -> StatusResponse:
    current_domain.process(RemoveMenuItem(item_id=item_id), asynchronous=False)
    return StatusResponse(status="deleted")


# --- Offer endpoints ---


@offer_router.post(
    "/offers",
    status_code=201,
    response_model=OfferResponse,
    dependencies=[Depends(require_admin)],
)
async def create_offer(body: CreateOfferRequest) -> OfferResponse:
    command = CreateOffer(
        products=json.dumps(body.products),
        bundle_price=body.price,
    )
    offer_id = current_domain.process(command, asynchronous=False)
    offer = current_domain.repository_for(Offer).get(offer_id)
    return OfferResponse(**offer.as_offer_entry())
