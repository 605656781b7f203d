"""Offer creation: command and handler."""

import json

from protean import handle
from protean.fields import Float, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.menu.item import MenuItem
from catalogue.offer.offer import Offer
from shared.errors import BadRequest


@catalogue.command(part_of="Offer")
class CreateOffer:
    products: Text(required=True)  # JSON: list of menu item ids
    bundle_price: Float(required=True, min_value=0.0)


@catalogue.command_handler(part_of=Offer)
class CreateOfferHandler:
    @handle(CreateOffer)
    def create_offer(self, command):
        raw_ids = json.loads(command.products) if isinstance(command.products, str) else command.products
        if not raw_ids:
            raise BadRequest("An offer must name at least one product")

        item_ids = list(dict.fromkeys(int(item_id) for item_id in raw_ids))

        # Every product in the campaign has to be on the menu
        menu_items = current_domain.repository_for(MenuItem).find_by_item_ids(item_ids)
        if len(menu_items) != len(item_ids):
            raise BadRequest("Invalid products in the offer")

        offer = Offer.create(menu_items=menu_items, bundle_price=command.bundle_price)
        current_domain.repository_for(Offer).add(offer)
        logger.info("offer_created", offer_id=str(offer.id), products=item_ids, bundle_price=offer.bundle_price)
        return str(offer.id)
