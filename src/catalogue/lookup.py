"""Read-only catalogue lookups handed to other contexts.

The ordering workflow never talks to catalogue repositories directly. It is
given these objects at construction time; each one enters the catalogue
domain context for the duration of a lookup so it works no matter which
domain is active on the calling side.
"""

from dataclasses import dataclass

from catalogue.domain import catalogue
from catalogue.menu.item import MenuItem
from catalogue.offer.offer import Offer


@dataclass(frozen=True)
class BundleOffer:
    """Detached view of an Offer, safe to use outside the catalogue context."""

    offer_id: str
    product_ids: frozenset[int]
    bundle_price: float


class MenuCatalog:
    def __init__(self, domain=catalogue):
        self._domain = domain

    def find_by_id(self, item_id: int) -> MenuItem | None:
        with self._domain.domain_context():
            return self._domain.repository_for(MenuItem).find_by_item_id(item_id)

    def find_by_ids(self, item_ids) -> list[MenuItem]:
        with self._domain.domain_context():
            return self._domain.repository_for(MenuItem).find_by_item_ids(item_ids)

    def list_items(self) -> list[MenuItem]:
        with self._domain.domain_context():
            return self._domain.repository_for(MenuItem).list_all()


class OfferCatalog:
    def __init__(self, domain=catalogue):
        self._domain = domain

    def find_matching_offer(self, item_ids) -> BundleOffer | None:
        with self._domain.domain_context():
            offer = self._domain.repository_for(Offer).find_matching(item_ids)
            if offer is None:
                return None
            return BundleOffer(
                offer_id=str(offer.id),
                product_ids=offer.product_ids,
                bundle_price=offer.bundle_price,
            )
