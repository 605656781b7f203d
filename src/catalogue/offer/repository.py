"""Repository for the Offer aggregate."""

from catalogue.domain import catalogue
from catalogue.offer.offer import Offer


@catalogue.repository(part_of=Offer)
class OfferRepository:
    def list_all(self) -> list[Offer]:
        """All offers, oldest first (ties broken by id) so that iteration order never depends on the store."""
        return sorted(self._dao.query.limit(None).all().items, key=lambda offer: (offer.created_at, str(offer.id)))

    def find_matching(self, item_ids) -> Offer | None:
        """The earliest created offer whose whole product set is among ``item_ids``."""
        return next((offer for offer in self.list_all() if offer.applies_to(item_ids)), None)
