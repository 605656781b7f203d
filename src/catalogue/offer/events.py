"""Domain events for the Offer aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Offer")
class OfferCreated:
    """A new campaign bundle became available."""

    __version__ = "v1"

    offer_id: Identifier(required=True)
    product_ids: String(required=True)  # comma-separated menu item ids
    bundle_price: Float(required=True)
    created_at: DateTime(required=True)
