"""Offer aggregate: a campaign bundle sold at a fixed price."""

from datetime import datetime

from protean.fields import DateTime, Float, HasMany, Integer, String

from catalogue.domain import catalogue


@catalogue.entity(part_of="Offer")
class OfferProduct:
    """A menu item named by an offer, with the title and price it had when the offer was set up."""

    item_id: Integer(required=True)
    title: String(max_length=255)
    price: Float(min_value=0.0)


@catalogue.aggregate
class Offer:
    """A set of menu items sold together for ``bundle_price``.

    An offer applies to a cart when every one of its products is in the cart;
    extra cart items are unaffected. Offers are matched purely by item id, the
    snapshots on OfferProduct are informational.
    """

    products: HasMany(OfferProduct)
    bundle_price: Float(required=True, min_value=0.0)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, menu_items, bundle_price):
        from catalogue.offer.events import OfferCreated

        now = datetime.now()
        offer = cls(bundle_price=bundle_price, created_at=now)
        for item in menu_items:
            offer.add_products(OfferProduct(item_id=item.item_id, title=item.title, price=item.price))

        offer.raise_(
            OfferCreated(
                offer_id=offer.id,
                product_ids=",".join(str(item.item_id) for item in menu_items),
                bundle_price=bundle_price,
                created_at=now,
            )
        )
        return offer

    @property
    def product_ids(self) -> frozenset[int]:
        return frozenset(product.item_id for product in self.products)

    def applies_to(self, item_ids) -> bool:
        return bool(self.products) and self.product_ids <= set(item_ids)

    def as_offer_entry(self):
        return {
            "id": str(self.id),
            "products": [
                {"id": product.item_id, "title": product.title, "price": product.price} for product in self.products
            ],
            "price": self.bundle_price,
        }
