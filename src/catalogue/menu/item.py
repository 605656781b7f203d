"""MenuItem aggregate: one orderable drink or pastry."""

from datetime import datetime

from protean.fields import DateTime, Float, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.aggregate
class MenuItem:
    """An entry on the menu, addressed by a stable numeric ``item_id``.

    The numeric id is what customers put in their carts and what offers refer
    to, so it never changes once assigned. Title, description and price may be
    edited by an administrator at any time; orders snapshot them at placement.
    """

    item_id: Integer(required=True, min_value=0)
    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    created_at: DateTime(default=datetime.now)
    modified_at: DateTime()

    @classmethod
    def create(cls, item_id, title, description, price):
        from catalogue.menu.events import MenuItemAdded

        now = datetime.now()
        item = cls(
            item_id=item_id,
            title=title,
            description=description,
            price=price,
            created_at=now,
        )
        item.raise_(
            MenuItemAdded(
                item_id=item_id,
                title=title,
                price=price,
                added_at=now,
            )
        )
        return item

    def revise(self, title, description, price):
        from catalogue.menu.events import MenuItemUpdated

        previous_price = self.price
        now = datetime.now()

        self.title = title
        self.description = description
        self.price = price
        self.modified_at = now

        self.raise_(
            MenuItemUpdated(
                item_id=self.item_id,
                title=title,
                previous_price=previous_price,
                new_price=price,
                modified_at=now,
            )
        )

    def as_menu_entry(self):
        return {
            "id": self.item_id,
            "title": self.title,
            "desc": self.description,
            "price": self.price,
            "modifiedAt": self.modified_at.isoformat() if self.modified_at else None,
        }
