"""Domain events for the MenuItem aggregate."""

from protean.fields import DateTime, Float, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="MenuItem")
class MenuItemAdded:
    """A new item was put on the menu."""

    __version__ = "v1"

    item_id: Integer(required=True)
    title: String(required=True)
    price: Float(required=True)
    added_at: DateTime(required=True)


@catalogue.event(part_of="MenuItem")
class MenuItemUpdated:
    """An item's title, description or price was changed."""

    __version__ = "v1"

    item_id: Integer(required=True)
    title: String(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
    modified_at: DateTime(required=True)
