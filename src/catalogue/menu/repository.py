"""Repository for the MenuItem aggregate."""

from catalogue.domain import catalogue
from catalogue.menu.item import MenuItem


@catalogue.repository(part_of=MenuItem)
class MenuItemRepository:
    """Lookups by the public numeric ``item_id`` rather than the internal identity."""

    def find_by_item_id(self, item_id: int) -> MenuItem | None:
        items = self._dao.query.filter(item_id=item_id).limit(None).all().items
        return items[0] if items else None

    def find_by_item_ids(self, item_ids) -> list[MenuItem]:
        wanted = set(item_ids)
        return [item for item in self.list_all() if item.item_id in wanted]

    def list_all(self) -> list[MenuItem]:
        return sorted(self._dao.query.limit(None).all().items, key=lambda item: item.item_id)
