"""Menu management: commands and handler.

Administrative edits to the menu. Every command is keyed by the public
numeric ``item_id``; handlers translate a missing or duplicate id into the
shared error taxonomy so the API can answer with 404 / 409.
"""

import json

from protean import handle
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.menu.item import MenuItem
from shared.errors import Conflict, NotFound


@catalogue.command(part_of="MenuItem")
class AddMenuItem:
    item_id: Integer(required=True, min_value=0)
    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)


@catalogue.command(part_of="MenuItem")
class UpdateMenuItem:
    item_id: Integer(required=True)
    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)


@catalogue.command(part_of="MenuItem")
class RemoveMenuItem:
    item_id: Integer(required=True)


@catalogue.command(part_of="MenuItem")
class LoadMenu:
    """Replace the whole menu with a new set of items."""

    items: Text(required=True)  # JSON: list of {id, title, desc, price}


@catalogue.command_handler(part_of=MenuItem)
class ManageMenuHandler:
    @handle(AddMenuItem)
    def add_menu_item(self, command):
        repo = current_domain.repository_for(MenuItem)
        if repo.find_by_item_id(command.item_id) is not None:
            raise Conflict(f"Menu item {command.item_id} already exists")

        item = MenuItem.create(
            item_id=command.item_id,
            title=command.title,
            description=command.description,
            price=command.price,
        )
        repo.add(item)
        logger.info("menu_item_added", item_id=item.item_id, price=item.price)
        return item.item_id

    @handle(UpdateMenuItem)
    def update_menu_item(self, command):
        repo = current_domain.repository_for(MenuItem)
        item = repo.find_by_item_id(command.item_id)
        if item is None:
            raise NotFound("Product not found")

        item.revise(
            title=command.title,
            description=command.description,
            price=command.price,
        )
        repo.add(item)
        return item.item_id

    @handle(RemoveMenuItem)
    def remove_menu_item(self, command):
        repo = current_domain.repository_for(MenuItem)
        item = repo.find_by_item_id(command.item_id)
        if item is None:
            raise NotFound("Product not found")

        repo._dao.delete(item)
        logger.info("menu_item_removed", item_id=command.item_id)

    @handle(LoadMenu)
    def load_menu(self, command):
        entries = json.loads(command.items) if isinstance(command.items, str) else command.items

        repo = current_domain.repository_for(MenuItem)
        existing = {item.item_id: item for item in repo.list_all()}
        incoming_ids = {entry["id"] for entry in entries}

        # Items that survive the reload keep their identity and are revised in place
        removed = [item for item_id, item in existing.items() if item_id not in incoming_ids]
        for item in removed:
            repo._dao.delete(item)

        for entry in entries:
            item = existing.get(entry["id"])
            if item is None:
                item = MenuItem.create(
                    item_id=entry["id"],
                    title=entry["title"],
                    description=entry.get("desc"),
                    price=entry["price"],
                )
            else:
                item.revise(title=entry["title"], description=entry.get("desc"), price=entry["price"])
            repo.add(item)

        logger.info("menu_loaded", removed=len(removed), loaded=len(entries))
        return len(entries)
