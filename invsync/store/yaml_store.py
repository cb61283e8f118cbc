# invsync YAML Entity Store
# File-backed entity store with atomic commits

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional
from uuid import UUID

import yaml

from invsync.errors import CommitError
from invsync.store.entities import Category, EntityKind, Item, Location, WHITE_RGBA
from invsync.store.memory import MemoryEntityStore
from invsync.utils.paths import atomic_write

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"


def _parse_uuid(value: Any) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None


def _as_int(value: Any, field: str, default: int = 0) -> int:
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Ignoring non-numeric %s %r in inventory file", field, value)
        return default


def _parse_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


class YamlEntityStore(MemoryEntityStore):
    """
    Entity store persisted as a single YAML document.

    The whole inventory is loaded on construction and rewritten on each
    ``commit()``. Writes go through a temp file and rename, so a reader never
    sees a half-written inventory. Item links are stored as ids; a link whose
    target is missing at load time comes back as None.
    """

    def __init__(self, path: Path):
        """
        Initialize and load the store.

        Args:
            path: Path to the inventory file. A missing file means an empty store.
        """
        super().__init__()
        self.path = path
        self.load()

    def load(self) -> None:
        """Replace in-memory contents with the file's contents."""
        self._entities = {kind: {} for kind in EntityKind}
        if not self.path.exists():
            return

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("Inventory file %s is unreadable, starting empty: %s", self.path, e)
            return

        if not isinstance(data, dict):
            return

        for raw in data.get("locations") or []:
            location = self._location_from_dict(raw)
            if location is not None:
                self.insert(location)
        for raw in data.get("categories") or []:
            category = self._category_from_dict(raw)
            if category is not None:
                self.insert(category)
        for raw in data.get("items") or []:
            item = self._item_from_dict(raw)
            if item is not None:
                self.insert(item)

    def _persist(self) -> None:
        """Write the inventory file."""
        content = yaml.safe_dump(self.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
        try:
            atomic_write(self.path, content)
        except OSError as e:
            raise CommitError(f"Could not write {self.path}: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the inventory to a serializable dictionary."""
        return {
            "version": FORMAT_VERSION,
            "locations": [
                {
                    "id": str(loc.id),
                    "name": loc.name,
                    "sort_order": loc.sort_order,
                    "display_in_row": loc.display_in_row,
                    "color_data": loc.color_data,
                }
                for loc in self.all(EntityKind.LOCATION)
            ],
            "categories": [
                {
                    "id": str(cat.id),
                    "name": cat.name,
                    "sort_order": cat.sort_order,
                    "display_in_row": cat.display_in_row,
                }
                for cat in self.all(EntityKind.CATEGORY)
            ],
            "items": [self._item_to_dict(item) for item in self.all(EntityKind.ITEM)],
        }

    @staticmethod
    def _item_to_dict(item: Item) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": str(item.id),
            "name": item.name,
            "quantity": item.quantity,
            "sort_order": item.sort_order,
            "modified_date": item.modified_date.isoformat(),
            "creation_date": item.creation_date.isoformat(),
            "symbol": item.symbol,
            "symbol_color_data": item.symbol_color_data,
            "image_data": item.image_data,
            "location": str(item.location.id) if item.location else None,
            "category": str(item.category.id) if item.category else None,
        }
        return {k: v for k, v in data.items() if v is not None}

    def _location_from_dict(self, raw: dict[str, Any]) -> Optional[Location]:
        entity_id = _parse_uuid(raw.get("id"))
        if entity_id is None:
            return None
        color = raw.get("color_data")
        return Location(
            id=entity_id,
            name=str(raw.get("name") or ""),
            sort_order=_as_int(raw.get("sort_order"), "sort_order"),
            display_in_row=bool(raw.get("display_in_row", True)),
            color_data=color if isinstance(color, bytes) else WHITE_RGBA,
        )

    def _category_from_dict(self, raw: dict[str, Any]) -> Optional[Category]:
        entity_id = _parse_uuid(raw.get("id"))
        if entity_id is None:
            return None
        return Category(
            id=entity_id,
            name=str(raw.get("name") or ""),
            sort_order=_as_int(raw.get("sort_order"), "sort_order"),
            display_in_row=bool(raw.get("display_in_row", True)),
        )

    def _item_from_dict(self, raw: dict[str, Any]) -> Optional[Item]:
        entity_id = _parse_uuid(raw.get("id"))
        if entity_id is None:
            return None
        item = Item(
            id=entity_id,
            name=str(raw.get("name") or ""),
            quantity=_as_int(raw.get("quantity"), "quantity"),
            sort_order=_as_int(raw.get("sort_order"), "sort_order"),
            symbol=raw.get("symbol"),
            symbol_color_data=raw.get("symbol_color_data"),
            image_data=raw.get("image_data"),
        )
        modified = _parse_datetime(raw.get("modified_date"))
        if modified is not None:
            item.modified_date = modified
        created = _parse_datetime(raw.get("creation_date"))
        if created is not None:
            item.creation_date = created

        location_id = _parse_uuid(raw.get("location"))
        if location_id is not None:
            item.location = self.get(EntityKind.LOCATION, location_id)  # type: ignore[assignment]
        category_id = _parse_uuid(raw.get("category"))
        if category_id is not None:
            item.category = self.get(EntityKind.CATEGORY, category_id)  # type: ignore[assignment]
        return item
