# invsync Record Mapper
# Translate remote records into local entities (create or update)

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from invsync.errors import MalformedRecordError
from invsync.store.base import EntityStore
from invsync.store.entities import Category, Entity, EntityKind, Item, Location, WHITE_RGBA, decode_rgba, utcnow
from invsync.sync.pending import PendingRelationshipTracker
from invsync.sync.records import RecordKind, RecordReference, ReferenceValue, RemoteRecord

logger = logging.getLogger(__name__)

# Remote field keys
F_ID = "CD_id"
F_NAME = "CD_name"
F_QUANTITY = "CD_quantity"
F_SORT_ORDER = "CD_sortOrder"
F_DISPLAY_IN_ROW = "CD_displayInRow"
F_COLOR = "CD_colorData"
F_SYMBOL = "CD_symbol"
F_SYMBOL_COLOR = "CD_symbolColorData"
F_IMAGE = "CD_imageData"
F_CREATION_DATE = "CD_itemCreationDate"
F_LOCATION = "CD_location"
F_CATEGORY = "CD_category"

KIND_FOR_RECORD: dict[RecordKind, EntityKind] = {
    RecordKind.ITEM: EntityKind.ITEM,
    RecordKind.LOCATION: EntityKind.LOCATION,
    RecordKind.CATEGORY: EntityKind.CATEGORY,
}


@dataclass
class MappedRecord:
    """Entity produced from a record."""

    kind: EntityKind
    entity: Entity
    created: bool


def parse_uuid(value: Any) -> Optional[UUID]:
    """Parse a UUID from a string, returning None on failure."""
    if not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


def resolve_identity(record: RemoteRecord) -> UUID:
    """
    Determine the entity id a record describes.

    Prefers the ``CD_id`` field and falls back to the storage record name.

    Raises:
        MalformedRecordError: If neither yields a UUID.
    """
    entity_id = parse_uuid(record.get(F_ID))
    if entity_id is not None:
        return entity_id
    entity_id = parse_uuid(record.record_name)
    if entity_id is not None:
        return entity_id
    raise MalformedRecordError(f"No usable identity in {record.record_type} record {record.record_name!r}")


def reference_id(value: ReferenceValue) -> Optional[UUID]:
    """Target id of a reference field, or None if absent or unparseable."""
    if isinstance(value, RecordReference):
        return parse_uuid(value.record_name)
    return parse_uuid(value)


def _typed(record: RemoteRecord, key: str, expected: type) -> Any:
    """Field value if present with the expected type, else None."""
    value = record.get(key)
    if value is None:
        return None
    if expected is int and isinstance(value, bool):
        value = None
    elif expected is bytes and isinstance(value, bytearray):
        value = bytes(value)
    elif not isinstance(value, expected):
        value = None
    if value is None:
        logger.debug("Ignoring %s on %s: expected %s", key, record.record_name, expected.__name__)
    return value


class RecordMapper:
    """
    Maps remote records onto local entities.

    Present fields overwrite, absent fields leave the local value alone.
    Records missing a required field are skipped. Item references are
    handed to the pending tracker rather than linked here.
    """

    def __init__(self, tracker: PendingRelationshipTracker):
        self.tracker = tracker

    def apply(self, record: RemoteRecord, store: EntityStore) -> Optional[MappedRecord]:
        """
        Create or update the entity a record describes.

        Args:
            record: Remote record.
            store: Store to look up and insert entities in.

        Returns:
            MappedRecord, or None if the record was skipped.
        """
        kind = record.kind
        if kind is None:
            logger.warning("Unknown record type: %s", record.record_type)
            return None

        try:
            entity_id = resolve_identity(record)
        except MalformedRecordError as e:
            logger.warning("Skipping record: %s", e)
            return None

        name = _typed(record, F_NAME, str)
        if name is None:
            logger.warning("Skipping %s %s: missing name", record.record_type, entity_id)
            return None

        if kind is RecordKind.ITEM:
            return self._apply_item(record, store, entity_id, name)
        if kind is RecordKind.LOCATION:
            return self._apply_location(record, store, entity_id, name)
        return self._apply_category(record, store, entity_id, name)

    def _apply_item(self, record: RemoteRecord, store: EntityStore, entity_id: UUID, name: str) -> Optional[MappedRecord]:
        quantity = _typed(record, F_QUANTITY, int)
        if quantity is None or quantity < 0:
            logger.warning("Skipping item %s: missing or invalid quantity", entity_id)
            return None

        # Stage references before touching the entity; linking is decoupled from creation
        self.tracker.stage(
            entity_id,
            location_id=reference_id(record.get(F_LOCATION)),
            category_id=reference_id(record.get(F_CATEGORY)),
        )

        item = store.get(EntityKind.ITEM, entity_id)
        created = item is None
        if item is None:
            creation_date = _typed(record, F_CREATION_DATE, datetime)
            item = Item(
                id=entity_id,
                name=name,
                quantity=quantity,
                modified_date=record.modified_at or utcnow(),
                creation_date=creation_date or utcnow(),
            )
            store.insert(item)
        else:
            item.name = name
            item.quantity = quantity
            if record.modified_at is not None:
                item.modified_date = record.modified_at
            creation_date = _typed(record, F_CREATION_DATE, datetime)
            if creation_date is not None:
                item.creation_date = creation_date

        sort_order = _typed(record, F_SORT_ORDER, int)
        if sort_order is not None:
            item.sort_order = sort_order
        symbol = _typed(record, F_SYMBOL, str)
        if symbol is not None:
            item.symbol = symbol
        symbol_color = _typed(record, F_SYMBOL_COLOR, bytes)
        if symbol_color is not None:
            item.symbol_color_data = symbol_color
        image = _typed(record, F_IMAGE, bytes)
        if image is not None:
            item.image_data = image

        return MappedRecord(EntityKind.ITEM, item, created)

    def _apply_location(self, record: RemoteRecord, store: EntityStore, entity_id: UUID, name: str) -> MappedRecord:
        color = _typed(record, F_COLOR, bytes)
        location = store.get(EntityKind.LOCATION, entity_id)
        created = location is None
        if location is None:
            location = Location(
                id=entity_id,
                name=name,
                color_data=color if decode_rgba(color) is not None else WHITE_RGBA,
            )
            store.insert(location)
        else:
            location.name = name
            if color is not None:
                location.color_data = color

        self._apply_row_fields(record, location)
        return MappedRecord(EntityKind.LOCATION, location, created)

    def _apply_category(self, record: RemoteRecord, store: EntityStore, entity_id: UUID, name: str) -> MappedRecord:
        category = store.get(EntityKind.CATEGORY, entity_id)
        created = category is None
        if category is None:
            category = Category(id=entity_id, name=name)
            store.insert(category)
        else:
            category.name = name

        self._apply_row_fields(record, category)
        return MappedRecord(EntityKind.CATEGORY, category, created)

    @staticmethod
    def _apply_row_fields(record: RemoteRecord, entity: Location | Category) -> None:
        """Sort order and row visibility, shared by locations and categories."""
        sort_order = _typed(record, F_SORT_ORDER, int)
        if sort_order is not None:
            entity.sort_order = sort_order
        display_in_row = _typed(record, F_DISPLAY_IN_ROW, bool)
        if display_in_row is not None:
            entity.display_in_row = display_in_row
