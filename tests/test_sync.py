# invsync Sync Tests
# Tests for record mapping, pending relationships and the reconciliation engine

import uuid
from datetime import datetime, timezone

import pytest

from factories import (
    CATEGORIES_ZONE,
    ITEMS_ZONE,
    LOCATIONS_ZONE,
    FlakyStore,
    ScriptedSource,
    batch,
    category_record,
    item_record,
    location_record,
)
from invsync.errors import FetchError, MalformedRecordError
from invsync.store.entities import WHITE_RGBA, EntityKind, Item, Location
from invsync.store.memory import MemoryEntityStore
from invsync.sync.engine import ReconciliationEngine
from invsync.sync.mapper import RecordMapper, resolve_identity
from invsync.sync.pending import PendingRelationshipTracker
from invsync.sync.records import FetchResult, RecordReference, RemoteRecord

T1 = datetime(2025, 9, 28, 10, 0, tzinfo=timezone.utc)
T2 = datetime(2025, 9, 29, 12, 30, tzinfo=timezone.utc)


def snapshot(item: Item) -> dict:
    """Comparable view of an item, links reduced to ids."""
    return {
        "name": item.name,
        "quantity": item.quantity,
        "sort_order": item.sort_order,
        "modified_date": item.modified_date,
        "creation_date": item.creation_date,
        "symbol": item.symbol,
        "symbol_color_data": item.symbol_color_data,
        "image_data": item.image_data,
        "location": item.location.id if item.location else None,
        "category": item.category.id if item.category else None,
    }


class TestResolveIdentity:
    """Tests for the two-step identity resolver."""

    def test_prefers_id_field(self):
        """CD_id wins over the record name."""
        wanted = uuid.uuid4()
        record = item_record(wanted)
        record.record_name = str(uuid.uuid4())
        assert resolve_identity(record) == wanted

    def test_falls_back_to_record_name(self):
        """A missing CD_id falls back to the storage name."""
        wanted = uuid.uuid4()
        record = RemoteRecord("CD_Item", str(wanted), ITEMS_ZONE, {"CD_id": "not-a-uuid"})
        assert resolve_identity(record) == wanted

    def test_raises_when_neither_parses(self):
        """No usable identity is a malformed record."""
        record = RemoteRecord("CD_Item", "garbage", ITEMS_ZONE, {})
        with pytest.raises(MalformedRecordError):
            resolve_identity(record)


class TestRecordMapper:
    """Tests for RecordMapper."""

    def setup_method(self):
        self.tracker = PendingRelationshipTracker()
        self.mapper = RecordMapper(self.tracker)
        self.store = MemoryEntityStore()

    def test_creates_item(self):
        """A new item record creates an item with defaults for absent fields."""
        item_id = uuid.uuid4()
        mapped = self.mapper.apply(item_record(item_id, modified_at=T1), self.store)

        assert mapped is not None
        assert mapped.created is True
        item = self.store.get(EntityKind.ITEM, item_id)
        assert item is mapped.entity
        assert item.name == "Drill"
        assert item.quantity == 3
        assert item.sort_order == 0
        assert item.modified_date == T1
        assert item.symbol is None

    def test_updates_existing_item(self):
        """A second sighting updates instead of inserting a duplicate."""
        item_id = uuid.uuid4()
        self.mapper.apply(item_record(item_id, modified_at=T1), self.store)
        mapped = self.mapper.apply(item_record(item_id, name="Hammer", quantity=5, modified_at=T2), self.store)

        assert mapped.created is False
        assert self.store.count(EntityKind.ITEM) == 1
        item = self.store.get(EntityKind.ITEM, item_id)
        assert item.name == "Hammer"
        assert item.quantity == 5
        assert item.modified_date == T2

    @pytest.mark.parametrize(
        "fields",
        [
            {"CD_quantity": 3},
            {"CD_name": "Drill"},
            {"CD_name": 42, "CD_quantity": 3},
            {"CD_name": "Drill", "CD_quantity": "3"},
            {"CD_name": "Drill", "CD_quantity": True},
            {"CD_name": "Drill", "CD_quantity": -1},
        ],
    )
    def test_skips_item_missing_required_fields(self, fields: dict):
        """Missing or mistyped required fields skip the record without raising."""
        item_id = uuid.uuid4()
        record = RemoteRecord("CD_Item", str(item_id), ITEMS_ZONE, fields)

        assert self.mapper.apply(record, self.store) is None
        assert self.store.count(EntityKind.ITEM) == 0

    def test_skipped_item_stages_nothing(self):
        """A skipped record leaves no pending relationship behind."""
        item_id = uuid.uuid4()
        record = item_record(item_id, quantity=None, location=uuid.uuid4())

        assert self.mapper.apply(record, self.store) is None
        assert item_id not in self.tracker

    def test_skips_location_without_name(self):
        """Locations need a name."""
        record = RemoteRecord("CD_Location", str(uuid.uuid4()), LOCATIONS_ZONE, {"CD_sortOrder": 2})
        assert self.mapper.apply(record, self.store) is None

    def test_skips_unknown_record_type(self):
        """Unknown kinds are ignored."""
        record = RemoteRecord("CD_Widget", str(uuid.uuid4()), ITEMS_ZONE, {"CD_name": "x"})
        assert self.mapper.apply(record, self.store) is None

    def test_skips_record_without_identity(self):
        """Records with no UUID anywhere are skipped."""
        record = RemoteRecord("CD_Category", "not-a-uuid", CATEGORIES_ZONE, {"CD_name": "Tools"})
        assert self.mapper.apply(record, self.store) is None

    def test_partial_update_preserves_unset_fields(self):
        """An update carrying only name and quantity keeps symbol, image and sort order."""
        item_id = uuid.uuid4()
        self.mapper.apply(
            item_record(
                item_id,
                CD_symbol="hammer",
                CD_imageData=b"\x89PNG",
                CD_sortOrder=7,
                CD_symbolColorData=b"\x01\x02\x03\x04",
            ),
            self.store,
        )
        self.mapper.apply(item_record(item_id, name="Claw Hammer"), self.store)

        item = self.store.get(EntityKind.ITEM, item_id)
        assert item.name == "Claw Hammer"
        assert item.quantity == 3
        assert item.symbol == "hammer"
        assert item.image_data == b"\x89PNG"
        assert item.sort_order == 7
        assert item.symbol_color_data == b"\x01\x02\x03\x04"

    def test_mistyped_optional_field_is_ignored(self):
        """Optional fields with the wrong type leave the local value alone."""
        item_id = uuid.uuid4()
        self.mapper.apply(item_record(item_id, CD_sortOrder=4), self.store)
        self.mapper.apply(item_record(item_id, CD_sortOrder="five"), self.store)

        assert self.store.get(EntityKind.ITEM, item_id).sort_order == 4

    def test_modified_date_kept_without_timestamp(self):
        """Re-applying a record without a timestamp does not move modified_date."""
        item_id = uuid.uuid4()
        self.mapper.apply(item_record(item_id, modified_at=T1), self.store)
        self.mapper.apply(item_record(item_id), self.store)

        assert self.store.get(EntityKind.ITEM, item_id).modified_date == T1

    def test_creation_date_from_record(self):
        """CD_itemCreationDate sets the creation date."""
        item_id = uuid.uuid4()
        self.mapper.apply(item_record(item_id, CD_itemCreationDate=T1), self.store)
        assert self.store.get(EntityKind.ITEM, item_id).creation_date == T1

    def test_stages_relationships_for_new_item(self):
        """References are staged even when the item is brand new."""
        item_id, location_id, category_id = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        self.mapper.apply(item_record(item_id, location=location_id, category=category_id), self.store)

        refs = self.tracker.get(item_id)
        assert refs.location_id == location_id
        assert refs.category_id == category_id
        assert self.store.get(EntityKind.ITEM, item_id).location is None

    def test_accepts_string_references(self):
        """References may arrive as bare UUID strings."""
        item_id, location_id = uuid.uuid4(), uuid.uuid4()
        self.mapper.apply(item_record(item_id, CD_location=str(location_id)), self.store)
        assert self.tracker.get(item_id).location_id == location_id

    def test_unparseable_reference_is_not_staged(self):
        """A reference that is not a UUID counts as not expressed."""
        item_id = uuid.uuid4()
        self.mapper.apply(item_record(item_id, CD_location=RecordReference("nope")), self.store)
        assert item_id not in self.tracker

    def test_location_defaults(self):
        """New locations default to white and visible."""
        location_id = uuid.uuid4()
        self.mapper.apply(location_record(location_id), self.store)

        location = self.store.get(EntityKind.LOCATION, location_id)
        assert location.name == "Garage"
        assert location.color_data == WHITE_RGBA
        assert location.display_in_row is True
        assert location.sort_order == 0

    def test_location_with_undecodable_color_is_white(self):
        """A new location whose color is not 4 bytes gets white."""
        location_id = uuid.uuid4()
        self.mapper.apply(location_record(location_id, CD_colorData=b"\x01\x02"), self.store)
        assert self.store.get(EntityKind.LOCATION, location_id).color_data == WHITE_RGBA

    def test_location_update_fields(self):
        """Location updates overwrite present fields only."""
        location_id = uuid.uuid4()
        self.mapper.apply(location_record(location_id, CD_colorData=b"\x10\x20\x30\xff", CD_sortOrder=1), self.store)
        self.mapper.apply(location_record(location_id, name="Shed", CD_displayInRow=False), self.store)

        location = self.store.get(EntityKind.LOCATION, location_id)
        assert location.name == "Shed"
        assert location.color_data == b"\x10\x20\x30\xff"
        assert location.sort_order == 1
        assert location.display_in_row is False

    def test_category_create_and_update(self):
        """Categories follow the same create-or-update rules."""
        category_id = uuid.uuid4()
        first = self.mapper.apply(category_record(category_id, CD_sortOrder=3), self.store)
        second = self.mapper.apply(category_record(category_id, name="Hardware"), self.store)

        assert first.created is True
        assert second.created is False
        category = self.store.get(EntityKind.CATEGORY, category_id)
        assert category.name == "Hardware"
        assert category.sort_order == 3

    def test_idempotent_application(self):
        """Applying the same record twice equals applying it once."""
        item_id = uuid.uuid4()
        record = item_record(item_id, modified_at=T1, CD_symbol="wrench", CD_itemCreationDate=T1)

        self.mapper.apply(record, self.store)
        once = snapshot(self.store.get(EntityKind.ITEM, item_id))
        self.mapper.apply(record, self.store)
        twice = snapshot(self.store.get(EntityKind.ITEM, item_id))

        assert once == twice
        assert self.store.count(EntityKind.ITEM) == 1


class TestPendingRelationshipTracker:
    """Tests for PendingRelationshipTracker."""

    def setup_method(self):
        self.tracker = PendingRelationshipTracker()
        self.store = MemoryEntityStore()

    def _add_item(self) -> Item:
        item = Item(id=uuid.uuid4(), name="Drill", quantity=1)
        self.store.insert(item)
        return item

    def _add_location(self) -> Location:
        location = Location(id=uuid.uuid4(), name="Garage")
        self.store.insert(location)
        return location

    def test_stage_merges_slots(self):
        """A present id overwrites its slot; None keeps the previous value."""
        item_id, loc_a, loc_b, cat = uuid.uuid4(), uuid.uuid4(), uuid.uuid4(), uuid.uuid4()

        self.tracker.stage(item_id, location_id=loc_a)
        self.tracker.stage(item_id, category_id=cat)
        assert self.tracker.get(item_id).location_id == loc_a
        assert self.tracker.get(item_id).category_id == cat

        self.tracker.stage(item_id, location_id=loc_b)
        assert self.tracker.get(item_id).location_id == loc_b
        assert self.tracker.get(item_id).category_id == cat

    def test_stage_without_ids_creates_nothing(self):
        """Staging no references does not create an entry."""
        self.tracker.stage(uuid.uuid4())
        assert len(self.tracker) == 0

    def test_resolve_links_and_evicts(self):
        """A fully satisfied entry is linked and removed."""
        item = self._add_item()
        location = self._add_location()
        self.tracker.stage(item.id, location_id=location.id)

        report = self.tracker.resolve(self.store)

        assert item.location is location
        assert report.linked == 1
        assert report.resolved == [item.id]
        assert item.id not in self.tracker

    def test_partial_resolution_keeps_entry(self):
        """The entry stays until every non-nil slot resolves, but found links apply now."""
        item = self._add_item()
        location = self._add_location()
        missing_category = uuid.uuid4()
        self.tracker.stage(item.id, location_id=location.id, category_id=missing_category)

        report = self.tracker.resolve(self.store)

        assert item.location is location
        assert item.category is None
        assert item.id in self.tracker
        assert report.pending == 1

    def test_entry_for_missing_item_is_kept(self):
        """Entries whose item is not stored yet are retried later."""
        item_id = uuid.uuid4()
        location = self._add_location()
        self.tracker.stage(item_id, location_id=location.id)

        self.tracker.resolve(self.store)
        assert item_id in self.tracker

    def test_resolve_restricted_to_item_ids(self):
        """Restricting resolve leaves other entries untouched."""
        first = self._add_item()
        second = self._add_item()
        location = self._add_location()
        self.tracker.stage(first.id, location_id=location.id)
        self.tracker.stage(second.id, location_id=location.id)

        self.tracker.resolve(self.store, item_ids=[first.id])

        assert first.location is location
        assert second.location is None
        assert second.id in self.tracker

    def test_resolve_is_idempotent(self):
        """Calling resolve repeatedly is harmless."""
        item = self._add_item()
        location = self._add_location()
        self.tracker.stage(item.id, location_id=location.id)

        self.tracker.resolve(self.store)
        report = self.tracker.resolve(self.store)

        assert item.location is location
        assert report.linked == 0
        assert len(self.tracker) == 0

    def test_evict(self):
        """Evict drops an entry and reports whether it existed."""
        item_id = uuid.uuid4()
        self.tracker.stage(item_id, location_id=uuid.uuid4())

        assert self.tracker.evict(item_id) is True
        assert self.tracker.evict(item_id) is False

    def test_shares_map_with_owner(self):
        """The tracker mutates the map it was given."""
        pending: dict = {}
        tracker = PendingRelationshipTracker(pending)
        item_id = uuid.uuid4()
        tracker.stage(item_id, location_id=uuid.uuid4())
        assert item_id in pending


class TestReconciliationEngine:
    """Tests for ReconciliationEngine."""

    def test_item_before_location_scenario(self, engine: ReconciliationEngine, store: FlakyStore):
        """Drill arrives before Garage; the link forms once Garage exists."""
        i1, l1 = uuid.uuid4(), uuid.uuid4()

        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1, name="Drill", quantity=3, location=l1))]))

        item = store.get(EntityKind.ITEM, i1)
        assert item.quantity == 3
        assert item.location is None
        assert engine.tracker.get(i1).location_id == l1

        engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, location_record(l1, name="Garage"))]))

        assert item.location is store.get(EntityKind.LOCATION, l1)
        assert item.location.name == "Garage"
        assert i1 not in engine.tracker

    def test_order_independence(self, source: ScriptedSource):
        """Item-then-location and location-then-item produce the same link."""
        i1, l1 = uuid.uuid4(), uuid.uuid4()
        item_batch = batch(ITEMS_ZONE, item_record(i1, location=l1))
        location_batch = batch(LOCATIONS_ZONE, location_record(l1))

        forward_store = MemoryEntityStore()
        ReconciliationEngine(source, forward_store).apply_changes(FetchResult([item_batch, location_batch]))
        reverse_store = MemoryEntityStore()
        ReconciliationEngine(source, reverse_store).apply_changes(FetchResult([location_batch, item_batch]))

        forward = forward_store.get(EntityKind.ITEM, i1)
        reverse = reverse_store.get(EntityKind.ITEM, i1)
        assert forward.location.id == reverse.location.id == l1

    def test_dependent_before_target_in_one_batch(self, engine: ReconciliationEngine, store: FlakyStore):
        """A location later in the same batch than its item still gets linked."""
        i1, l1 = uuid.uuid4(), uuid.uuid4()
        mixed = batch(ITEMS_ZONE, item_record(i1, location=l1), location_record(l1))

        result = engine.apply_changes(FetchResult([mixed]))

        assert store.get(EntityKind.ITEM, i1).location.id == l1
        assert result.pending == 0

    def test_reference_omission_keeps_link(self, engine: ReconciliationEngine, store: FlakyStore):
        """A later record without reference fields does not clear the link."""
        i1, l1, c1 = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        engine.apply_changes(
            FetchResult(
                [
                    batch(LOCATIONS_ZONE, location_record(l1)),
                    batch(CATEGORIES_ZONE, category_record(c1)),
                    batch(ITEMS_ZONE, item_record(i1, location=l1, category=c1, CD_symbol="drill")),
                ]
            )
        )
        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1, name="Cordless Drill", quantity=None))]))
        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1, name="Cordless Drill"))]))

        item = store.get(EntityKind.ITEM, i1)
        assert item.name == "Cordless Drill"
        assert item.quantity == 3
        assert item.symbol == "drill"
        assert item.location.id == l1
        assert item.category.id == c1

    def test_deletion_evicts_pending(self, engine: ReconciliationEngine, store: FlakyStore):
        """A deleted item is not resurrected or relinked when its location shows up."""
        x, l1 = uuid.uuid4(), uuid.uuid4()
        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(x, location=l1))]))
        assert x in engine.tracker

        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, deleted=(x,))]))
        assert x not in engine.tracker
        assert store.get(EntityKind.ITEM, x) is None

        engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, location_record(l1))]))
        assert store.get(EntityKind.ITEM, x) is None
        assert len(engine.tracker) == 0

    def test_delete_unknown_id_is_noop(self, engine: ReconciliationEngine):
        """Deleting something that is not stored is not an error."""
        result = engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, deleted=(uuid.uuid4(),))]))
        assert result.deleted == 0
        assert result.committed

    def test_delete_uses_zone_kind(self, engine: ReconciliationEngine, store: FlakyStore):
        """The deletion's zone decides which kind is searched."""
        l1 = uuid.uuid4()
        engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, location_record(l1))]))

        engine.apply_changes(FetchResult([batch(CATEGORIES_ZONE, deleted=(l1,))]))
        assert store.get(EntityKind.LOCATION, l1) is not None

        result = engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, deleted=(l1,))]))
        assert store.get(EntityKind.LOCATION, l1) is None
        assert result.deleted == 1

    def test_zone_cascade_categories(self, engine: ReconciliationEngine, store: FlakyStore):
        """Deleting the categories zone removes every category and nothing else."""
        i1, l1, c1, c2 = uuid.uuid4(), uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
        engine.apply_changes(
            FetchResult(
                [
                    batch(LOCATIONS_ZONE, location_record(l1)),
                    batch(CATEGORIES_ZONE, category_record(c1), category_record(c2, name="Paint")),
                    batch(ITEMS_ZONE, item_record(i1, location=l1, category=c1)),
                ]
            )
        )

        result = engine.apply_changes(FetchResult(deleted_zones=[CATEGORIES_ZONE]))

        assert store.count(EntityKind.CATEGORY) == 0
        assert store.count(EntityKind.LOCATION) == 1
        item = store.get(EntityKind.ITEM, i1)
        assert item is not None
        assert item.location.id == l1
        assert store.get(EntityKind.CATEGORY, item.category.id) is None
        assert result.purged_zones == [CATEGORIES_ZONE]
        assert result.purged_entities == 2

    def test_items_zone_cascade_evicts_pending(self, engine: ReconciliationEngine, store: FlakyStore):
        """Purging items also drops their pending relationships."""
        i1 = uuid.uuid4()
        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1, location=uuid.uuid4()))]))

        engine.apply_changes(FetchResult(deleted_zones=[ITEMS_ZONE]))

        assert store.count(EntityKind.ITEM) == 0
        assert len(engine.tracker) == 0

    def test_unknown_zone_deletion_ignored(self, engine: ReconciliationEngine, store: FlakyStore):
        """Zones the engine does not know about are ignored."""
        engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, location_record(uuid.uuid4()))]))
        result = engine.apply_changes(FetchResult(deleted_zones=["SomethingElse"]))

        assert store.count(EntityKind.LOCATION) == 1
        assert result.purged_zones == []

    def test_last_write_wins_within_batch(self, engine: ReconciliationEngine, store: FlakyStore):
        """Multiple records for one id collapse to the last delivered."""
        i1 = uuid.uuid4()
        engine.apply_changes(
            FetchResult(
                [
                    batch(
                        ITEMS_ZONE,
                        item_record(i1, name="First", quantity=1, modified_at=T2),
                        item_record(i1, name="Second", quantity=2, modified_at=T1),
                    )
                ]
            )
        )

        item = store.get(EntityKind.ITEM, i1)
        assert item.name == "Second"
        assert item.quantity == 2
        assert store.count(EntityKind.ITEM) == 1

    def test_malformed_record_does_not_abort_pass(self, engine: ReconciliationEngine, store: FlakyStore):
        """Bad records are skipped and the rest of the batch applies."""
        good = uuid.uuid4()
        result = engine.apply_changes(
            FetchResult(
                [
                    batch(
                        ITEMS_ZONE,
                        RemoteRecord("CD_Item", "junk", ITEMS_ZONE, {"CD_name": "?"}),
                        item_record(good),
                    )
                ]
            )
        )

        assert result.skipped == 1
        assert result.created == 1
        assert store.get(EntityKind.ITEM, good) is not None

    def test_commit_failure_keeps_mutations(self, engine: ReconciliationEngine, store: FlakyStore):
        """A failed commit is recorded, in-memory changes stay, and a later commit persists them."""
        i1 = uuid.uuid4()
        store.fail = True

        result = engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1))]))

        assert not result.committed
        assert result.commit_errors
        assert store.get(EntityKind.ITEM, i1) is not None
        assert store.commit_count == 0

        store.fail = False
        retry = engine.apply_changes(FetchResult())
        assert retry.committed
        assert store.commit_count == 1

    def test_result_counts(self, engine: ReconciliationEngine):
        """PassResult reflects what was applied."""
        i1, l1 = uuid.uuid4(), uuid.uuid4()
        result = engine.apply_changes(
            FetchResult([batch(LOCATIONS_ZONE, location_record(l1)), batch(ITEMS_ZONE, item_record(i1, location=l1))])
        )

        assert result.batches == 2
        assert result.created == 2
        assert result.links == 1
        assert result.applied == 2
        assert result.finished is not None

    @pytest.mark.asyncio
    async def test_run_pass_fetches(self, engine: ReconciliationEngine, source: ScriptedSource, store: FlakyStore):
        """run_pass pulls from the source and applies the result."""
        i1 = uuid.uuid4()
        source.queue(FetchResult([batch(ITEMS_ZONE, item_record(i1))]))

        result = await engine.run_pass()

        assert source.fetch_count == 1
        assert result.created == 1
        assert store.get(EntityKind.ITEM, i1) is not None

    @pytest.mark.asyncio
    async def test_run_pass_wraps_source_errors(self, engine: ReconciliationEngine, source: ScriptedSource):
        """Unexpected source exceptions surface as FetchError."""
        source.queue(ConnectionError("offline"))

        with pytest.raises(FetchError, match="offline"):
            await engine.run_pass()

    def test_rebind_store_keeps_pending(self, engine: ReconciliationEngine):
        """Rebinding keeps staged relationships and resolves against the new store."""
        i1, l1 = uuid.uuid4(), uuid.uuid4()
        engine.apply_changes(FetchResult([batch(ITEMS_ZONE, item_record(i1, location=l1))]))

        new_store = MemoryEntityStore()
        new_store.insert(Item(id=i1, name="Drill", quantity=3))
        engine.rebind_store(new_store)
        engine.apply_changes(FetchResult([batch(LOCATIONS_ZONE, location_record(l1))]))

        assert new_store.get(EntityKind.ITEM, i1).location.id == l1
