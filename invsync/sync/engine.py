# invsync Reconciliation Engine
# One fetch -> map -> resolve -> commit pass over remote changes

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from invsync.config.schema import ZoneConfig
from invsync.errors import CommitError, FetchError
from invsync.store.base import EntityStore
from invsync.store.entities import EntityKind, utcnow
from invsync.sync.mapper import RecordMapper, parse_uuid
from invsync.sync.pending import PendingRelationship, PendingRelationshipTracker
from invsync.sync.records import FetchResult, RecordDeletion, RemoteChangeSource, ZoneChanges

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Result of a complete reconciliation pass."""

    started: datetime = field(default_factory=utcnow)
    finished: Optional[datetime] = None
    batches: int = 0
    created: int = 0
    updated: int = 0
    skipped: int = 0
    deleted: int = 0
    purged_zones: list[str] = field(default_factory=list)
    purged_entities: int = 0
    links: int = 0
    pending: int = 0
    commit_errors: list[str] = field(default_factory=list)

    @property
    def applied(self) -> int:
        """Records that changed local state."""
        return self.created + self.updated + self.deleted

    @property
    def committed(self) -> bool:
        """True when every commit in the pass succeeded."""
        return not self.commit_errors


class ReconciliationEngine:
    """
    Merges remote changes into the local entity store.

    Read-only with respect to the remote: it fetches and never uploads.
    Batches are processed sequentially on the caller's event loop.
    """

    def __init__(
        self,
        source: RemoteChangeSource,
        store: EntityStore,
        zones: Optional[ZoneConfig] = None,
    ):
        """
        Initialize the engine.

        Args:
            source: Remote change source.
            store: Local entity store.
            zones: Zone names per record kind (defaults if not provided).
        """
        self.source = source
        self.store = store
        self.zones = zones or ZoneConfig()
        self.pending: dict[UUID, PendingRelationship] = {}
        self.tracker = PendingRelationshipTracker(self.pending)
        self.mapper = RecordMapper(self.tracker)

    def rebind_store(self, store: EntityStore) -> None:
        """Point the engine at a different store; staged relationships are kept."""
        self.store = store

    def kind_for_zone(self, zone: str) -> Optional[EntityKind]:
        """Entity kind stored in a zone, or None for unknown zones."""
        return {
            self.zones.items: EntityKind.ITEM,
            self.zones.locations: EntityKind.LOCATION,
            self.zones.categories: EntityKind.CATEGORY,
        }.get(zone)

    async def run_pass(self) -> PassResult:
        """
        Fetch remote changes and merge them into the store.

        Returns:
            PassResult with counts of what was applied.

        Raises:
            FetchError: If the change source failed.
        """
        result = PassResult()
        try:
            changes = await self.source.fetch_changes()
        except FetchError:
            raise
        except Exception as e:
            raise FetchError(str(e) or type(e).__name__) from e

        logger.debug("Fetched %d record changes, %d zone deletions", changes.record_count, len(changes.deleted_zones))

        return self.apply_changes(changes, result)

    def apply_changes(self, changes: FetchResult, result: Optional[PassResult] = None) -> PassResult:
        """Merge an already fetched change set."""
        if result is None:
            result = PassResult()

        if changes.deleted_zones:
            for zone in changes.deleted_zones:
                self._purge_zone(zone, result)
            self._commit("zone deletions", result)

        for batch in changes.zone_changes:
            self._apply_batch(batch, result)
            self._commit(f"zone {batch.zone}", result)

        # Final pass catches references that span zones or batches
        report = self.tracker.resolve(self.store)
        result.links += report.linked
        self._commit("final resolve", result)

        result.pending = len(self.tracker)
        result.finished = utcnow()
        logger.info(
            "Pass finished: %d created, %d updated, %d deleted, %d skipped, %d pending",
            result.created,
            result.updated,
            result.deleted,
            result.skipped,
            result.pending,
        )
        return result

    def _apply_batch(self, batch: ZoneChanges, result: PassResult) -> None:
        """Apply one zone batch: modifications, fast-path links, deletions, resolve."""
        result.batches += 1
        touched: list[UUID] = []

        for record in batch.modifications:
            mapped = self.mapper.apply(record, self.store)
            if mapped is None:
                result.skipped += 1
                continue
            if mapped.created:
                result.created += 1
            else:
                result.updated += 1
            if mapped.kind is EntityKind.ITEM:
                touched.append(mapped.entity.id)

        if touched:
            result.links += self.tracker.resolve(self.store, item_ids=touched).linked

        for deletion in batch.deletions:
            if self._delete(deletion):
                result.deleted += 1

        result.links += self.tracker.resolve(self.store).linked

    def _delete(self, deletion: RecordDeletion) -> bool:
        """Delete the entity a deletion names. Returns True if one was removed."""
        entity_id = parse_uuid(deletion.record_name)
        if entity_id is None:
            logger.warning("Ignoring deletion with non-UUID name %r", deletion.record_name)
            return False

        self.tracker.evict(entity_id)

        kind = self.kind_for_zone(deletion.zone)
        if kind is None:
            logger.warning("Ignoring deletion in unknown zone %s", deletion.zone)
            return False

        entity = self.store.get(kind, entity_id)
        if entity is None:
            return False
        self.store.delete(entity)
        return True

    def _purge_zone(self, zone: str, result: PassResult) -> None:
        """Delete every local entity of the kind a deleted zone held."""
        logger.info("Zone deleted: %s", zone)
        kind = self.kind_for_zone(zone)
        if kind is None:
            logger.warning("Ignoring deletion of unknown zone %s", zone)
            return

        for entity in self.store.all(kind):
            if kind is EntityKind.ITEM:
                self.tracker.evict(entity.id)
            self.store.delete(entity)
            result.purged_entities += 1
        result.purged_zones.append(zone)

    def _commit(self, reason: str, result: PassResult) -> None:
        """Commit the store; failures are logged and recorded, never raised."""
        try:
            self.store.commit()
        except (CommitError, OSError) as e:
            logger.error("Store commit failed (%s): %s", reason, e)
            result.commit_errors.append(f"{reason}: {e}")
