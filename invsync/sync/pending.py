# invsync Pending Relationships
# Staged item -> location/category links awaiting their targets

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from invsync.store.base import EntityStore
from invsync.store.entities import EntityKind

logger = logging.getLogger(__name__)


@dataclass
class PendingRelationship:
    """Desired references of one item that have not been satisfied yet."""

    location_id: Optional[UUID] = None
    category_id: Optional[UUID] = None


@dataclass
class ResolveReport:
    """Outcome of one resolve call."""

    linked: int = 0
    resolved: list[UUID] = field(default_factory=list)
    pending: int = 0


class PendingRelationshipTracker:
    """
    Tracks item relationships that may not be resolvable yet.

    An item record can arrive before the location or category it references.
    The desired ids are staged here and linked once the targets exist locally.
    The map itself is owned by the caller and shared by reference.
    """

    def __init__(self, pending: Optional[dict[UUID, PendingRelationship]] = None):
        self.pending = pending if pending is not None else {}

    def __len__(self) -> int:
        return len(self.pending)

    def __contains__(self, item_id: UUID) -> bool:
        return item_id in self.pending

    def get(self, item_id: UUID) -> Optional[PendingRelationship]:
        return self.pending.get(item_id)

    def stage(
        self,
        item_id: UUID,
        location_id: Optional[UUID] = None,
        category_id: Optional[UUID] = None,
    ) -> None:
        """
        Merge an observation into the entry for ``item_id``.

        A given id overwrites its slot; None leaves the slot as it was.
        Nothing is staged when both ids are None and no entry exists.
        """
        existing = self.pending.get(item_id)
        if existing is None:
            if location_id is None and category_id is None:
                return
            existing = PendingRelationship()
            self.pending[item_id] = existing
        if location_id is not None:
            existing.location_id = location_id
        if category_id is not None:
            existing.category_id = category_id

    def evict(self, item_id: UUID) -> bool:
        """Drop the entry for a deleted item. Returns True if one existed."""
        return self.pending.pop(item_id, None) is not None

    def resolve(self, store: EntityStore, item_ids: Optional[Iterable[UUID]] = None) -> ResolveReport:
        """
        Link every staged reference whose target exists in ``store``.

        Entries whose non-None slots all resolved are removed; the rest stay
        for the next call. Entries for items not in the store are kept.

        Args:
            store: Store to look up items, locations and categories in.
            item_ids: Restrict the call to these items. Defaults to all entries.

        Returns:
            ResolveReport with counts of links made and entries resolved.
        """
        report = ResolveReport()
        if item_ids is None:
            candidates = list(self.pending)
        else:
            candidates = [item_id for item_id in item_ids if item_id in self.pending]

        for item_id in candidates:
            refs = self.pending[item_id]
            item = store.get(EntityKind.ITEM, item_id)
            if item is None:
                continue

            resolved_all = True
            if refs.location_id is not None:
                location = store.get(EntityKind.LOCATION, refs.location_id)
                if location is not None:
                    item.location = location
                    report.linked += 1
                else:
                    resolved_all = False
            if refs.category_id is not None:
                category = store.get(EntityKind.CATEGORY, refs.category_id)
                if category is not None:
                    item.category = category
                    report.linked += 1
                else:
                    resolved_all = False

            if resolved_all:
                report.resolved.append(item_id)

        for item_id in report.resolved:
            del self.pending[item_id]

        report.pending = len(self.pending)
        if report.resolved:
            logger.debug("Resolved relationships for %d item(s), %d pending", len(report.resolved), report.pending)
        return report
