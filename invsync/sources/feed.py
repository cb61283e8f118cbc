# invsync Feed Change Source
# Remote change source backed by a YAML change feed with a persisted cursor

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from invsync.errors import FetchError
from invsync.sync.records import AccountStatus, FetchResult, RecordDeletion, RemoteRecord, ZoneChanges
from invsync.utils.paths import atomic_write

logger = logging.getLogger(__name__)


@dataclass
class FeedCursor:
    """Resumption state: how many feed entries have been delivered."""

    position: int = 0
    updated: Optional[str] = None  # ISO format datetime

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position, "updated": self.updated}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FeedCursor":
        position = data.get("position", 0)
        return cls(
            position=position if isinstance(position, int) and position >= 0 else 0,
            updated=data.get("updated"),
        )


class FeedCursorStore:
    """Loads and saves the feed cursor."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> FeedCursor:
        """Load the cursor; a missing or unreadable file means start from the beginning."""
        if not self.path.exists():
            return FeedCursor()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Feed cursor %s unreadable, starting over: %s", self.path, e)
            return FeedCursor()
        if not isinstance(data, dict):
            return FeedCursor()
        return FeedCursor.from_dict(data)

    def save(self, cursor: FeedCursor) -> None:
        """Save the cursor."""
        cursor.updated = datetime.now().isoformat()
        atomic_write(self.path, yaml.safe_dump(cursor.to_dict(), sort_keys=False))


class FeedChangeSource:
    """
    Reads remote changes from a YAML feed file.

    The feed is an append-only list of entries, each either a zone batch
    (``zone``, ``modified``, ``deleted``) or a zone deletion
    (``zone_deleted``). Each fetch returns the entries after the stored
    cursor and then advances it. Zone deletions are applied before the
    batches of the same fetch, so a fetch stops at the first zone deletion
    that follows a batch and the next fetch resumes there.
    """

    def __init__(self, feed_path: Path, cursor_path: Path):
        """
        Initialize the source.

        Args:
            feed_path: Path to the change feed.
            cursor_path: Path where the resumption cursor is stored.
        """
        self.feed_path = feed_path
        self.cursors = FeedCursorStore(cursor_path)

    def _read_feed(self) -> dict[str, Any]:
        if not self.feed_path.exists():
            raise FetchError(f"Change feed not found: {self.feed_path}")
        try:
            with open(self.feed_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise FetchError(f"Could not read change feed {self.feed_path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FetchError(f"Change feed {self.feed_path} must be a mapping")
        return data

    async def account_status(self) -> AccountStatus:
        """Account status declared by the feed; unknown when there is no feed."""
        try:
            data = self._read_feed()
        except FetchError:
            return AccountStatus.UNKNOWN
        try:
            return AccountStatus(str(data.get("account", AccountStatus.AVAILABLE.value)))
        except ValueError:
            return AccountStatus.UNKNOWN

    async def fetch_changes(self) -> FetchResult:
        """Return feed entries after the cursor and advance it past them."""
        data = self._read_feed()
        entries = data.get("changes") or []
        if not isinstance(entries, list):
            raise FetchError("Change feed 'changes' must be a list")

        cursor = self.cursors.load()
        if cursor.position > len(entries):
            logger.warning("Feed is shorter than cursor (%d > %d), refetching all", cursor.position, len(entries))
            cursor.position = 0

        result = FetchResult()
        end = len(entries)
        for index, entry in enumerate(entries[cursor.position :], start=cursor.position):
            if not isinstance(entry, dict):
                raise FetchError(f"Feed entry {index} must be a mapping")
            if "zone_deleted" in entry:
                if result.zone_changes:
                    end = index
                    break
                result.deleted_zones.append(str(entry["zone_deleted"]))
            elif "zone" in entry:
                result.zone_changes.append(self._parse_batch(entry, index))
            else:
                raise FetchError(f"Feed entry {index} has neither 'zone' nor 'zone_deleted'")

        cursor.position = end
        try:
            self.cursors.save(cursor)
        except OSError as e:
            raise FetchError(f"Could not save feed cursor: {e}") from e
        return result

    @staticmethod
    def _parse_batch(entry: dict[str, Any], index: int) -> ZoneChanges:
        zone = str(entry["zone"])
        batch = ZoneChanges(zone=zone)

        for raw in entry.get("modified") or []:
            if not isinstance(raw, dict) or "type" not in raw:
                raise FetchError(f"Feed entry {index}: modification without a type")
            fields = raw.get("fields") or {}
            if not isinstance(fields, dict):
                raise FetchError(f"Feed entry {index}: fields must be a mapping")
            batch.modifications.append(
                RemoteRecord(
                    record_type=str(raw["type"]),
                    record_name=str(raw.get("name", "")),
                    zone=zone,
                    fields=dict(fields),
                    modified_at=_parse_timestamp(raw.get("modified")),
                )
            )

        for name in entry.get("deleted") or []:
            batch.deletions.append(RecordDeletion(record_name=str(name), zone=zone))

        return batch


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None
