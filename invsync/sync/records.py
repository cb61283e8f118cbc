# invsync Remote Records
# Change records and the change source interface

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Protocol, Union, runtime_checkable


class RecordKind(str, Enum):
    """Record type tags used by the remote store."""

    ITEM = "CD_Item"
    LOCATION = "CD_Location"
    CATEGORY = "CD_Category"

    @classmethod
    def parse(cls, value: str) -> Optional["RecordKind"]:
        """Return the kind for a type tag, or None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


class AccountStatus(str, Enum):
    """Remote account availability."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class AccountChange(str, Enum):
    """Account events reported by the platform."""

    SIGN_IN = "sign_in"
    SIGN_OUT = "sign_out"
    SWITCH_ACCOUNTS = "switch_accounts"


@dataclass(frozen=True)
class RecordReference:
    """Pointer from one record to another by storage name."""

    record_name: str


@dataclass
class RemoteRecord:
    """
    One remote change unit: a kind tag plus a field bag.

    ``record_name`` is the storage-assigned identifier; ``fields`` holds the
    CD_* values as delivered.
    """

    record_type: str
    record_name: str
    zone: str
    fields: dict[str, Any] = field(default_factory=dict)
    modified_at: Optional[datetime] = None

    @property
    def kind(self) -> Optional[RecordKind]:
        return RecordKind.parse(self.record_type)

    def get(self, key: str) -> Any:
        return self.fields.get(key)


@dataclass(frozen=True)
class RecordDeletion:
    """A deleted record, identified by storage name within its zone."""

    record_name: str
    zone: str


@dataclass
class ZoneChanges:
    """One batch of changes for a single zone, in delivery order."""

    zone: str
    modifications: list[RemoteRecord] = field(default_factory=list)
    deletions: list[RecordDeletion] = field(default_factory=list)


@dataclass
class FetchResult:
    """Everything a single fetch delivered."""

    zone_changes: list[ZoneChanges] = field(default_factory=list)
    deleted_zones: list[str] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return sum(len(batch.modifications) + len(batch.deletions) for batch in self.zone_changes)


@runtime_checkable
class RemoteChangeSource(Protocol):
    """
    Source of remote changes.

    Implementations keep their own resumption cursor, so consecutive calls to
    ``fetch_changes`` return only what is new since the last successful call.
    Failures should be raised as ``FetchError``.
    """

    async def fetch_changes(self) -> FetchResult: ...

    async def account_status(self) -> AccountStatus: ...


ReferenceValue = Union[RecordReference, str, None]
