# invsync Sync Module
# Reconciliation engine and its components

from invsync.sync.engine import PassResult, ReconciliationEngine
from invsync.sync.mapper import MappedRecord, RecordMapper, resolve_identity
from invsync.sync.pending import PendingRelationship, PendingRelationshipTracker, ResolveReport
from invsync.sync.records import (
    AccountChange,
    AccountStatus,
    FetchResult,
    RecordDeletion,
    RecordKind,
    RecordReference,
    RemoteChangeSource,
    RemoteRecord,
    ZoneChanges,
)
from invsync.sync.state import SyncState, SyncStateMachine, SyncStatus

__all__ = [
    # Records
    "RecordKind",
    "RecordReference",
    "RemoteRecord",
    "RecordDeletion",
    "ZoneChanges",
    "FetchResult",
    "AccountStatus",
    "AccountChange",
    "RemoteChangeSource",
    # Mapper
    "RecordMapper",
    "MappedRecord",
    "resolve_identity",
    # Pending
    "PendingRelationship",
    "PendingRelationshipTracker",
    "ResolveReport",
    # Engine
    "ReconciliationEngine",
    "PassResult",
    # State
    "SyncState",
    "SyncStatus",
    "SyncStateMachine",
]
