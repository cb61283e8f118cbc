"""invsync - read-only cloud change reconciliation for a personal inventory.

Fetches item, location and category changes from a remote change source and
merges them into a local, relationally consistent entity store.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Item",
    "Location",
    "Category",
    "MemoryEntityStore",
    "YamlEntityStore",
    "ReconciliationEngine",
    "PassResult",
    "SyncStateMachine",
    "SyncState",
    "SyncStatus",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name in ("Item", "Location", "Category", "MemoryEntityStore", "YamlEntityStore"):
        from invsync import store

        return getattr(store, name)
    if name in ("ReconciliationEngine", "PassResult", "SyncStateMachine", "SyncState", "SyncStatus"):
        from invsync import sync

        return getattr(sync, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
