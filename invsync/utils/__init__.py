# invsync Utilities Module
# Helper functions for path handling

from invsync.utils.paths import atomic_write, ensure_dir

__all__ = [
    "ensure_dir",
    "atomic_write",
]
