# invsync Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "cloud": {
        "container": "iCloud.com.lagera.Inventory",
        "zones": {
            "items": "InventoryItems",
            "locations": "InventoryLocations",
            "categories": "InventoryCategories",
        },
    },
    "sync": {
        "auto_sync": True,
        "interval_seconds": 60.0,
        "feed_path": "~/.config/invsync/changes.yaml",
        "cursor_path": "~/.config/invsync/.feed_cursor.yaml",
    },
    "store": {
        "path": "~/.config/invsync/inventory.yaml",
    },
    "output": {
        "verbose": False,
        "colored": True,
        "log_file": "~/.config/invsync/sync.log",
        "log_level": "INFO",
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# invsync - Inventory Cloud Sync Configuration
#
# invsync is read-only: it fetches changes from the cloud and merges them
# into the local inventory store. It never uploads.
#
# Zones:
#   - items:      Item records (CD_Item)
#   - locations:  Location records (CD_Location)
#   - categories: Category records (CD_Category)
#
# Automatic sync runs every interval_seconds while `invsync watch` is active.
# Failures of automatic passes are only written to the log file.

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
