# invsync Test Fixtures
# Pytest fixtures for invsync tests

import tempfile
from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml

from factories import CATEGORIES_ZONE, ITEMS_ZONE, LOCATIONS_ZONE, FlakyStore, ScriptedSource
from invsync.errors import FetchError
from invsync.sync.engine import ReconciliationEngine
from invsync.sync.state import SyncStateMachine


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("INVSYNC_CONFIG", raising=False)
    return home


@pytest.fixture
def store() -> FlakyStore:
    """Empty in-memory store."""
    return FlakyStore()


@pytest.fixture
def source() -> ScriptedSource:
    """Scripted change source with an available account."""
    return ScriptedSource()


@pytest.fixture
def engine(source: ScriptedSource, store: FlakyStore) -> ReconciliationEngine:
    """Engine wired to the scripted source and in-memory store."""
    return ReconciliationEngine(source, store)


@pytest.fixture
def machine(engine: ReconciliationEngine) -> SyncStateMachine:
    """State machine with auto-sync timer disabled."""
    sm = SyncStateMachine(engine, interval=0.01, auto_sync=False)
    sm.is_account_available = True
    return sm


@pytest.fixture
def fetch_error() -> FetchError:
    return FetchError("network unreachable")


@pytest.fixture
def sample_config(temp_home: Path) -> dict:
    """Create sample configuration dict."""
    base = temp_home / ".config" / "invsync"
    return {
        "cloud": {
            "container": "iCloud.com.example.Inventory",
            "zones": {
                "items": ITEMS_ZONE,
                "locations": LOCATIONS_ZONE,
                "categories": CATEGORIES_ZONE,
            },
        },
        "sync": {
            "auto_sync": False,
            "interval_seconds": 30,
            "feed_path": str(base / "changes.yaml"),
            "cursor_path": str(base / ".feed_cursor.yaml"),
        },
        "store": {"path": str(base / "inventory.yaml")},
        "output": {"verbose": False, "colored": False, "log_file": None},
    }


@pytest.fixture
def config_file(temp_home: Path, sample_config: dict) -> Path:
    """Create a configuration file."""
    config_dir = temp_home / ".config" / "invsync"
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / "config.yaml"

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(sample_config, f, default_flow_style=False)

    return config_path


@pytest.fixture
def feed_file(sample_config: dict) -> Path:
    """Create a change feed with one location and one item referencing it."""
    location_id = "5d0b3a52-6a35-4c58-9d4e-1c4f1f0a9b10"
    item_id = "0f6f3b1e-2a53-4f0b-8b9e-6c1f8e2d7a01"
    feed = {
        "account": "available",
        "changes": [
            {
                "zone": ITEMS_ZONE,
                "modified": [
                    {
                        "type": "CD_Item",
                        "name": item_id,
                        "modified": datetime(2025, 9, 28, 10, 0, tzinfo=timezone.utc),
                        "fields": {"CD_name": "Drill", "CD_quantity": 3, "CD_location": location_id},
                    }
                ],
            },
            {
                "zone": LOCATIONS_ZONE,
                "modified": [
                    {
                        "type": "CD_Location",
                        "name": location_id,
                        "fields": {"CD_name": "Garage", "CD_colorData": b"\x10\x20\x30\xff"},
                    }
                ],
            },
        ],
    }
    path = Path(sample_config["sync"]["feed_path"])
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(feed, sort_keys=False), encoding="utf-8")
    return path
