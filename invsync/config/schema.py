# invsync Configuration Schema
# Pydantic models for YAML configuration validation

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ZoneConfig(BaseModel):
    """Remote zone names, one per record kind."""

    items: str = Field(default="InventoryItems", description="Zone holding Item records")
    locations: str = Field(default="InventoryLocations", description="Zone holding Location records")
    categories: str = Field(default="InventoryCategories", description="Zone holding Category records")

    @field_validator("items", "locations", "categories")
    @classmethod
    def non_empty(cls, v: str) -> str:
        """Zone names must not be blank."""
        if not v.strip():
            raise ValueError("zone name must not be empty")
        return v


class CloudConfig(BaseModel):
    """Remote change source settings."""

    container: str = Field(default="iCloud.com.lagera.Inventory", description="Remote container identifier")
    zones: ZoneConfig = Field(default_factory=ZoneConfig, description="Zone names per record kind")


class SyncSettings(BaseModel):
    """Sync scheduling and change feed settings."""

    auto_sync: bool = Field(default=True, description="Run automatic passes on a fixed interval")
    interval_seconds: float = Field(default=60.0, gt=0, description="Seconds between automatic passes")
    feed_path: str = Field(default="~/.config/invsync/changes.yaml", description="Path to the change feed file")
    cursor_path: str = Field(
        default="~/.config/invsync/.feed_cursor.yaml", description="Path to the persisted feed cursor"
    )

    @field_validator("feed_path", "cursor_path")
    @classmethod
    def expand_paths(cls, v: str) -> str:
        """Expand ~ in paths."""
        return str(Path(v).expanduser())


class StoreConfig(BaseModel):
    """Local entity store settings."""

    path: str = Field(default="~/.config/invsync/inventory.yaml", description="Path to the local inventory file")

    @field_validator("path")
    @classmethod
    def expand_path(cls, v: str) -> str:
        """Expand ~ in path."""
        return str(Path(v).expanduser())


class OutputConfig(BaseModel):
    """Output and logging configuration."""

    verbose: bool = Field(default=False, description="Enable verbose output")
    colored: bool = Field(default=True, description="Enable colored output")
    log_file: Optional[str] = Field(default=None, description="Path to diagnostic log file")
    log_level: str = Field(default="INFO", description="Level for the diagnostic log file")

    @field_validator("log_file")
    @classmethod
    def expand_optional_path(cls, v: Optional[str]) -> Optional[str]:
        """Expand ~ in optional paths."""
        if v is None:
            return None
        return str(Path(v).expanduser())

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level


class InvsyncConfig(BaseModel):
    """Root configuration model for invsync."""

    cloud: CloudConfig = Field(default_factory=CloudConfig, description="Remote settings")
    sync: SyncSettings = Field(default_factory=SyncSettings, description="Sync settings")
    store: StoreConfig = Field(default_factory=StoreConfig, description="Local store settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")

    def zone_names(self) -> list[str]:
        """Return the configured zone names."""
        zones = self.cloud.zones
        return [zones.items, zones.locations, zones.categories]
