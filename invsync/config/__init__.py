# invsync Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from invsync.config.defaults import DEFAULT_CONFIG, generate_default_config, get_default_config
from invsync.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    load_or_default,
    save_config,
    validate_config_file,
)
from invsync.config.schema import (
    CloudConfig,
    InvsyncConfig,
    OutputConfig,
    StoreConfig,
    SyncSettings,
    ZoneConfig,
)

__all__ = [
    # Schema
    "InvsyncConfig",
    "CloudConfig",
    "ZoneConfig",
    "SyncSettings",
    "StoreConfig",
    "OutputConfig",
    # Loader
    "load_config",
    "load_or_default",
    "save_config",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
    "get_default_config",
]
