# invsync Configuration Loader
# Finds config.yaml, overlays it on the defaults and checks it for `config validate`

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from invsync.config.defaults import generate_default_config, get_default_config
from invsync.config.schema import InvsyncConfig
from invsync.utils.paths import atomic_write

CONFIG_ENV_VAR = "INVSYNC_CONFIG"
CONFIG_FILENAME = "config.yaml"


def get_config_dir() -> Path:
    """Directory under the home directory that holds config, cursor and log."""
    return Path.home() / ".config" / "invsync"


def get_config_path() -> Path:
    """Where the config file lives: ``$INVSYNC_CONFIG`` if set, else the config dir."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILENAME


def _resolve(config_path: Optional[Path]) -> Path:
    return config_path if config_path is not None else get_config_path()


def _read_document(path: Path) -> dict[str, Any]:
    """
    Parse the file into its top-level sections.

    An empty file yields an empty mapping. Raises ``yaml.YAMLError`` on bad
    syntax and ``ValueError`` when the top level is a list or a scalar.
    """
    with open(path, encoding="utf-8") as f:
        document = yaml.safe_load(f)
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"{path} must contain a mapping of sections, not a {type(document).__name__}")
    return document


def load_config(config_path: Optional[Path] = None) -> InvsyncConfig:
    """
    Build the configuration from a file, taking unset keys from the defaults.

    Raises:
        FileNotFoundError: Nothing exists at the path.
        yaml.YAMLError: The file is not YAML.
        ValueError: Bad top-level shape or a value pydantic rejects
            (``ValidationError`` is a ``ValueError``).
    """
    path = _resolve(config_path)
    if not path.exists():
        raise FileNotFoundError(f"No invsync configuration at {path}; 'invsync config init' writes a starter file")
    return InvsyncConfig.model_validate(_with_defaults(_read_document(path)))


def load_or_default(config_path: Optional[Path] = None) -> InvsyncConfig:
    """Same as load_config, except that a missing file means built-in defaults. Writes nothing."""
    path = _resolve(config_path)
    if path.exists():
        return load_config(path)
    return InvsyncConfig.model_validate(get_default_config())


def save_config(config: InvsyncConfig, config_path: Optional[Path] = None) -> Path:
    """Dump ``config`` to YAML without its unset optional values; returns the target path."""
    path = _resolve(config_path)
    document = config.model_dump(exclude_none=True, mode="json")
    atomic_write(path, yaml.dump(document, default_flow_style=False, sort_keys=False, allow_unicode=True))
    return path


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """Write the commented starter file unless one is there. Returns ``(path, created)``."""
    path = _resolve(config_path)
    if path.exists():
        return path, False
    atomic_write(path, generate_default_config())
    return path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Report every problem with a config file instead of raising.

    Schema problems read ``section -> key: message``. Zone names are also
    checked for clashes, which the per-field schema cannot see.

    Returns:
        ``(True, [])`` for a usable file, otherwise ``(False, problems)``.
    """
    path = _resolve(config_path)
    if not path.exists():
        return False, [f"No invsync configuration at {path}"]

    try:
        document = _read_document(path)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML: {e}"]
    except ValueError as e:
        return False, [str(e)]
    if not document:
        return False, ["Configuration file is empty"]

    try:
        config = InvsyncConfig.model_validate(_with_defaults(document))
    except ValidationError as e:
        return False, [_describe(error) for error in e.errors()]

    zones = config.zone_names()
    if len(set(zones)) != len(zones):
        return False, ["Zone names must be distinct"]
    return True, []


def _describe(error: Any) -> str:
    where = " -> ".join(str(part) for part in error["loc"])
    return f"{where}: {error['msg']}"


def _with_defaults(document: dict[str, Any]) -> dict[str, Any]:
    """
    Overlay the file's sections on the defaults.

    Sections merge one key deep and ``cloud.zones`` one level further, so a
    file naming only the items zone keeps the other two. A section that is
    not a mapping is passed through for the schema to reject.
    """
    merged = get_default_config()
    default_zones = dict(merged["cloud"]["zones"])

    for section, defaults in merged.items():
        given = document.get(section)
        if isinstance(given, dict):
            merged[section] = {**defaults, **given}
        elif given is not None:
            merged[section] = given

    cloud = merged["cloud"]
    if isinstance(cloud, dict):
        zones = cloud.get("zones") or {}
        if isinstance(zones, dict):
            cloud["zones"] = {**default_zones, **zones}
    return merged
