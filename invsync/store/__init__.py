# invsync Store Module
# Local entities and the stores that hold them

from invsync.store.base import EntityStore
from invsync.store.entities import (
    Category,
    Entity,
    EntityKind,
    Item,
    Location,
    WHITE_RGBA,
    decode_rgba,
    encode_rgba,
)
from invsync.store.memory import MemoryEntityStore
from invsync.store.yaml_store import YamlEntityStore

__all__ = [
    # Entities
    "Item",
    "Location",
    "Category",
    "Entity",
    "EntityKind",
    "WHITE_RGBA",
    "encode_rgba",
    "decode_rgba",
    # Stores
    "EntityStore",
    "MemoryEntityStore",
    "YamlEntityStore",
]
