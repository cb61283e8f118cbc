# invsync In-Memory Entity Store
# Dictionary-backed store; base class for the YAML file store

from typing import Optional
from uuid import UUID

from invsync.store.entities import Entity, EntityKind, Item


class MemoryEntityStore:
    """
    Entity store keeping everything in per-kind dictionaries.

    ``commit()`` only bumps a counter; subclasses override ``_persist`` to
    write somewhere durable.
    """

    def __init__(self) -> None:
        self._entities: dict[EntityKind, dict[UUID, Entity]] = {kind: {} for kind in EntityKind}
        self.commit_count = 0

    def get(self, kind: EntityKind, entity_id: UUID) -> Optional[Entity]:
        """Look up an entity by kind and id."""
        return self._entities[kind].get(entity_id)

    def insert(self, entity: Entity) -> None:
        """Insert or replace an entity under its id."""
        self._entities[entity.kind][entity.id] = entity

    def delete(self, entity: Entity) -> None:
        """Remove an entity; unknown entities are ignored."""
        self._entities[entity.kind].pop(entity.id, None)

    def all(self, kind: EntityKind) -> list[Entity]:
        """All entities of a kind, in insertion order."""
        return list(self._entities[kind].values())

    def items(self) -> list[Item]:
        """All items."""
        return self.all(EntityKind.ITEM)  # type: ignore[return-value]

    def count(self, kind: EntityKind) -> int:
        """Number of stored entities of a kind."""
        return len(self._entities[kind])

    def commit(self) -> None:
        """Persist pending changes."""
        self._persist()
        self.commit_count += 1

    def _persist(self) -> None:
        """Hook for durable stores."""
