# invsync Entity Store Protocol
# Interface the reconciliation engine uses to mutate local entities

from typing import Optional, Protocol, runtime_checkable
from uuid import UUID

from invsync.store.entities import Entity, EntityKind


@runtime_checkable
class EntityStore(Protocol):
    """
    Id-indexed storage for items, locations and categories.

    Mutations become durable only on ``commit()``, which may raise
    ``CommitError``. A failed commit leaves in-memory state intact so the
    next commit persists it.
    """

    def get(self, kind: EntityKind, entity_id: UUID) -> Optional[Entity]: ...

    def insert(self, entity: Entity) -> None: ...

    def delete(self, entity: Entity) -> None: ...

    def all(self, kind: EntityKind) -> list[Entity]: ...

    def commit(self) -> None: ...
