"""Generic CRUD repository contract.

Defined in the domain layer so the domain never depends on
infrastructure. A repository is parameterised by the entity type and
its primary-key type; concrete implementations (in-memory, JSON, SQL)
live in the infrastructure layer.

Lookups signal absence with ``None``. Backend failures surface as
``StorageError``; nothing here retries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from produtos.domain.model.paging import Page, PageRequest, Sort

T = TypeVar("T")
ID = TypeVar("ID")


class CrudRepository(ABC, Generic[T, ID]):

    @abstractmethod
    def id_of(self, entity: T) -> ID:
        """Return the primary key of ``entity``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert ``entity`` or overwrite the stored one with the same key.

        Returns the persisted representation.
        """

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> T | None:
        """Return the entity with this key, or None if not found."""

    @abstractmethod
    def find_all(self, sort: Sort | None = None) -> list[T]:
        """Return every stored entity, ordered by ``sort`` when given."""

    @abstractmethod
    def find_page(self, request: PageRequest) -> Page[T]:
        """Return one page of the collection ordered by ``request.sort``."""

    @abstractmethod
    def delete_by_id(self, entity_id: ID) -> None:
        """Remove the entity with this key. Absent keys are ignored."""

    @abstractmethod
    def exists_by_id(self, entity_id: ID) -> bool:
        """Return True if an entity with this key is stored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored entities."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every stored entity."""

    # --- Derived operations ---------------------------------------------------

    def delete(self, entity: T) -> None:
        self.delete_by_id(self.id_of(entity))

    def save_all(self, entities: Iterable[T]) -> list[T]:
        return [self.save(entity) for entity in entities]

    def find_all_by_id(self, ids: Iterable[ID]) -> list[T]:
        """Return the stored entities among ``ids``, skipping absent ones."""
        found = []
        for entity_id in ids:
            entity = self.find_by_id(entity_id)
            if entity is not None:
                found.append(entity)
        return found
