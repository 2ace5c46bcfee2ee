"""
Data models for entities and their preferences.

These dataclasses represent who is rating (Entity / EntityId), what they
rated (Preference), and the nested-mapping form of the same data used by
the similarity functions (PreferenceTable).
"""

import uuid
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

# entity key -> (item key -> score)
PreferenceTable: TypeAlias = Mapping[Hashable, Mapping[Hashable, float]]


class DuplicatePolicy(str, Enum):
    """How a PreferenceStore treats repeated (entity, item) preferences."""

    FIRST = "first"  # Allowed; the first one in sequence order wins
    FORBID = "forbid"  # Rejected when the store is built


@dataclass(frozen=True, order=True)
class EntityId:
    """Opaque, process-unique identifier for an entity."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Entity:
    """
    A named participant that owns zero or more preferences.

    Equality and hashing use the identifier only; the name is display metadata.
    """

    name: str | None = field(default=None, compare=False)
    id: EntityId = field(default_factory=EntityId)


@dataclass(frozen=True)
class Preference:
    """A single rating: ``entity`` scored ``item`` with ``score``."""

    entity: Entity
    item: Hashable
    score: float

    @property
    def entity_id(self) -> EntityId:
        return self.entity.id
