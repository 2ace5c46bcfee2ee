"""
Domain models for preference data.
"""

from preference_similarity.domain.models import (
    DuplicatePolicy,
    Entity,
    EntityId,
    Preference,
    PreferenceTable,
)

__all__ = [
    "DuplicatePolicy",
    "Entity",
    "EntityId",
    "Preference",
    "PreferenceTable",
]
