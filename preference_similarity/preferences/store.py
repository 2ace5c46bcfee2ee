"""
Entity-oriented preference store.

Holds a flat, ordered list of Preference triples and answers
"all ratings by this entity" queries. The list is held by reference, so the
store is a view over the caller's data rather than a snapshot.
"""

import logging
from collections.abc import Hashable, Iterator

from preference_similarity.config import get_duplicate_policy
from preference_similarity.domain.models import (
    DuplicatePolicy,
    EntityId,
    Preference,
)

logger = logging.getLogger(__name__)


class PreferenceStore:
    """
    Ordered collection of (entity, item, score) preferences.

    Example:
        store = PreferenceStore([Preference(alice, "dune", 4.5)])
        for pref in store.get_preferences_by_entity_id(alice.id):
            ...
    """

    def __init__(
        self,
        preferences: list[Preference],
        duplicate_policy: DuplicatePolicy | None = None,
    ):
        """
        Initialize the store.

        Args:
            preferences: Backing list of preferences (not copied)
            duplicate_policy: How to treat repeated (entity, item) pairs
                (default: configured policy, see Settings.duplicate_policy).
                Omitting it loads Settings, so any invalid
                PREFERENCE_SIMILARITY_* variable (e.g. LOG_LEVEL) fails here;
                pass a policy explicitly to skip settings entirely.

        Raises:
            ValueError: If preferences is None, or if duplicate_policy is
                FORBID and a (entity, item) pair occurs more than once
            pydantic.ValidationError: If duplicate_policy is omitted and the
                environment holds an invalid setting
        """
        if preferences is None:
            raise ValueError("preferences must not be None")

        self._preferences = preferences
        self._duplicate_policy = (
            duplicate_policy if duplicate_policy is not None else get_duplicate_policy()
        )

        if self._duplicate_policy is DuplicatePolicy.FORBID:
            self._check_no_duplicates()

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        return self._duplicate_policy

    def _check_no_duplicates(self) -> None:
        seen: set[tuple[EntityId, Hashable]] = set()
        for pref in self._preferences:
            key = (pref.entity_id, pref.item)
            if key in seen:
                raise ValueError(
                    f"Duplicate preference for entity {pref.entity_id} and item {pref.item!r}"
                )
            seen.add(key)

    def get_preferences_by_entity_id(self, entity_id: EntityId) -> Iterator[Preference]:
        """
        Get all preferences recorded for an entity.

        The check on entity_id happens immediately; the returned iterator is
        lazy and walks the backing list in insertion order.

        Args:
            entity_id: Identifier of the entity

        Returns:
            Iterator over matching preferences (empty if none match)

        Raises:
            ValueError: If entity_id is None
        """
        if entity_id is None:
            raise ValueError("entity_id must not be None")
        return (pref for pref in self._preferences if pref.entity_id == entity_id)

    def scores_for(self, entity_id: EntityId) -> dict[Hashable, float]:
        """
        Get an item -> score mapping for one entity.

        If the same item was rated more than once, the first preference wins.
        """
        scores: dict[Hashable, float] = {}
        for pref in self.get_preferences_by_entity_id(entity_id):
            scores.setdefault(pref.item, pref.score)
        return scores

    def to_table(self) -> dict[EntityId, dict[Hashable, float]]:
        """
        Convert the whole store to the nested-mapping form.

        Returns:
            Dictionary mapping entity_id -> {item: score}, first preference wins
        """
        table: dict[EntityId, dict[Hashable, float]] = {}
        for pref in self._preferences:
            table.setdefault(pref.entity_id, {}).setdefault(pref.item, pref.score)
        logger.debug(f"Built preference table for {len(table)} entities")
        return table

    def __iter__(self) -> Iterator[Preference]:
        return iter(self._preferences)

    def __len__(self) -> int:
        return len(self._preferences)

    def __repr__(self) -> str:
        return f"PreferenceStore({len(self._preferences)} preferences, policy={self._duplicate_policy.value})"
