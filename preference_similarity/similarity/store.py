"""
Euclidean similarity for entities held in a PreferenceStore.

Thin adapter: each entity's preferences are folded into an item -> score
mapping (first preference wins for repeated items) and the computation is
delegated to the table-based metric.
"""

import logging

from preference_similarity.domain.models import Entity, EntityId
from preference_similarity.preferences.store import PreferenceStore
from preference_similarity.similarity.table import euclidean_similarity

logger = logging.getLogger(__name__)


def _as_entity_id(entity: Entity | EntityId | None) -> EntityId | None:
    if isinstance(entity, Entity):
        return entity.id
    return entity


def store_euclidean_similarity(
    store: PreferenceStore,
    entity_a: Entity | EntityId,
    entity_b: Entity | EntityId,
) -> float:
    """
    Compute Euclidean-distance similarity between two entities in a store.

    Args:
        store: Preference store to read from
        entity_a: First entity (or its id)
        entity_b: Second entity (or its id)

    Returns:
        Similarity in (0, 1], or 0.0 if the entities share no rated items

    Raises:
        ValueError: If store or either entity is None
    """
    if store is None:
        raise ValueError("store must not be None")

    id_a = _as_entity_id(entity_a)
    id_b = _as_entity_id(entity_b)

    table = {
        id_a: store.scores_for(id_a),
        id_b: store.scores_for(id_b),
    }
    logger.debug(f"Comparing {len(table[id_a])} and {len(table[id_b])} rated items for {id_a} ~ {id_b}")
    return euclidean_similarity(table, id_a, id_b)
