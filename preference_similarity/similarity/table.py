"""
Similarity metrics over a nested preference table.

Provides Euclidean-distance similarity and Pearson correlation using NumPy,
operating on a mapping of entity -> {item: score}. Only the items rated by
both entities (the shared items) take part in a computation.
"""

import logging
import math
from collections.abc import Hashable

import numpy as np
from numpy.typing import NDArray

from preference_similarity.constants import NO_SIMILARITY
from preference_similarity.domain.models import PreferenceTable

logger = logging.getLogger(__name__)


def _require(value, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def _check_arguments(table: PreferenceTable, entity_a: Hashable, entity_b: Hashable) -> None:
    _require(table, "table")
    _require(entity_a, "entity_a")
    _require(entity_b, "entity_b")


def _shared_items(table: PreferenceTable, entity_a: Hashable, entity_b: Hashable) -> list[Hashable]:
    if entity_a not in table or entity_b not in table:
        logger.debug(f"Entity missing from table: {entity_a!r} or {entity_b!r}")
        return []
    prefs_b = table[entity_b]
    return [item for item in table[entity_a] if item in prefs_b]


def _aligned_scores(
    table: PreferenceTable,
    entity_a: Hashable,
    entity_b: Hashable,
    items: list[Hashable],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    scores_a = np.array([table[entity_a][item] for item in items], dtype=np.float64)
    scores_b = np.array([table[entity_b][item] for item in items], dtype=np.float64)
    return scores_a, scores_b


def shared_items(table: PreferenceTable, entity_a: Hashable, entity_b: Hashable) -> list[Hashable]:
    """
    Find the items rated by both entities.

    Args:
        table: Mapping of entity -> {item: score}
        entity_a: First entity key
        entity_b: Second entity key

    Returns:
        Shared items in entity_a's iteration order; empty if either entity
        is absent from the table

    Raises:
        ValueError: If table, entity_a or entity_b is None
    """
    _check_arguments(table, entity_a, entity_b)
    return _shared_items(table, entity_a, entity_b)


def euclidean_similarity(table: PreferenceTable, entity_a: Hashable, entity_b: Hashable) -> float:
    """
    Compute Euclidean-distance similarity between two entities.

    The distance d over shared items is mapped to 1 / (1 + d), so identical
    ratings give 1.0 and the score tends to 0 as the ratings diverge.

    Args:
        table: Mapping of entity -> {item: score}
        entity_a: First entity key
        entity_b: Second entity key

    Returns:
        Similarity in (0, 1], or 0.0 when the entities share no items or
        either entity is absent from the table

    Raises:
        ValueError: If table, entity_a or entity_b is None
    """
    _check_arguments(table, entity_a, entity_b)

    items = _shared_items(table, entity_a, entity_b)
    if not items:
        logger.debug(f"No shared items between {entity_a!r} and {entity_b!r}")
        return NO_SIMILARITY

    scores_a, scores_b = _aligned_scores(table, entity_a, entity_b, items)
    # hypot scales internally, so large scores don't overflow to inf
    distance = math.hypot(*(scores_a - scores_b).tolist())

    score = 1 / (1 + distance)
    logger.debug(f"Euclidean similarity {entity_a!r} ~ {entity_b!r} over {len(items)} items: {score:.4f}")
    return score


def pearson_correlation(table: PreferenceTable, entity_a: Hashable, entity_b: Hashable) -> float:
    """
    Compute the Pearson correlation coefficient between two entities.

    Unlike Euclidean similarity this corrects for entities rating on
    different absolute scales (a generous vs. a harsh rater).

    Args:
        table: Mapping of entity -> {item: score}
        entity_a: First entity key
        entity_b: Second entity key

    Returns:
        Correlation in [-1, 1]; 0.0 when the entities share no items, either
        entity is absent, or either entity's shared scores have zero variance

    Raises:
        ValueError: If table, entity_a or entity_b is None
    """
    _check_arguments(table, entity_a, entity_b)

    items = _shared_items(table, entity_a, entity_b)
    if not items:
        logger.debug(f"No shared items between {entity_a!r} and {entity_b!r}")
        return NO_SIMILARITY

    n = len(items)
    scores_a, scores_b = _aligned_scores(table, entity_a, entity_b, items)

    # Constant scores have zero variance; the sums below only approximate it
    if np.ptp(scores_a) == 0 or np.ptp(scores_b) == 0:
        logger.debug(f"Zero variance for {entity_a!r} or {entity_b!r}, correlation undefined")
        return NO_SIMILARITY

    sum1 = float(np.sum(scores_a))
    sum2 = float(np.sum(scores_b))
    sum_sq1 = float(np.sum(scores_a**2))
    sum_sq2 = float(np.sum(scores_b**2))
    sum_products = float(np.sum(scores_a * scores_b))

    numerator = sum_products - (sum1 * sum2) / n
    variance1 = sum_sq1 - sum1**2 / n
    variance2 = sum_sq2 - sum2**2 / n

    # Rounding can push a near-zero variance to or below zero
    if variance1 <= 0 or variance2 <= 0:
        logger.debug(f"Zero variance for {entity_a!r} or {entity_b!r}, correlation undefined")
        return NO_SIMILARITY

    denominator = math.sqrt(variance1 * variance2)
    score = float(np.clip(numerator / denominator, -1.0, 1.0))
    logger.debug(f"Pearson correlation {entity_a!r} ~ {entity_b!r} over {n} items: {score:.4f}")
    return score
