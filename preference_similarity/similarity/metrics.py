"""
Metric selection and result validation.

Lets callers pick a metric by name and sanity-check inputs and outputs
before handing them to downstream code.
"""

import logging
import math
from collections.abc import Callable, Hashable, Mapping
from enum import Enum
from numbers import Real

import numpy as np

from preference_similarity.constants import EUCLIDEAN_RANGE, PEARSON_RANGE
from preference_similarity.domain.models import PreferenceTable
from preference_similarity.similarity.table import euclidean_similarity, pearson_correlation

logger = logging.getLogger(__name__)


class SimilarityMetric(str, Enum):
    """Available similarity metrics."""

    EUCLIDEAN = "euclidean"
    PEARSON = "pearson"


_METRIC_FUNCTIONS: dict[SimilarityMetric, Callable[[PreferenceTable, Hashable, Hashable], float]] = {
    SimilarityMetric.EUCLIDEAN: euclidean_similarity,
    SimilarityMetric.PEARSON: pearson_correlation,
}

_METRIC_RANGES = {
    SimilarityMetric.EUCLIDEAN: EUCLIDEAN_RANGE,
    SimilarityMetric.PEARSON: PEARSON_RANGE,
}


def compute_similarity(
    table: PreferenceTable,
    entity_a: Hashable,
    entity_b: Hashable,
    metric: SimilarityMetric | str = SimilarityMetric.EUCLIDEAN,
) -> float:
    """
    Compute similarity between two entities with the chosen metric.

    Args:
        table: Mapping of entity -> {item: score}
        entity_a: First entity key
        entity_b: Second entity key
        metric: SimilarityMetric member or its name ("euclidean", "pearson")

    Returns:
        Similarity score from the selected metric

    Raises:
        ValueError: If metric is unknown, or any required argument is None
    """
    try:
        metric = SimilarityMetric(metric)
    except ValueError:
        raise ValueError(
            f"Unknown similarity metric: {metric!r}. Allowed: {[m.value for m in SimilarityMetric]}"
        ) from None
    return _METRIC_FUNCTIONS[metric](table, entity_a, entity_b)


def validate_similarity_score(score: float, metric: SimilarityMetric | None = None) -> bool:
    """
    Validate a similarity score is in valid range.

    Args:
        score: Similarity score to validate
        metric: Metric that produced the score (default: accept [-1, 1])

    Returns:
        True if valid, False otherwise
    """
    if score is None:
        return False
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return False
    if not np.isfinite(score):
        return False
    low, high = _METRIC_RANGES.get(metric, PEARSON_RANGE)
    if score < low or score > high:
        logger.warning(f"Similarity score out of range [{low}, {high}]: {score}")
        return False
    return True


def validate_preference_table(table: PreferenceTable) -> bool:
    """
    Validate a preference table's shape and scores.

    Args:
        table: Candidate mapping of entity -> {item: score}

    Returns:
        True if every entry maps to a mapping of finite real scores
    """
    if table is None or not isinstance(table, Mapping):
        return False
    for entity, prefs in table.items():
        if not isinstance(prefs, Mapping):
            logger.warning(f"Preferences for {entity!r} are not a mapping")
            return False
        for item, score in prefs.items():
            if isinstance(score, bool) or not isinstance(score, Real) or not math.isfinite(score):
                logger.warning(f"Invalid score for {entity!r}/{item!r}: {score!r}")
                return False
    return True
