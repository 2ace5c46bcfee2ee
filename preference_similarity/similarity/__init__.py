"""
Similarity metrics over preference data.
"""

from preference_similarity.similarity.metrics import (
    SimilarityMetric,
    compute_similarity,
    validate_preference_table,
    validate_similarity_score,
)
from preference_similarity.similarity.store import store_euclidean_similarity
from preference_similarity.similarity.table import (
    euclidean_similarity,
    pearson_correlation,
    shared_items,
)

__all__ = [
    "SimilarityMetric",
    "compute_similarity",
    "euclidean_similarity",
    "pearson_correlation",
    "shared_items",
    "store_euclidean_similarity",
    "validate_preference_table",
    "validate_similarity_score",
]
