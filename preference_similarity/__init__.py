"""
Preference Similarity - pairwise similarity scores from sparse rating data.

This package provides:
- Entity, EntityId and Preference models
- A PreferenceStore for flat (entity, item, score) collections
- Euclidean-distance similarity and Pearson correlation over
  entity -> {item: score} tables
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from preference_similarity.constants import NO_SIMILARITY
from preference_similarity.domain.models import (
    DuplicatePolicy,
    Entity,
    EntityId,
    Preference,
    PreferenceTable,
)
from preference_similarity.preferences.store import PreferenceStore
from preference_similarity.similarity import (
    SimilarityMetric,
    compute_similarity,
    euclidean_similarity,
    pearson_correlation,
    shared_items,
    store_euclidean_similarity,
)

__all__ = [
    "__version__",
    "NO_SIMILARITY",
    # Models
    "DuplicatePolicy",
    "Entity",
    "EntityId",
    "Preference",
    "PreferenceTable",
    "PreferenceStore",
    # Similarity
    "SimilarityMetric",
    "compute_similarity",
    "euclidean_similarity",
    "pearson_correlation",
    "shared_items",
    "store_euclidean_similarity",
]
