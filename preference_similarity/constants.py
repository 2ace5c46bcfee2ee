"""
Shared constants for preference_similarity.

Centralizes the sentinel score and metric ranges used across the similarity
engines, so callers and validators agree on them.
"""

# Score returned when two entities have no basis for comparison
# (no shared items, or an entity missing from the preference table)
NO_SIMILARITY = 0.0

# Valid output ranges per metric (inclusive)
EUCLIDEAN_RANGE = (0.0, 1.0)
PEARSON_RANGE = (-1.0, 1.0)

# Configuration defaults
DEFAULT_LOG_LEVEL = "WARNING"
ENV_PREFIX = "PREFERENCE_SIMILARITY_"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
