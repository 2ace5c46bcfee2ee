"""
Utility functions for preference_similarity.
"""

from preference_similarity.utils.logging import setup_logging

__all__ = ["setup_logging"]
