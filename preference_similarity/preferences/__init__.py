"""
Entity-oriented preference storage.
"""

from preference_similarity.preferences.store import PreferenceStore

__all__ = ["PreferenceStore"]
