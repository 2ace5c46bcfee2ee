"""
Pytest configuration and shared fixtures for preference_similarity tests.
"""

import os

import pytest

from preference_similarity.config import get_settings
from preference_similarity.domain.models import Entity, Preference

# Set test environment variables if not already set
if not os.getenv("PREFERENCE_SIMILARITY_DUPLICATE_POLICY"):
    os.environ["PREFERENCE_SIMILARITY_DUPLICATE_POLICY"] = "first"
if not os.getenv("PREFERENCE_SIMILARITY_LOG_LEVEL"):
    os.environ["PREFERENCE_SIMILARITY_LOG_LEVEL"] = "WARNING"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def critics():
    """Movie critics table (entity -> {movie: rating}) with well-known reference scores."""
    return {
        "Lisa Rose": {
            "Lady in the Water": 2.5,
            "Snakes on a Plane": 3.5,
            "Just My Luck": 3.0,
            "Superman Returns": 3.5,
            "You, Me and Dupree": 2.5,
            "The Night Listener": 3.0,
        },
        "Gene Seymour": {
            "Lady in the Water": 3.0,
            "Snakes on a Plane": 3.5,
            "Just My Luck": 1.5,
            "Superman Returns": 5.0,
            "The Night Listener": 3.0,
            "You, Me and Dupree": 3.5,
        },
        "Michael Phillips": {
            "Lady in the Water": 2.5,
            "Snakes on a Plane": 3.0,
            "Superman Returns": 3.5,
            "The Night Listener": 4.0,
        },
        "Toby": {
            "Snakes on a Plane": 4.5,
            "You, Me and Dupree": 1.0,
            "Superman Returns": 4.0,
        },
        "Newcomer": {
            "Primer": 5.0,
        },
    }


@pytest.fixture
def alice():
    return Entity("Alice")


@pytest.fixture
def bob():
    return Entity("Bob")


@pytest.fixture
def carol():
    return Entity("Carol")


@pytest.fixture
def preference_list(alice, bob, carol):
    """Flat preference list: Alice and Bob share two items, Carol shares none."""
    return [
        Preference(alice, "x", 1.0),
        Preference(alice, "y", 2.0),
        Preference(bob, "x", 2.0),
        Preference(bob, "y", 4.0),
        Preference(bob, "w", 3.0),
        Preference(carol, "z", 5.0),
    ]
