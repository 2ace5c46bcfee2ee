"""
Unit tests for preference_similarity.similarity.metrics module.

Focus areas:
- Metric dispatch by enum member and by name
- Score range validation per metric
- Preference table validation
"""

import logging

import pytest

from preference_similarity.similarity.metrics import (
    SimilarityMetric,
    compute_similarity,
    validate_preference_table,
    validate_similarity_score,
)
from preference_similarity.similarity.table import euclidean_similarity, pearson_correlation


class TestComputeSimilarity:
    """Tests for metric dispatch."""

    def test_default_is_euclidean(self, critics):
        assert compute_similarity(critics, "Lisa Rose", "Toby") == euclidean_similarity(
            critics, "Lisa Rose", "Toby"
        )

    def test_pearson_by_member(self, critics):
        result = compute_similarity(critics, "Lisa Rose", "Toby", SimilarityMetric.PEARSON)
        assert result == pearson_correlation(critics, "Lisa Rose", "Toby")

    def test_metric_by_name(self, critics):
        assert compute_similarity(critics, "Lisa Rose", "Toby", "pearson") == pearson_correlation(
            critics, "Lisa Rose", "Toby"
        )

    def test_unknown_metric_raises(self, critics):
        with pytest.raises(ValueError, match="Unknown similarity metric"):
            compute_similarity(critics, "Lisa Rose", "Toby", "manhattan")

    def test_none_arguments_still_raise(self):
        with pytest.raises(ValueError, match="table"):
            compute_similarity(None, "a", "b", SimilarityMetric.PEARSON)


class TestValidateSimilarityScore:
    """Tests for similarity score validation."""

    def test_boundary_values_valid(self):
        assert validate_similarity_score(-1.0) is True
        assert validate_similarity_score(0.0) is True
        assert validate_similarity_score(1.0) is True

    def test_euclidean_range(self):
        assert validate_similarity_score(0.5, SimilarityMetric.EUCLIDEAN) is True
        assert validate_similarity_score(-0.1, SimilarityMetric.EUCLIDEAN) is False

    def test_pearson_range(self):
        assert validate_similarity_score(-0.5, SimilarityMetric.PEARSON) is True
        assert validate_similarity_score(1.001, SimilarityMetric.PEARSON) is False

    def test_out_of_range_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="preference_similarity.similarity.metrics"):
            assert validate_similarity_score(2.0) is False
        assert "out of range" in caplog.text

    def test_invalid_values(self):
        assert validate_similarity_score(None) is False
        assert validate_similarity_score(float("nan")) is False
        assert validate_similarity_score(float("inf")) is False
        assert validate_similarity_score("0.5") is False
        assert validate_similarity_score(True) is False

    def test_euclidean_results_are_valid(self, critics):
        for a in critics:
            for b in critics:
                score = compute_similarity(critics, a, b, SimilarityMetric.EUCLIDEAN)
                assert validate_similarity_score(score, SimilarityMetric.EUCLIDEAN) is True


class TestValidatePreferenceTable:
    """Tests for preference table validation."""

    def test_valid_table(self, critics):
        assert validate_preference_table(critics) is True

    def test_empty_table_valid(self):
        assert validate_preference_table({}) is True
        assert validate_preference_table({"a": {}}) is True

    def test_not_a_mapping(self):
        assert validate_preference_table(None) is False
        assert validate_preference_table([("a", {"x": 1})]) is False
        assert validate_preference_table({"a": [1, 2]}) is False

    def test_non_finite_or_non_numeric_scores(self):
        assert validate_preference_table({"a": {"x": float("nan")}}) is False
        assert validate_preference_table({"a": {"x": float("-inf")}}) is False
        assert validate_preference_table({"a": {"x": "5"}}) is False
        assert validate_preference_table({"a": {"x": None}}) is False

    def test_negative_and_integer_scores_valid(self):
        assert validate_preference_table({"a": {"x": -3, "y": 0, "z": 2.5}}) is True
