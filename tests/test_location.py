"""
Tests for location scoring.
"""

import pytest

from conftest import FakeDistanceProvider
from scoring.location import (
    UNKNOWN_SCORE,
    ContainmentDistanceProvider,
    LocationScorer,
    distance_score,
    locations_overlap,
)


class TestDistanceBands:

    @pytest.mark.parametrize("distance,expected", [
        (0, 100), (5, 100), (10, 100), (20, 80), (25, 80), (40, 60), (50, 60), (80, 20),
    ])
    def test_bands(self, distance, expected):
        assert distance_score(distance) == expected


class TestOverlap:

    def test_contained(self):
        assert locations_overlap("Austin, TX", "austin")

    def test_disjoint(self):
        assert not locations_overlap("Lisbon", "Austin")

    def test_blank(self):
        assert not locations_overlap("  ", "Austin")


class TestLocationScorer:
    """Test the location category score."""

    def test_remote(self):
        scorer = LocationScorer(FakeDistanceProvider(default=500.0))
        assert scorer.score("Lisbon", "Austin", remote=True).score == 100

    def test_no_required_location(self):
        assert LocationScorer().score("Lisbon", None).score == 100

    def test_no_candidate_location(self):
        result = LocationScorer().score(None, "Austin")
        assert result.score == UNKNOWN_SCORE
        assert result.data_available is False

    def test_containment_skips_provider(self):
        provider = FakeDistanceProvider(default=500.0)
        result = LocationScorer(provider).score("Austin, TX", "Austin")
        assert result.score == 100
        assert result.facts["estimated_distance_km"] == 0.0
        assert provider.calls == []

    def test_provider_distance(self):
        provider = FakeDistanceProvider({("Round Rock", "Austin"): 20.0})
        result = LocationScorer(provider).score("Round Rock", "Austin")
        assert result.score == 80
        assert provider.calls == [("Round Rock", "Austin")]

    def test_far_away(self):
        result = LocationScorer(FakeDistanceProvider(default=800.0)).score("Lisbon", "Austin")
        assert result.score == 20
        assert result.data_available is True

    def test_unknown_distance(self):
        result = LocationScorer(ContainmentDistanceProvider()).score("Lisbon", "Austin")
        assert result.score == UNKNOWN_SCORE
        assert result.data_available is False
        assert result.facts["estimated_distance_km"] is None
