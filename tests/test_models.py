"""
Tests for the scoring domain model.
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from conftest import make_scores
from scoring.models import (
    CategoryScore,
    Degree,
    ExperienceLevel,
    MatchLevel,
    MatchPair,
    ScoringResult,
)


class TestCategoryScore:

    @pytest.mark.parametrize("score", [-1, 101])
    def test_range_checked(self, score):
        with pytest.raises(ValueError):
            CategoryScore(score=score, details="out of range")

    def test_immutable(self):
        category = CategoryScore(score=50, details="ok", facts={"years": 3})
        with pytest.raises(FrozenInstanceError):
            category.score = 60
        with pytest.raises(TypeError):
            category.facts["years"] = 4

    def test_sequences_become_tuples(self):
        category = CategoryScore(score=50, details="ok", missing=["go"])
        assert category.missing == ("go",)

    def test_to_dict(self):
        category = CategoryScore(
            score=80,
            details="ok",
            matched=(MatchPair("react", "react native"),),
            facts={"level": ExperienceLevel.SENIOR, "domains": frozenset({"web", "data"})},
        )
        assert category.to_dict() == {
            "score": 80,
            "details": "ok",
            "matched": [{"required": "react", "found": "react native", "partial": False}],
            "missing": [],
            "data_available": True,
            "facts": {"level": "senior", "domains": ["data", "web"]},
        }


class TestOrdering:

    def test_degree_rank(self):
        assert Degree.DIPLOMA.rank < Degree.ASSOCIATES.rank < Degree.BACHELORS.rank
        assert Degree.BACHELORS.rank < Degree.MASTERS.rank < Degree.PHD.rank

    def test_level_rank(self):
        assert ExperienceLevel.ENTRY.rank == 0
        assert ExperienceLevel.EXECUTIVE.rank == 3


class TestCategoryScores:

    def test_items_in_aggregation_order(self):
        names = [name for name, _ in make_scores().items()]
        assert names == ["skills", "experience", "education", "keywords", "location", "industry"]


class TestScoringResult:

    def _result(self, **overrides):
        values = dict(
            overall_score=60,
            category_scores=make_scores(),
            match_level=MatchLevel.FAIR,
            reasoning="No standout strengths or concerns identified",
            recommendations=[],
            confidence=100,
            timestamp=datetime(2024, 1, 2, tzinfo=timezone.utc),
        )
        values.update(overrides)
        return ScoringResult(**values)

    def test_range_checked(self):
        with pytest.raises(ValueError):
            self._result(overall_score=120)
        with pytest.raises(ValueError):
            self._result(confidence=-5)

    def test_to_dict(self):
        data = self._result().to_dict()
        assert data["match_level"] == "Fair"
        assert data["timestamp"] == "2024-01-02T00:00:00+00:00"
        assert data["recommendations"] == []
