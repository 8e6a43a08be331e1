"""
Weighted aggregation of the six category scores.
"""
from dataclasses import dataclass, fields

from scoring.models import CategoryScores, MatchLevel


@dataclass(frozen=True)
class CategoryWeights:
    """Aggregation weights in whole percent, one field per category."""

    skills: int = 30
    experience: int = 25
    education: int = 15
    keywords: int = 20
    location: int = 5
    industry: int = 5

    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def weight(self, category: str) -> float:
        return getattr(self, category) / 100


WEIGHTS = CategoryWeights()

if WEIGHTS.total() != 100:
    raise ValueError(f"Category weights must sum to 100%, got {WEIGHTS.total()}%")

if [f.name for f in fields(CategoryWeights)] != [f.name for f in fields(CategoryScores)]:
    raise ValueError("Category weights and category scores must name the same categories")

# (minimum overall score, level), highest first
MATCH_LEVEL_THRESHOLDS = (
    (85, MatchLevel.EXCELLENT),
    (70, MatchLevel.GOOD),
    (55, MatchLevel.FAIR),
    (40, MatchLevel.POOR),
)


def calculate_overall_score(scores: CategoryScores, weights: CategoryWeights = WEIGHTS) -> int:
    """Weighted sum of the category scores, rounded half up."""
    weighted = sum(getattr(weights, name) * category.score for name, category in scores.items())
    # weighted is in hundredths of a point
    return (weighted + 50) // 100


def get_match_level(score: int) -> MatchLevel:
    for threshold, level in MATCH_LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return MatchLevel.VERY_POOR
