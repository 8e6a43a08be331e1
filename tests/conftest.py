"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, Optional

from extractors.term_tagger import TermTagger
from scoring.engine import CandidateScorer
from scoring.models import CategoryScore, CategoryScores
from utils.config import Config


class FakeDistanceProvider:
    """Deterministic distances keyed by (origin, destination)."""

    def __init__(self, distances: Optional[Dict[tuple, float]] = None, default=None):
        self.distances = distances or {}
        self.default = default
        self.calls = []

    def distance_km(self, origin: str, destination: str) -> Optional[float]:
        self.calls.append((origin, destination))
        return self.distances.get((origin, destination), self.default)


@pytest.fixture(scope="session")
def tagger() -> TermTagger:
    """One spaCy pipeline for the whole run; loading it is slow."""
    return TermTagger()


@pytest.fixture
def config(monkeypatch) -> Config:
    """Default configuration, isolated from the environment."""
    for var in ("SCORING_NLP_MODEL", "SCORING_MAX_SALIENT_TERMS",
                "SCORING_BATCH_MAX_CANDIDATES", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return Config(config_path=None)


@pytest.fixture
def distance_provider() -> FakeDistanceProvider:
    return FakeDistanceProvider(default=80.0)


@pytest.fixture
def scorer(config, tagger, distance_provider) -> CandidateScorer:
    return CandidateScorer(config=config, distance_provider=distance_provider, tagger=tagger)


@pytest.fixture
def strong_candidate() -> Dict[str, str]:
    return {
        "text": (
            "Senior software engineer with 7 years of experience in Python, Django, "
            "PostgreSQL, Docker and AWS. Master of Science in Computer Science. "
            "AWS Certified. Web development for financial services."
        ),
        "location": "Austin, TX",
    }


@pytest.fixture
def weak_candidate() -> Dict[str, str]:
    return {
        "text": "Junior graphic designer, 1 year experience with Figma.",
        "location": "Lisbon",
    }


@pytest.fixture
def backend_requirement() -> Dict[str, str]:
    return {
        "title": "Senior Backend Engineer",
        "description": (
            "We need a senior engineer with 5+ years building Python and Django "
            "services on AWS with Docker and PostgreSQL. Bachelor's degree in "
            "Computer Science required. Software company in the finance space."
        ),
        "location": "Austin",
    }


def make_scores(skills=60, experience=60, education=60, keywords=60, location=60,
                industry=60, missing=(), available=True) -> CategoryScores:
    """CategoryScores with plain scores, for reasoning and aggregation tests."""
    def category(score, **kwargs):
        return CategoryScore(score=score, details="test", data_available=available, **kwargs)

    return CategoryScores(
        skills=category(skills, missing=missing),
        experience=category(experience),
        education=category(education),
        keywords=category(keywords),
        location=category(location),
        industry=category(industry),
    )
