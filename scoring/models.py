"""
Scoring domain model.

Every value here is a frozen dataclass created fresh for a single scoring
call, so results can be handed across threads without copying.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple


class ExperienceLevel(Enum):
    ENTRY = 'entry'
    MID = 'mid'
    SENIOR = 'senior'
    EXECUTIVE = 'executive'

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)


_LEVEL_ORDER = list(ExperienceLevel)


class Degree(Enum):
    DIPLOMA = 'diploma'
    ASSOCIATES = 'associates'
    BACHELORS = 'bachelors'
    MASTERS = 'masters'
    PHD = 'phd'

    @property
    def rank(self) -> int:
        return _DEGREE_ORDER.index(self)


_DEGREE_ORDER = list(Degree)


class MatchLevel(Enum):
    EXCELLENT = 'Excellent'
    GOOD = 'Good'
    FAIR = 'Fair'
    POOR = 'Poor'
    VERY_POOR = 'Very Poor'


class Priority(Enum):
    HIGH = 'High'
    MEDIUM = 'Medium'
    LOW = 'Low'


@dataclass(frozen=True)
class MatchPair:
    required: str
    found: str
    partial: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {'required': self.required, 'found': self.found, 'partial': self.partial}


@dataclass(frozen=True)
class CategoryScore:
    """
    Score for one matching category.

    ``data_available`` is False when the category was scored without any
    candidate-side evidence; the confidence estimate counts these.
    ``facts`` holds extra read-only values (years, degrees, distance) for
    callers that persist a detailed match record.
    """

    score: int
    details: str
    matched: Tuple[MatchPair, ...] = ()
    missing: Tuple[str, ...] = ()
    data_available: bool = True
    facts: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be 0-100, got {self.score}")
        object.__setattr__(self, 'matched', tuple(self.matched))
        object.__setattr__(self, 'missing', tuple(self.missing))
        object.__setattr__(self, 'facts', MappingProxyType(dict(self.facts)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'details': self.details,
            'matched': [pair.to_dict() for pair in self.matched],
            'missing': list(self.missing),
            'data_available': self.data_available,
            'facts': {key: _jsonable(value) for key, value in self.facts.items()},
        }


@dataclass(frozen=True)
class CategoryScores:
    """The six category scores, always in aggregation order."""

    skills: CategoryScore
    experience: CategoryScore
    education: CategoryScore
    keywords: CategoryScore
    location: CategoryScore
    industry: CategoryScore

    def items(self) -> Iterator[Tuple[str, CategoryScore]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: score.to_dict() for name, score in self.items()}


@dataclass(frozen=True)
class ExperienceProfile:
    years: int = 0
    level: ExperienceLevel = ExperienceLevel.ENTRY
    relevant_domains: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class ExperienceRequirement:
    years: Optional[int] = None
    level: Optional[ExperienceLevel] = None
    domain: Optional[str] = None


@dataclass(frozen=True)
class EducationProfile:
    degree: Optional[Degree] = None
    field: Optional[str] = None
    certifications: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Recommendation:
    category: str
    priority: Priority
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'category': self.category,
            'priority': self.priority.value,
            'suggestion': self.suggestion,
        }


@dataclass(frozen=True)
class RequirementProfile:
    """Requirement-side extraction, computed once and reused per candidate."""

    text: str
    skills: Tuple[str, ...]
    experience: ExperienceRequirement
    education: EducationProfile
    salient_terms: Tuple[str, ...]
    location: Optional[str]
    remote: bool
    industry: Optional[str]


@dataclass(frozen=True)
class ScoringResult:
    overall_score: int
    category_scores: CategoryScores
    match_level: MatchLevel
    reasoning: str
    recommendations: Tuple[Recommendation, ...]
    confidence: int
    timestamp: datetime

    def __post_init__(self):
        if not (0 <= self.overall_score <= 100):
            raise ValueError(f"overall_score must be 0-100, got {self.overall_score}")
        if not (0 <= self.confidence <= 100):
            raise ValueError(f"confidence must be 0-100, got {self.confidence}")
        object.__setattr__(self, 'recommendations', tuple(self.recommendations))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to JSON-serializable dict.

        Returns:
            Dict with all result fields
        """
        return {
            'overall_score': self.overall_score,
            'match_level': self.match_level.value,
            'category_scores': self.category_scores.to_dict(),
            'reasoning': self.reasoning,
            'recommendations': [rec.to_dict() for rec in self.recommendations],
            'confidence': self.confidence,
            'timestamp': self.timestamp.isoformat(),
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, tuple):
        return list(value)
    return value
