"""
Degree, field-of-study and certification analysis.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from scoring.models import CategoryScore, Degree, EducationProfile

logger = logging.getLogger(__name__)

# Highest tier first so a resume listing a bachelor's and a master's is a master's
DEGREE_KEYWORDS: Tuple[Tuple[Degree, Tuple[str, ...]], ...] = (
    (Degree.PHD, ('phd', 'ph.d', 'doctorate', 'doctoral')),
    (Degree.MASTERS, ('masters', 'master', 'msc', 'm.sc', 'mba', 'm.b.a', 'ma', 'm.a', 'm.s')),
    (Degree.BACHELORS, ('bachelors', 'bachelor', 'bsc', 'b.sc', 'ba', 'b.a', 'b.e',
                        'btech', 'b.tech', 'bs')),
    (Degree.ASSOCIATES, ('associates', 'associate degree', 'a.a', 'a.s')),
    (Degree.DIPLOMA, ('diploma', 'certificate')),
)

# A requirement asking for "a degree" means at least a bachelor's
GENERIC_DEGREE_KEYWORDS = ('degree', 'graduate degree', 'university degree')

FIELDS_OF_STUDY = ('computer science', 'engineering', 'business', 'marketing', 'finance', 'design')

RELATED_FIELDS: Dict[str, Tuple[str, ...]] = {
    'computer science': ('engineering', 'mathematics', 'physics'),
    'business': ('marketing', 'finance', 'economics'),
    'design': ('art', 'architecture', 'media'),
}

CERTIFICATION_KEYWORDS = ('certified', 'certification', 'aws', 'azure', 'google', 'microsoft', 'oracle')


def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(r'(?<![a-z0-9])' + re.escape(keyword) + r'(?![a-z0-9])')


_DEGREE_PATTERNS = tuple(
    (degree, tuple(_keyword_pattern(kw) for kw in keywords))
    for degree, keywords in DEGREE_KEYWORDS
)
_GENERIC_DEGREE_PATTERNS = tuple(_keyword_pattern(kw) for kw in GENERIC_DEGREE_KEYWORDS)
_CERTIFICATION_PATTERNS = tuple((kw, _keyword_pattern(kw)) for kw in CERTIFICATION_KEYWORDS)


class EducationAnalyzer:
    """Scores education using the ordinal degree hierarchy and related fields."""

    def extract_profile(self, text: str, requirement: bool = False) -> EducationProfile:
        """
        Extract degree tier, field of study and certifications.

        Args:
            text: Candidate or requirement text
            requirement: Treat a bare "degree" mention as a bachelor's
        """
        text_lower = (text or '').lower()

        degree: Optional[Degree] = None
        for tier, patterns in _DEGREE_PATTERNS:
            if any(p.search(text_lower) for p in patterns):
                degree = tier
                break
        if degree is None and requirement:
            if any(p.search(text_lower) for p in _GENERIC_DEGREE_PATTERNS):
                degree = Degree.BACHELORS

        field_of_study = next((f for f in FIELDS_OF_STUDY if f in text_lower), None)
        certifications = tuple(
            kw for kw, pattern in _CERTIFICATION_PATTERNS if pattern.search(text_lower)
        )
        return EducationProfile(degree=degree, field=field_of_study, certifications=certifications)

    @staticmethod
    def compare_degrees(candidate: Optional[Degree], required: Degree) -> int:
        if candidate is None:
            return 10
        if candidate.rank >= required.rank:
            return 50
        if candidate.rank == required.rank - 1:
            return 30
        return 10

    @staticmethod
    def compare_fields(candidate: str, required: str) -> int:
        if candidate == required:
            return 50
        if candidate in RELATED_FIELDS.get(required, ()):
            return 30
        return 10

    def score(self, candidate_text: str, requirement: EducationProfile) -> CategoryScore:
        """Score the candidate's education against a requirement profile."""
        if requirement.degree is None and requirement.field is None:
            return CategoryScore(score=50, details='No specific education requirements')

        candidate = self.extract_profile(candidate_text)
        score = 0
        factors: List[str] = []

        if requirement.degree is not None:
            degree_score = self.compare_degrees(candidate.degree, requirement.degree)
            score += degree_score
            factors.append(f"{degree_score} points for degree level")

        if requirement.field and candidate.field:
            field_score = self.compare_fields(candidate.field, requirement.field)
            score += field_score
            factors.append(f"{field_score} points for field of study")

        if candidate.certifications:
            cert_score = min(20, len(candidate.certifications) * 5)
            score += cert_score
            factors.append(f"+{cert_score} points for certifications")

        return CategoryScore(
            score=max(0, min(100, score)),
            details=', '.join(factors),
            data_available=bool(
                candidate.degree or candidate.field or candidate.certifications
            ),
            facts={
                'candidate_degree': candidate.degree,
                'required_degree': requirement.degree,
                'candidate_field': candidate.field,
                'required_field': requirement.field,
                'certifications': candidate.certifications,
            },
        )
