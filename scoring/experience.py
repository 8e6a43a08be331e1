"""
Years-of-experience and seniority analysis.
"""
import logging
import re
from typing import List, NamedTuple, Optional, Tuple

from scoring.models import CategoryScore, ExperienceLevel, ExperienceProfile, ExperienceRequirement

logger = logging.getLogger(__name__)


class LevelBand(NamedTuple):
    level: ExperienceLevel
    min_years: int
    max_years: int
    keywords: Tuple[str, ...]


EXPERIENCE_BANDS: Tuple[LevelBand, ...] = (
    LevelBand(ExperienceLevel.ENTRY, 0, 2,
              ('junior', 'entry', 'associate', 'trainee', 'graduate', 'fresher')),
    LevelBand(ExperienceLevel.MID, 2, 5,
              ('mid', 'senior', 'specialist', 'analyst', 'consultant')),
    LevelBand(ExperienceLevel.SENIOR, 5, 10,
              ('senior', 'lead', 'principal', 'manager', 'supervisor')),
    LevelBand(ExperienceLevel.EXECUTIVE, 8, 50,
              ('director', 'vp', 'ceo', 'cto', 'executive', 'head')),
)

RELEVANT_DOMAINS = ('web development', 'mobile development', 'data science', 'machine learning', 'devops')

# Requirement domain token -> candidate domain phrase it corresponds to
REQUIRED_DOMAINS = (
    ('web', 'web development'),
    ('mobile', 'mobile development'),
    ('data', 'data science'),
    ('ml', 'machine learning'),
    ('devops', 'devops'),
    ('security', 'security'),
)

CANDIDATE_YEARS_PATTERN = re.compile(
    r'(\d+)\s*\+?\s*(?:years?|yrs?)\s+(?:of\s+)?(?:experience|exp)\b', re.IGNORECASE
)
REQUIRED_YEARS_PATTERN = re.compile(r'(\d+)\s*\+?\s*(?:years?|yrs?)\b', re.IGNORECASE)


def _contains_word(text_lower: str, word: str) -> bool:
    return re.search(r'\b' + re.escape(word) + r'\b', text_lower) is not None


def _max_years(pattern: re.Pattern, text: str) -> Optional[int]:
    years = [int(match) for match in pattern.findall(text)]
    return max(years) if years else None


class ExperienceAnalyzer:
    """Compares candidate experience against the requirement's level and years."""

    def extract_profile(self, text: str) -> ExperienceProfile:
        """
        Candidate years, seniority level and relevant domains.

        Keywords can only raise the numeric band: a "Senior Engineer" with
        three self-reported years is senior, a "junior" with seven years
        stays senior.
        """
        text = text or ''
        text_lower = text.lower()
        years = _max_years(CANDIDATE_YEARS_PATTERN, text) or 0

        numeric_level = None
        keyword_level = None
        for band in EXPERIENCE_BANDS:
            if numeric_level is None and band.min_years <= years <= band.max_years:
                numeric_level = band.level
            if any(_contains_word(text_lower, kw) for kw in band.keywords):
                keyword_level = band.level

        level = numeric_level or ExperienceLevel.ENTRY
        if keyword_level is not None and keyword_level.rank > level.rank:
            level = keyword_level
        domains = frozenset(d for d in RELEVANT_DOMAINS if d in text_lower)
        return ExperienceProfile(years=years, level=level, relevant_domains=domains)

    def extract_requirement(self, text: str) -> ExperienceRequirement:
        """Required years, level (keywords only, first band wins) and domain."""
        text = text or ''
        text_lower = text.lower()

        level = None
        for band in EXPERIENCE_BANDS:
            if any(_contains_word(text_lower, kw) for kw in band.keywords):
                level = band.level
                break

        domain = None
        for token, canonical in REQUIRED_DOMAINS:
            if _contains_word(text_lower, token):
                domain = canonical
                break

        return ExperienceRequirement(
            years=_max_years(REQUIRED_YEARS_PATTERN, text),
            level=level,
            domain=domain,
        )

    @staticmethod
    def compare_levels(candidate: ExperienceLevel, required: ExperienceLevel) -> int:
        if candidate.rank == required.rank:
            return 20
        if candidate.rank > required.rank:
            return 10
        if candidate.rank == required.rank - 1:
            return 5
        return -10

    def score(self, candidate_text: str, requirement: ExperienceRequirement) -> CategoryScore:
        """Score the candidate's experience against a requirement."""
        if not requirement.years and requirement.level is None:
            return CategoryScore(score=50, details='No specific experience requirements')

        candidate = self.extract_profile(candidate_text)
        score = 50
        factors: List[str] = []

        if requirement.years:
            if candidate.years >= requirement.years:
                bonus = min(20, (candidate.years - requirement.years) * 2)
                score += bonus
                factors.append(
                    f"+{bonus} points for {candidate.years} years experience "
                    f"(required: {requirement.years})"
                )
            else:
                penalty = min(30, (requirement.years - candidate.years) * 5)
                score -= penalty
                factors.append(
                    f"-{penalty} points for insufficient experience "
                    f"({candidate.years} vs {requirement.years} required)"
                )

        if requirement.level is not None:
            level_score = self.compare_levels(candidate.level, requirement.level)
            score += level_score
            factors.append(f"{level_score:+d} points for experience level match")

        if requirement.domain and requirement.domain in candidate.relevant_domains:
            score += 20
            factors.append(f"+20 points for {requirement.domain} experience")

        has_evidence = bool(
            candidate.years
            or candidate.relevant_domains
            or self._has_level_keywords(candidate_text)
        )
        return CategoryScore(
            score=max(0, min(100, score)),
            details=', '.join(factors),
            data_available=has_evidence,
            facts={
                'candidate_years': candidate.years,
                'required_years': requirement.years,
                'candidate_level': candidate.level,
                'required_level': requirement.level,
                'relevant_domains': candidate.relevant_domains,
            },
        )

    @staticmethod
    def _has_level_keywords(text: str) -> bool:
        text_lower = (text or '').lower()
        return any(
            _contains_word(text_lower, kw) for band in EXPERIENCE_BANDS for kw in band.keywords
        )
