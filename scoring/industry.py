"""
Industry tagging and scoring.
"""
import re
from typing import Dict, Optional, Sequence, Tuple

from scoring.models import CategoryScore

INDUSTRY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'technology': ('software', 'tech', 'technology', 'technologies', 'computer', 'digital'),
    'finance': ('bank', 'banking', 'financial', 'investment', 'trading'),
    'healthcare': ('healthcare', 'medical', 'pharmaceutical', 'hospital'),
    'education': ('education', 'teaching', 'academic', 'university'),
    'retail': ('retail', 'ecommerce', 'shopping', 'consumer'),
}

# Matched case-sensitively; lower-case "it" is a pronoun
INDUSTRY_ACRONYMS: Dict[str, Tuple[str, ...]] = {
    'technology': ('IT',),
}

# Keyed by the required industry; not symmetric
RELATED_INDUSTRIES: Dict[str, Tuple[str, ...]] = {
    'technology': ('finance', 'healthcare', 'education'),
    'finance': ('technology', 'insurance', 'real estate'),
    'healthcare': ('technology', 'pharmaceuticals', 'biotechnology'),
}

# Keywords also match their plural ("banks", "hospitals")
_INDUSTRY_PATTERNS = tuple(
    (industry, re.compile(r'\b(?:' + '|'.join(re.escape(kw) for kw in keywords) + r')s?\b'))
    for industry, keywords in INDUSTRY_KEYWORDS.items()
)
_ACRONYM_PATTERNS = {
    industry: re.compile(r'\b(?:' + '|'.join(re.escape(a) for a in acronyms) + r')\b')
    for industry, acronyms in INDUSTRY_ACRONYMS.items()
}


def extract_industries(text: str) -> Tuple[str, ...]:
    text = text or ''
    text_lower = text.lower()
    industries = []
    for industry, pattern in _INDUSTRY_PATTERNS:
        acronyms = _ACRONYM_PATTERNS.get(industry)
        if pattern.search(text_lower) or (acronyms is not None and acronyms.search(text)):
            industries.append(industry)
    return tuple(industries)


class IndustryScorer:
    """Scores industry overlap against the required industry."""

    def score(self, candidate_text: str, required_industry: Optional[str]) -> CategoryScore:
        if not required_industry:
            return CategoryScore(score=50, details='No specific industry requirement')

        candidate_industries = extract_industries(candidate_text)
        facts = {
            'candidate_industries': candidate_industries,
            'required_industry': required_industry,
        }

        match = next(
            (ind for ind in candidate_industries if ind.lower() == required_industry.lower()),
            None,
        )
        if match:
            return CategoryScore(
                score=100,
                details=f"Experience in {match} industry",
                facts=facts,
            )

        score = self.related_score(candidate_industries, required_industry)
        return CategoryScore(
            score=score,
            details=(
                'Some related industry experience' if score > 30
                else 'No relevant industry experience'
            ),
            data_available=bool(candidate_industries),
            facts=facts,
        )

    @staticmethod
    def related_score(candidate_industries: Sequence[str], required_industry: str) -> int:
        related = RELATED_INDUSTRIES.get(required_industry.lower(), ())
        return 40 if any(ind in related for ind in candidate_industries) else 20
