"""
Skill extraction and fuzzy skill matching.
"""
import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from rapidfuzz.distance import JaroWinkler

from extractors.term_tagger import TermTagger
from scoring.models import CategoryScore, MatchPair

logger = logging.getLogger(__name__)

SKILL_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    'programming': (
        'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'golang', 'ruby',
        'php', 'kotlin', 'swift', 'scala', 'rust', 'react', 'node', 'angular', 'vue',
        'django', 'flask', 'spring',
    ),
    'database': (
        'mysql', 'postgresql', 'mongodb', 'redis', 'elasticsearch', 'sql', 'oracle db',
        'dynamodb', 'cassandra',
    ),
    'cloud': ('aws', 'azure', 'gcp', 'docker', 'kubernetes', 'terraform', 'ansible'),
    'tools': ('git', 'jenkins', 'jira', 'confluence', 'slack', 'figma', 'tableau'),
    'methodologies': ('agile', 'scrum', 'kanban', 'devops', 'ci/cd', 'tdd'),
}

ALL_SKILLS: Tuple[str, ...] = tuple(
    skill for skills in SKILL_CATEGORIES.values() for skill in skills
)

# Spellings that run a suffix into the skill name
SKILL_VARIANTS: Dict[str, Tuple[str, ...]] = {
    'react': ('reactjs',),
    'vue': ('vuejs',),
    'angular': ('angularjs',),
    'node': ('nodejs',),
    'postgresql': ('postgres',),
    'kubernetes': ('k8s',),
}

_NON_ALNUM = re.compile(r'[^a-z0-9]')


def _skill_pattern(skill: str) -> re.Pattern:
    # Bounded by non-alphanumerics on both sides so "git" does not fire on "digital"
    spellings = (skill,) + SKILL_VARIANTS.get(skill, ())
    alternatives = '|'.join(re.escape(s) for s in spellings)
    return re.compile(r'(?<![a-z0-9])(?:' + alternatives + r')(?![a-z0-9])')


_SKILL_PATTERNS = tuple((skill, _skill_pattern(skill)) for skill in ALL_SKILLS)


def normalize_skill(skill: str) -> str:
    return _NON_ALNUM.sub('', skill.lower())


class SkillMatcher:
    """Dictionary plus NLP skill extraction with Jaro-Winkler matching."""

    def __init__(self, tagger: TermTagger, exact_threshold: float = 0.85,
                 partial_threshold: float = 0.70, partial_weight: float = 0.7):
        self.tagger = tagger
        self.exact_threshold = exact_threshold
        self.partial_threshold = partial_threshold
        self.partial_weight = partial_weight

    def extract_skills(self, text: str) -> Tuple[str, ...]:
        """Skills named in the text, de-duplicated in discovery order."""
        text_lower = (text or '').lower()
        skills = {}
        for skill, pattern in _SKILL_PATTERNS:
            if pattern.search(text_lower):
                skills.setdefault(skill, None)
        for tech in self.tagger.technologies(text_lower):
            skills.setdefault(tech, None)
        return tuple(skills)

    def is_exact_match(self, candidate_skill: str, required_skill: str) -> bool:
        s1 = normalize_skill(candidate_skill)
        s2 = normalize_skill(required_skill)
        if not s1 or not s2:
            return False
        if s1 == s2:
            return True
        if min(len(s1), len(s2)) >= 2 and (s1 in s2 or s2 in s1):
            return True
        return JaroWinkler.similarity(s1, s2) > self.exact_threshold

    def is_partial_match(self, candidate_skill: str, required_skill: str) -> bool:
        return JaroWinkler.similarity(
            candidate_skill.lower(), required_skill.lower()
        ) > self.partial_threshold

    def _find(self, candidate_skills: Sequence[str], required_skill: str,
              partial: bool) -> Optional[str]:
        check = self.is_partial_match if partial else self.is_exact_match
        for skill in candidate_skills:
            if check(skill, required_skill):
                return skill
        return None

    def score(self, candidate_text: str, required_skills: Sequence[str]) -> CategoryScore:
        """
        Match every required skill against the candidate's skills.

        Returns:
            CategoryScore with matched pairs and missing skills
        """
        if not required_skills:
            return CategoryScore(score=50, details='No specific skills required')

        candidate_skills = self.extract_skills(candidate_text)

        exact = 0
        partial = 0
        matched: List[MatchPair] = []
        missing: List[str] = []

        for required in required_skills:
            found = self._find(candidate_skills, required, partial=False)
            if found is not None:
                exact += 1
                matched.append(MatchPair(required=required, found=found))
                continue

            found = self._find(candidate_skills, required, partial=True)
            if found is not None:
                partial += 1
                matched.append(MatchPair(required=required, found=found, partial=True))
            else:
                missing.append(required)

        raw = (exact + partial * self.partial_weight) / len(required_skills) * 100
        score = min(100, int(raw + 0.5))

        logger.debug(f"Skills: {exact} exact, {partial} partial, missing={missing}")
        return CategoryScore(
            score=score,
            details=(
                f"{exact} exact matches, {partial} partial matches "
                f"out of {len(required_skills)} required skills"
            ),
            matched=tuple(matched),
            missing=tuple(missing),
            data_available=bool(candidate_skills),
            facts={'candidate_skills': candidate_skills},
        )
