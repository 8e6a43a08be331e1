"""
Reasoning, recommendations and confidence for a set of category scores.
"""
from typing import List, Tuple

from scoring.models import CategoryScores, Priority, Recommendation

STRENGTH_THRESHOLD = 80
CONCERN_THRESHOLD = 50
MAX_LISTED_SKILLS = 3

STRENGTHS = (
    ('skills', 'Strong skill match'),
    ('experience', 'Excellent experience level'),
    ('education', 'Strong educational background'),
    ('keywords', 'High keyword relevance'),
)

CONCERNS = (
    ('skills', 'Limited skill overlap'),
    ('experience', 'Experience gap'),
    ('education', 'Educational requirements not met'),
    ('location', 'Location mismatch'),
)

NEUTRAL_REASONING = 'No standout strengths or concerns identified'


def generate_reasoning(scores: CategoryScores) -> str:
    """Strengths, concerns and missing skills joined by " | "."""
    reasoning: List[str] = []

    strengths = [label for name, label in STRENGTHS
                 if getattr(scores, name).score >= STRENGTH_THRESHOLD]
    if strengths:
        reasoning.append(f"Strengths: {', '.join(strengths)}")

    concerns = [label for name, label in CONCERNS
                if getattr(scores, name).score < CONCERN_THRESHOLD]
    if concerns:
        reasoning.append(f"Areas of concern: {', '.join(concerns)}")

    missing = scores.skills.missing[:MAX_LISTED_SKILLS]
    if missing:
        reasoning.append(f"Missing key skills: {', '.join(missing)}")

    return ' | '.join(reasoning) if reasoning else NEUTRAL_REASONING


def generate_recommendations(scores: CategoryScores) -> Tuple[Recommendation, ...]:
    """Improvement suggestions, always ordered skills, experience, location."""
    recommendations: List[Recommendation] = []

    if scores.skills.score < 70 and scores.skills.missing:
        missing = ', '.join(scores.skills.missing[:MAX_LISTED_SKILLS])
        recommendations.append(Recommendation(
            category='Skills',
            priority=Priority.HIGH,
            suggestion=f"Consider candidates with experience in: {missing}",
        ))

    if scores.experience.score < 60:
        recommendations.append(Recommendation(
            category='Experience',
            priority=Priority.MEDIUM,
            suggestion='Consider if experience requirements can be flexible or if training is available',
        ))

    if scores.location.score < 50:
        recommendations.append(Recommendation(
            category='Location',
            priority=Priority.LOW,
            suggestion='Consider remote work options or relocation assistance',
        ))

    return tuple(recommendations)


def calculate_confidence(scores: CategoryScores) -> int:
    """Share of categories backed by candidate data, as a whole percentage."""
    categories = [category for _, category in scores.items()]
    backed = sum(1 for category in categories if category.data_available)
    return (backed * 200 + len(categories)) // (2 * len(categories))
