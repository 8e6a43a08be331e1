"""
Candidate-to-requirement scoring engine.

Scores a candidate record against a job requirement across six categories
(skills, experience, education, keywords, location, industry), aggregates
them with fixed weights and explains the result.
"""
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Optional, Sequence, Tuple

from extractors.term_tagger import TermTagger
from extractors.text_extractor import extract_location, extract_text, is_remote
from scoring.aggregator import calculate_overall_score, get_match_level
from scoring.education import EducationAnalyzer
from scoring.exceptions import ScoringError
from scoring.experience import ExperienceAnalyzer
from scoring.industry import IndustryScorer, extract_industries
from scoring.keywords import KeywordRelevanceScorer
from scoring.location import DistanceProvider, LocationScorer
from scoring.models import CategoryScores, RequirementProfile, ScoringResult
from scoring.reasoning import calculate_confidence, generate_reasoning, generate_recommendations
from scoring.skills import SkillMatcher
from utils.config import Config

logger = logging.getLogger(__name__)


class CandidateScorer:
    """
    Multi-factor candidate scoring.

    Everything held on the instance (config, term tagger, dictionaries) is
    read-only after construction. Per-call state, including the TF-IDF model,
    is created inside each call, so one scorer can serve concurrent threads.
    """

    def __init__(self, config: Optional[Config] = None,
                 distance_provider: Optional[DistanceProvider] = None,
                 tagger: Optional[TermTagger] = None):
        self.config = config or Config()
        self.tagger = tagger or TermTagger(self.config.nlp_model)

        self.skill_matcher = SkillMatcher(
            self.tagger,
            exact_threshold=self.config.exact_match_threshold,
            partial_threshold=self.config.partial_match_threshold,
            partial_weight=self.config.partial_match_weight,
        )
        self.experience_analyzer = ExperienceAnalyzer()
        self.education_analyzer = EducationAnalyzer()
        self.keyword_scorer = KeywordRelevanceScorer()
        self.location_scorer = LocationScorer(distance_provider)
        self.industry_scorer = IndustryScorer()

    def prepare_requirement(self, requirement: Any) -> RequirementProfile:
        """
        Extract everything the engine needs from a requirement record.

        The profile is immutable and can be reused for every candidate
        scored against the same requirement.
        """
        text = extract_text(requirement)
        industries = extract_industries(text)
        profile = RequirementProfile(
            text=text,
            skills=self.skill_matcher.extract_skills(text),
            experience=self.experience_analyzer.extract_requirement(text),
            education=self.education_analyzer.extract_profile(text, requirement=True),
            salient_terms=self.tagger.salient_terms(text, limit=self.config.max_salient_terms),
            location=extract_location(requirement),
            remote=is_remote(requirement),
            industry=industries[0] if industries else None,
        )
        logger.info(
            f"Prepared requirement: skills={len(profile.skills)}, "
            f"terms={len(profile.salient_terms)}, industry={profile.industry}"
        )
        return profile

    def score_candidate(self, candidate: Any, requirement: Any,
                        cached_requirement: Optional[RequirementProfile] = None) -> ScoringResult:
        """
        Score one candidate against one requirement.

        Args:
            candidate: Candidate record (resume text or profile mapping)
            requirement: Requirement record (posting text or mapping)
            cached_requirement: Profile from prepare_requirement, reused when given

        Returns:
            ScoringResult

        Raises:
            ScoringError: if any category computation fails
        """
        try:
            req = cached_requirement
            if req is None:
                req = self.prepare_requirement(requirement)
            candidate_text = extract_text(candidate)

            scores = CategoryScores(
                skills=self.skill_matcher.score(candidate_text, req.skills),
                experience=self.experience_analyzer.score(candidate_text, req.experience),
                education=self.education_analyzer.score(candidate_text, req.education),
                keywords=self.keyword_scorer.score(candidate_text, req.text, req.salient_terms),
                location=self.location_scorer.score(
                    extract_location(candidate), req.location, remote=req.remote
                ),
                industry=self.industry_scorer.score(candidate_text, req.industry),
            )
            for name, category in scores.items():
                logger.debug(f"{name}: {category.score} ({category.details})")

            overall = calculate_overall_score(scores)
            result = ScoringResult(
                overall_score=overall,
                category_scores=scores,
                match_level=get_match_level(overall),
                reasoning=generate_reasoning(scores),
                recommendations=generate_recommendations(scores),
                confidence=calculate_confidence(scores),
                timestamp=datetime.now(timezone.utc),
            )
        except Exception as e:
            logger.exception(f"Error in score_candidate: {e}")
            raise ScoringError(f"Scoring failed: {e}", cause=e) from e

        logger.info(
            f"Scored candidate: overall={result.overall_score}, "
            f"level={result.match_level.value}, confidence={result.confidence}",
            extra={
                'overall_score': result.overall_score,
                'match_level': result.match_level.value,
                'confidence': result.confidence,
            },
        )
        return result

    def score_batch(self, candidates: Sequence[Any], requirement: Any) -> 'BatchResult':
        """
        Score and rank many candidates against one requirement.

        The requirement is prepared once. A candidate that fails to score is
        reported on its entry and ranked after every successful one.

        Raises:
            ValueError: if candidates is empty or over batch_max_candidates
            ScoringError: if the requirement itself cannot be prepared
        """
        if not candidates:
            raise ValueError("Missing or invalid candidates list")
        if len(candidates) > self.config.batch_max_candidates:
            raise ValueError(
                f"Too many candidates ({len(candidates)}). "
                f"Max: {self.config.batch_max_candidates}"
            )

        logger.info(
            f"Starting batch analysis: {len(candidates)} candidates",
            extra={'candidates': len(candidates)},
        )
        try:
            cached_requirement = self.prepare_requirement(requirement)
        except Exception as e:
            logger.exception(f"Failed to prepare requirement: {e}")
            raise ScoringError(f"Scoring failed: {e}", cause=e) from e

        scored = []
        failed = []
        for index, candidate in enumerate(candidates):
            try:
                result = self.score_candidate(candidate, requirement, cached_requirement)
                scored.append((index, result))
            except ScoringError as e:
                logger.warning(
                    f"Candidate {index} failed: {e.message}",
                    extra={'candidate_index': index},
                )
                failed.append((index, e.message))

        scored.sort(key=lambda item: item[1].overall_score, reverse=True)

        entries = []
        for rank, (index, result) in enumerate(scored, 1):
            entries.append(BatchEntry(rank=rank, index=index, result=result))
        for rank, (index, error) in enumerate(failed, len(scored) + 1):
            entries.append(BatchEntry(rank=rank, index=index, error=error))

        batch = BatchResult(entries=tuple(entries))
        logger.info(
            f"Batch analysis completed: total={batch.total}, "
            f"successful={batch.successful}, failed={batch.failed}",
            extra={'successful': batch.successful, 'failed': batch.failed},
        )
        return batch


@dataclass(frozen=True)
class BatchEntry:
    rank: int
    index: int
    result: Optional[ScoringResult] = None
    error: Optional[str] = None

    @property
    def status(self) -> str:
        return 'success' if self.error is None else 'failed'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rank': self.rank,
            'index': self.index,
            'status': self.status,
            'result': self.result.to_dict() if self.result else None,
            'error': self.error,
        }


@dataclass(frozen=True)
class BatchResult:
    entries: Tuple[BatchEntry, ...]
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    def successful(self) -> int:
        return sum(1 for entry in self.entries if entry.status == 'success')

    @property
    def failed(self) -> int:
        return self.total - self.successful

    def to_dict(self) -> Dict[str, Any]:
        return {
            'analyzed_at': self.analyzed_at.isoformat(),
            'total': self.total,
            'successful': self.successful,
            'failed': self.failed,
            'results': [entry.to_dict() for entry in self.entries],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


@lru_cache(maxsize=1)
def default_scorer() -> CandidateScorer:
    """Process-wide scorer with default configuration, built on first use."""
    return CandidateScorer()


def score_candidate(candidate: Any, requirement: Any) -> ScoringResult:
    """Score a candidate record against a requirement record."""
    return default_scorer().score_candidate(candidate, requirement)
