"""
Location scoring.

Distances come from an injected ``DistanceProvider``; real geocoding lives
outside the engine and is wired in by the caller.
"""
import logging
from typing import Optional, Protocol

from scoring.models import CategoryScore

logger = logging.getLogger(__name__)

# (max distance in km, score), checked in order
DISTANCE_BANDS = ((10, 100), (25, 80), (50, 60))
FAR_SCORE = 20
UNKNOWN_SCORE = 30


class DistanceProvider(Protocol):
    def distance_km(self, origin: str, destination: str) -> Optional[float]:
        """Distance between two free-form locations, or None if unknown."""
        ...


class ContainmentDistanceProvider:
    """Provider with no coordinates: every distance is unknown.

    Locations that contain one another are resolved to 0 km before any
    provider is asked, so this never needs to guess.
    """

    def distance_km(self, origin: str, destination: str) -> Optional[float]:
        return None


def locations_overlap(first: str, second: str) -> bool:
    a = first.strip().lower()
    b = second.strip().lower()
    return bool(a and b) and (a in b or b in a)


def distance_score(distance: float) -> int:
    for limit, score in DISTANCE_BANDS:
        if distance <= limit:
            return score
    return FAR_SCORE


class LocationScorer:
    """Scores the candidate's location against the requirement's."""

    def __init__(self, distance_provider: Optional[DistanceProvider] = None):
        self.distance_provider = distance_provider or ContainmentDistanceProvider()

    def score(self, candidate_location: Optional[str], required_location: Optional[str],
              remote: bool = False) -> CategoryScore:
        if remote or not required_location:
            return CategoryScore(
                score=100,
                details='Remote work available or no location restriction',
            )

        if not candidate_location:
            return CategoryScore(
                score=UNKNOWN_SCORE,
                details='Candidate location not specified',
                data_available=False,
                facts={'required_location': required_location},
            )

        if locations_overlap(candidate_location, required_location):
            distance = 0.0
        else:
            distance = self.distance_provider.distance_km(candidate_location, required_location)
            logger.debug(f"Distance {candidate_location} -> {required_location}: {distance}")

        facts = {
            'candidate_location': candidate_location,
            'required_location': required_location,
            'estimated_distance_km': distance,
        }
        if distance is None:
            return CategoryScore(
                score=UNKNOWN_SCORE,
                details=f"Distance between {candidate_location} and {required_location} unknown",
                data_available=False,
                facts=facts,
            )

        return CategoryScore(
            score=distance_score(distance),
            details=f"{distance:g}km from required location",
            facts=facts,
        )
