"""
Tests for experience analysis.
"""

import pytest

from scoring.experience import ExperienceAnalyzer
from scoring.models import ExperienceLevel, ExperienceRequirement


@pytest.fixture
def analyzer() -> ExperienceAnalyzer:
    return ExperienceAnalyzer()


class TestCandidateProfile:
    """Test candidate years and level extraction."""

    def test_years_and_numeric_level(self, analyzer):
        profile = analyzer.extract_profile("5 years experience in React")
        assert profile.years == 5
        assert profile.level is ExperienceLevel.MID

    def test_maximum_years_taken(self, analyzer):
        profile = analyzer.extract_profile("2 years experience in QA, then 7 yrs exp in Go")
        assert profile.years == 7

    def test_years_with_plus_and_of(self, analyzer):
        assert analyzer.extract_profile("10+ years of experience").years == 10

    def test_keyword_overrides_numeric_band(self, analyzer):
        profile = analyzer.extract_profile("Senior Engineer with 3 years of experience")
        assert profile.years == 3
        assert profile.level is ExperienceLevel.SENIOR

    def test_lower_keyword_does_not_demote_numeric_band(self, analyzer):
        profile = analyzer.extract_profile(
            "Junior contributor turned team member, 7 years of experience"
        )
        assert profile.level is ExperienceLevel.SENIOR

    def test_executive(self, analyzer):
        profile = analyzer.extract_profile("Director of engineering, 12 years experience")
        assert profile.level is ExperienceLevel.EXECUTIVE

    def test_defaults(self, analyzer):
        profile = analyzer.extract_profile("")
        assert profile.years == 0
        assert profile.level is ExperienceLevel.ENTRY
        assert profile.relevant_domains == frozenset()

    def test_relevant_domains(self, analyzer):
        profile = analyzer.extract_profile("Machine learning and web development projects")
        assert profile.relevant_domains == {"machine learning", "web development"}


class TestRequirement:
    """Test requirement-side extraction."""

    def test_years_without_experience_word(self, analyzer):
        assert analyzer.extract_requirement("Senior developer, 5+ years").years == 5

    def test_first_level_band_wins(self, analyzer):
        requirement = analyzer.extract_requirement("Senior developer, 5+ years")
        assert requirement.level is ExperienceLevel.MID

    def test_no_level_from_years_alone(self, analyzer):
        assert analyzer.extract_requirement("3 years of Python").level is None

    def test_domain(self, analyzer):
        assert analyzer.extract_requirement("ML engineer").domain == "machine learning"
        assert analyzer.extract_requirement("Web platform").domain == "web development"

    def test_domain_needs_whole_word(self, analyzer):
        assert analyzer.extract_requirement("HTML templates").domain is None

    def test_nothing_required(self, analyzer):
        requirement = analyzer.extract_requirement("Friendly team player")
        assert requirement == ExperienceRequirement()


class TestCompareLevels:
    """Test the level comparison table."""

    @pytest.mark.parametrize("candidate,required,expected", [
        (ExperienceLevel.MID, ExperienceLevel.MID, 20),
        (ExperienceLevel.EXECUTIVE, ExperienceLevel.MID, 10),
        (ExperienceLevel.MID, ExperienceLevel.SENIOR, 5),
        (ExperienceLevel.ENTRY, ExperienceLevel.SENIOR, -10),
    ])
    def test_table(self, candidate, required, expected):
        assert ExperienceAnalyzer.compare_levels(candidate, required) == expected


class TestScore:
    """Test the experience category score."""

    def test_no_requirement_is_neutral(self, analyzer):
        assert analyzer.score("10 years experience", ExperienceRequirement()).score == 50

    def test_years_bonus(self, analyzer):
        result = analyzer.score("8 years experience", ExperienceRequirement(years=3))
        assert result.score == 60
        assert result.facts["candidate_years"] == 8
        assert result.facts["required_years"] == 3

    def test_years_bonus_capped(self, analyzer):
        result = analyzer.score("30 years experience", ExperienceRequirement(years=2))
        assert result.score == 70

    def test_years_penalty_capped(self, analyzer):
        result = analyzer.score("2 years experience", ExperienceRequirement(years=10))
        assert result.score == 20

    def test_level_and_domain(self, analyzer):
        requirement = ExperienceRequirement(level=ExperienceLevel.MID, domain="data science")
        result = analyzer.score("4 years experience in data science", requirement)
        assert result.score == 90

    def test_clamped(self, analyzer):
        requirement = ExperienceRequirement(
            years=1, level=ExperienceLevel.ENTRY, domain="machine learning"
        )
        result = analyzer.score("Director, 20 years experience in machine learning", requirement)
        assert result.score == 100

    def test_floor(self, analyzer):
        requirement = ExperienceRequirement(years=20, level=ExperienceLevel.EXECUTIVE)
        assert analyzer.score("", requirement).score == 10

    def test_empty_candidate_flags_missing_data(self, analyzer):
        result = analyzer.score("", ExperienceRequirement(years=5))
        assert result.data_available is False
