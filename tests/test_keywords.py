"""
Tests for TF-IDF keyword relevance.
"""

import json

import pytest

from scoring.keywords import KeywordRelevanceScorer, compute_term_weights, tokenize


@pytest.fixture
def scorer() -> KeywordRelevanceScorer:
    return KeywordRelevanceScorer()


class TestTokenize:

    def test_keeps_technical_tokens(self):
        assert tokenize("C++, Node.js and CI/CD.") == ["c++", "node.js", "and", "ci/cd"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize(None) == []


class TestTermWeights:

    def test_shape(self):
        weights = compute_term_weights("python", "python docker", ("python", "docker", "go"))
        assert weights.shape == (2, 3)

    def test_candidate_only_term_has_no_requirement_weight(self):
        weights = compute_term_weights("python docker", "python", ("docker",))
        assert weights[0, 0] > 0
        assert weights[1, 0] == 0


class TestScore:
    """Test the keyword category score."""

    def test_identical_texts(self, scorer):
        text = "python services on kubernetes"
        result = scorer.score(text, text, ("python", "services", "kubernetes"))
        assert result.score == 100
        assert result.missing == ()
        assert not any(pair.partial for pair in result.matched)

    def test_empty_candidate(self, scorer):
        result = scorer.score("", "python and docker", ("python", "docker"))
        assert result.score == 0
        assert result.missing == ("python", "docker")
        assert result.data_available is False

    def test_ratio_below_requirement_frequency(self, scorer):
        result = scorer.score("python", "python python", ("python",))
        assert result.score == 50
        assert result.matched[0].partial is True

    def test_ratio_capped_at_full_score(self, scorer):
        result = scorer.score("python python python", "python", ("python",))
        assert result.score == 100

    def test_term_absent_from_requirement_is_skipped(self, scorer):
        result = scorer.score("python docker", "python", ("python", "docker"))
        assert result.score == 100
        assert [pair.required for pair in result.matched] == ["python"]
        assert result.missing == ()

    def test_missing_terms_count_against_score(self, scorer):
        result = scorer.score("python", "python docker", ("python", "docker"))
        assert result.score == 50
        assert result.missing == ("docker",)

    def test_multiword_term(self, scorer):
        result = scorer.score(
            "machine learning models", "machine learning platform", ("machine learning",)
        )
        assert result.score == 100

    def test_no_terms(self, scorer):
        result = scorer.score("python", "", ())
        assert result.score == 0
        assert result.data_available is True

    def test_no_state_between_calls(self, scorer):
        first = scorer.score("python", "python python", ("python",))
        scorer.score("go rust java", "go rust java", ("go", "rust", "java"))
        again = scorer.score("python", "python python", ("python",))
        assert again.score == first.score == 50
        assert again.matched == first.matched

    def test_partial_flag_is_plain_bool(self, scorer):
        result = scorer.score("python", "python python", ("python",))
        assert type(result.matched[0].partial) is bool
        assert json.loads(json.dumps(result.to_dict()))["matched"][0]["partial"] is True
