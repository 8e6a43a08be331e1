"""
Keyword relevance scoring with TF-IDF.

The model is fit on exactly two documents, the candidate text (row 0) and the
requirement text (row 1), and is rebuilt on every call.
"""
import logging
import re
from typing import List, Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from scoring.models import CategoryScore, MatchPair

logger = logging.getLogger(__name__)

CANDIDATE_DOC = 0
REQUIREMENT_DOC = 1

_TOKEN = re.compile(r'[a-z0-9][a-z0-9+#./-]*')


def tokenize(text: str) -> List[str]:
    """Lower-cased tokens that keep "c++", "node.js" and "ci/cd" intact."""
    return [token.rstrip('.') for token in _TOKEN.findall((text or '').lower())]


def make_analyzer(max_ngram: int):
    """Analyzer producing space-joined n-grams up to ``max_ngram`` tokens."""
    def analyze(text: str) -> List[str]:
        tokens = [t for t in tokenize(text) if t]
        grams = list(tokens)
        for n in range(2, max_ngram + 1):
            grams.extend(' '.join(tokens[i:i + n]) for i in range(len(tokens) - n + 1))
        return grams
    return analyze


def compute_term_weights(candidate_text: str, requirement_text: str,
                         terms: Sequence[str]) -> np.ndarray:
    """
    TF-IDF weights of ``terms`` in both documents.

    Weights are raw counts times smoothed idf without row normalization, so a
    term's candidate/requirement ratio reflects how often each side uses it.

    Returns:
        Array of shape (2, len(terms))
    """
    terms = [' '.join(tokenize(term)) for term in terms]
    vocabulary = {}
    for term in terms:
        if term:
            vocabulary.setdefault(term, len(vocabulary))

    weights = np.zeros((2, len(terms)))
    if not vocabulary:
        return weights

    max_ngram = max(term.count(' ') + 1 for term in vocabulary)
    vectorizer = TfidfVectorizer(
        analyzer=make_analyzer(max_ngram),
        vocabulary=vocabulary,
        norm=None,
        smooth_idf=True,
    )
    matrix = vectorizer.fit_transform([candidate_text or '', requirement_text or '']).toarray()

    for column, term in enumerate(terms):
        if term:
            weights[:, column] = matrix[:, vocabulary[term]]
    return weights


class KeywordRelevanceScorer:
    """Scores how well the candidate covers the requirement's salient terms."""

    def score(self, candidate_text: str, requirement_text: str,
              salient_terms: Sequence[str]) -> CategoryScore:
        candidate_present = bool((candidate_text or '').strip())
        if not salient_terms:
            return CategoryScore(
                score=0,
                details='No key terms found in requirement',
                data_available=candidate_present,
            )

        weights = compute_term_weights(candidate_text, requirement_text, salient_terms)

        total = 0.0
        counted = 0
        matched: List[MatchPair] = []
        missing: List[str] = []

        for index, term in enumerate(salient_terms):
            candidate_weight = float(weights[CANDIDATE_DOC, index])
            requirement_weight = float(weights[REQUIREMENT_DOC, index])

            if candidate_weight <= 0:
                counted += 1
                missing.append(term)
                continue
            if requirement_weight <= 0:
                # ratio undefined; the term takes no part in the average
                logger.debug(f"Skipping term without requirement weight: {term}")
                continue

            term_score = min(candidate_weight / requirement_weight, 1.0) * 100
            total += term_score
            counted += 1
            matched.append(MatchPair(required=term, found=term, partial=bool(term_score < 100)))

        score = int(total / counted + 0.5) if counted else 0
        return CategoryScore(
            score=max(0, min(100, score)),
            details=f"Matched {len(matched)} out of {len(salient_terms)} key terms",
            matched=tuple(matched),
            missing=tuple(missing),
            data_available=candidate_present,
        )
