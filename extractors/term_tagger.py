"""
NLP term tagging built on spaCy.

Tags technology phrases with an ``entity_ruler`` (label ``TECHNOLOGY``) and
pulls nouns out of free text. When the configured statistical model is not
installed the tagger runs on a blank English pipeline with the same ruler,
and content words stand in for part-of-speech nouns.
"""
import logging
from typing import Iterable, List, Tuple

import spacy

logger = logging.getLogger(__name__)

TECHNOLOGY_LABEL = 'TECHNOLOGY'

TECHNOLOGY_TERMS = (
    # languages
    'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'golang', 'rust', 'ruby',
    'php', 'kotlin', 'swift', 'scala', 'perl',
    # web and mobile frameworks
    'react', 'react native', 'angular', 'vue', 'svelte', 'next.js', 'node.js', 'nodejs',
    'express', 'django', 'flask', 'fastapi', 'spring boot', 'rails', 'laravel', '.net',
    'flutter', 'graphql', 'rest api', 'html', 'css',
    # data
    'mysql', 'postgresql', 'mongodb', 'redis', 'elasticsearch', 'cassandra', 'dynamodb',
    'snowflake', 'kafka', 'spark', 'hadoop', 'airflow', 'pandas', 'numpy',
    'tensorflow', 'pytorch', 'scikit-learn',
    # cloud and ops
    'aws', 'azure', 'gcp', 'google cloud', 'docker', 'kubernetes', 'terraform', 'ansible',
    'jenkins', 'github actions', 'linux',
    # tools
    'git', 'jira', 'confluence', 'figma', 'tableau', 'power bi',
)

CONTENT_POS = ('NOUN', 'PROPN')


class TermTagger:
    """Technology and noun extraction over a spaCy pipeline."""

    def __init__(self, model_name: str = 'en_core_web_sm',
                 technology_terms: Iterable[str] = TECHNOLOGY_TERMS):
        """
        Load the spaCy pipeline and attach the technology ruler.

        Args:
            model_name: Installed spaCy model package
            technology_terms: Phrases tagged as technology
        """
        self.model_name = model_name
        try:
            self.nlp = spacy.load(model_name, exclude=['ner', 'lemmatizer'])
            self.has_pos = True
            logger.info(f"Loaded spaCy model: {model_name}")
        except OSError as e:
            logger.warning(
                f"spaCy model {model_name} not available ({e}); "
                f"tagging with a blank English pipeline"
            )
            self.nlp = spacy.blank('en')
            self.has_pos = False

        ruler = self.nlp.add_pipe('entity_ruler', config={'phrase_matcher_attr': 'LOWER'})
        ruler.add_patterns([
            {'label': TECHNOLOGY_LABEL, 'pattern': term} for term in technology_terms
        ])

    def technologies(self, text: str) -> List[str]:
        """Lower-cased technology phrases in order of appearance."""
        if not text:
            return []
        doc = self.nlp(text)
        return [ent.text.lower() for ent in doc.ents if ent.label_ == TECHNOLOGY_LABEL]

    def nouns(self, text: str) -> List[str]:
        """Lower-cased nouns in order of appearance."""
        if not text:
            return []
        return self._nouns(self.nlp(text))

    def salient_terms(self, text: str, limit: int = 20) -> Tuple[str, ...]:
        """
        Nouns longer than two characters, then technology phrases.

        De-duplicated in discovery order and capped at ``limit`` terms.
        """
        if not text:
            return ()
        doc = self.nlp(text)
        terms = {}
        for noun in self._nouns(doc):
            if len(noun) > 2:
                terms.setdefault(noun, None)
        for ent in doc.ents:
            if ent.label_ == TECHNOLOGY_LABEL:
                terms.setdefault(ent.text.lower(), None)
        return tuple(terms)[:limit]

    def _nouns(self, doc) -> List[str]:
        if self.has_pos:
            return [token.text.lower() for token in doc if token.pos_ in CONTENT_POS]
        return [
            token.text.lower() for token in doc
            if token.is_alpha and not token.is_stop
        ]
