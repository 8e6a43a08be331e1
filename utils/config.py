"""
Scoring engine configuration.

Values come from the defaults below, then an optional YAML file, then
environment variables, each layer overriding the previous one.
"""
import logging
import os
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

# Setting name -> converter applied to file and environment values
SETTINGS: Dict[str, Callable[[Any], Any]] = {
    'nlp_model': str,
    'exact_match_threshold': float,
    'partial_match_threshold': float,
    'partial_match_weight': float,
    'max_salient_terms': int,
    'batch_max_candidates': int,
    'log_level': str,
}

ENV_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    ('SCORING_NLP_MODEL', 'nlp_model'),
    ('SCORING_MAX_SALIENT_TERMS', 'max_salient_terms'),
    ('SCORING_BATCH_MAX_CANDIDATES', 'batch_max_candidates'),
    ('LOG_LEVEL', 'log_level'),
)


class Config:
    """Matching thresholds, NLP model and batch limits for the engine."""

    def __init__(self, config_path: Optional[str] = "config.yaml"):
        """
        Args:
            config_path: YAML file to read; None skips the file
        """
        self.nlp_model = "en_core_web_sm"
        self.exact_match_threshold = 0.85
        self.partial_match_threshold = 0.70
        self.partial_match_weight = 0.7
        self.max_salient_terms = 20
        self.batch_max_candidates = 100
        self.log_level = "INFO"

        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, 'r') as f:
                    self._load_from_dict(yaml.safe_load(f))
                logger.info(f"Configuration loaded from {config_path}")
            except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}")
        else:
            logger.info("Using default scoring configuration")

        self._load_from_env()

    def _load_from_dict(self, config_data: Optional[Dict[str, Any]]) -> None:
        """Apply known settings from a parsed YAML document.

        Values are converted before any is assigned, so a bad value leaves
        the whole file unapplied.
        """
        if not config_data:
            return
        if not isinstance(config_data, dict):
            raise TypeError(f"expected a mapping, got {type(config_data).__name__}")

        values = {
            name: convert(config_data[name])
            for name, convert in SETTINGS.items()
            if name in config_data
        }
        unknown = set(config_data) - set(SETTINGS)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        for name, value in values.items():
            setattr(self, name, value)

    def _load_from_env(self) -> None:
        for variable, name in ENV_OVERRIDES:
            value = os.getenv(variable)
            if value:
                setattr(self, name, SETTINGS[name](value))
