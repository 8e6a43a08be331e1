# utils/__init__.py
"""Utility modules."""
from .config import Config
from .logging_config import setup_logging
from .sanitizers import sanitize_text

__all__ = [
    'Config',
    'setup_logging',
    'sanitize_text',
]
