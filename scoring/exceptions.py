"""
Scoring exceptions.
"""
from typing import Optional


class ScoringError(Exception):
    """Raised when a scoring call fails for an internal reason.

    The proximate cause is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
