"""
Structured logging for the scoring engine.

Scoring log lines can carry result fields through ``extra=``; the JSON
formatter lifts the ones listed in ``SCORING_FIELDS`` into the record so a log
collector can filter on scores without parsing messages.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Union

# Attributes a caller may attach with logger.info(..., extra={...})
SCORING_FIELDS = (
    'overall_score',
    'match_level',
    'confidence',
    'candidate_index',
    'candidates',
    'successful',
    'failed',
)

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }
        for name in SCORING_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.INFO,
                  json_output: Optional[bool] = None) -> logging.Logger:
    """
    Route engine logs to stdout.

    Args:
        level: Numeric level or a name such as "DEBUG" (``Config.log_level``)
        json_output: Force JSON lines on or off; by default JSON is used
            unless stdout is a terminal

    Returns:
        The configured root logger
    """
    level = _resolve_level(level)
    if json_output is None:
        json_output = not sys.stdout.isatty()

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)

    return root
