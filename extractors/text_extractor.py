"""
Record text extraction.

Candidate and requirement records arrive in whatever shape the calling layer
stored them: resume text, a profile export with a headline, or a posting
split into title/description/requirements. Text is pulled out by trying an
ordered list of accessor strategies; the first one that yields text wins.
"""
import logging
import re
from typing import Any, Callable, Mapping, Optional, Tuple

from utils.sanitizers import sanitize_text

logger = logging.getLogger(__name__)

Accessor = Callable[[Mapping[str, Any]], Optional[str]]

POSTING_FIELDS = ('title', 'description', 'requirements', 'responsibilities', 'qualifications')

_LOCATION_PHRASE = re.compile(
    r"\b(?:located in|based in|from)\s+"
    r"([A-Za-z][A-Za-z .'-]*(?:,\s*[A-Za-z][A-Za-z .'-]*)?)",
    re.IGNORECASE,
)
_REMOTE = re.compile(r'\bremote\b', re.IGNORECASE)
# "no remote work", "not a remote role", "non-remote"
_NEGATED_REMOTE = re.compile(
    r'\b(?:no|not|non)\b[\s-]+(?:(?:a|an|fully)\s+)?remote\b', re.IGNORECASE
)


def _field_text(record: Mapping[str, Any], name: str) -> str:
    value = record.get(name)
    if not value:
        return ''
    if isinstance(value, (list, tuple, set)):
        value = ' '.join(str(item) for item in value if item)
    return sanitize_text(str(value))


def _single_field(name: str) -> Accessor:
    def accessor(record: Mapping[str, Any]) -> Optional[str]:
        return _field_text(record, name) or None
    accessor.__name__ = f'field_{name}'
    return accessor


def _profile(record: Mapping[str, Any]) -> Optional[str]:
    """Profile exports carry a headline next to an optional summary."""
    if not record.get('headline'):
        return None
    return f"{_field_text(record, 'headline')} {_field_text(record, 'summary')}"


def _posting(record: Mapping[str, Any]) -> str:
    return ' '.join(_field_text(record, name) for name in POSTING_FIELDS)


TEXT_ACCESSORS: Tuple[Accessor, ...] = (
    _single_field('text'),
    _single_field('description'),
    _single_field('summary'),
    _single_field('content'),
    _profile,
    _posting,
)


def extract_text(record: Any) -> str:
    """
    Return the best-effort text of a candidate or requirement record.

    Args:
        record: Raw string, mapping of fields, or None

    Returns:
        Extracted text (empty string when nothing usable is present)
    """
    if isinstance(record, str):
        return record
    if not isinstance(record, Mapping):
        if record is not None:
            logger.debug(f"Unsupported record type {type(record).__name__}, using empty text")
        return ''

    for accessor in TEXT_ACCESSORS:
        text = accessor(record)
        if text is not None:
            return text
    return ''


def extract_location(record: Any) -> Optional[str]:
    """Location from explicit fields, else from a "based in ..." phrase."""
    if isinstance(record, Mapping):
        for name in ('location', 'address'):
            value = _field_text(record, name)
            if value:
                return value

    match = _LOCATION_PHRASE.search(extract_text(record))
    if not match:
        return None
    location = match.group(1).strip(' ,.-')
    return location or None


def is_remote(record: Any) -> bool:
    """True when a requirement record allows remote work."""
    if isinstance(record, Mapping):
        remote = record.get('remote')
        if isinstance(remote, str):
            if remote.strip().lower() in ('true', 'yes', '1', 'remote'):
                return True
        elif remote:
            return True
        for name in ('location', 'work_mode', 'workplace_type'):
            if _mentions_remote(_field_text(record, name)):
                return True

    return _mentions_remote(extract_text(record))


def _mentions_remote(text: str) -> bool:
    return bool(_REMOTE.search(_NEGATED_REMOTE.sub(' ', text)))
