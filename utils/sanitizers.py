"""
Input sanitization utilities for record text.
"""
import re

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')
_WHITESPACE = re.compile(r'\s+')


def sanitize_text(text: str) -> str:
    """
    Sanitize text pulled from a candidate or requirement record.

    Strips markup that can leak in from rich-text editors, drops control
    characters and collapses whitespace runs to single spaces.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    # Remove script tags and javascript
    text = re.sub(r'<script.*?</script>', '', text, flags=re.IGNORECASE | re.DOTALL)
    text = re.sub(r'javascript:', '', text, flags=re.IGNORECASE)
    text = re.sub(r'\bon\w+\s*=', '', text, flags=re.IGNORECASE)

    text = _CONTROL_CHARS.sub(' ', text)
    return _WHITESPACE.sub(' ', text).strip()
