"""Log sanitizer - keeps API credentials out of log files.

Catalog and search requests carry their keys as query parameters, so the
text of an httpx error (which includes the request URL) must be scrubbed
before it is logged.
"""

import re
from typing import Union

SENSITIVE_PATTERNS = [
    # RetroAchievements web API key (y=) and username (z=) query params
    (r'([?&](?:y|z)=)[^&\s\'"]+', r'\1[REDACTED]'),

    # Google API key query param
    (r'([?&]key=)[^&\s\'"]+', r'\1[REDACTED]'),

    # Discord bot tokens and other key=value secrets
    (r'(password|secret|token|api_key|apikey|web_api_key)["\s:=]+[^\s,}"\']{8,}',
     r'\1=[REDACTED]'),

    (r'(Bearer|Bot)\s+[A-Za-z0-9\-_\.]{20,}', r'\1 [REDACTED]'),

    # Generic long alphanumeric strings that look like keys (32+ chars)
    (r'\b[A-Za-z0-9]{32,}\b', '[LONG_TOKEN]'),
]

_COMPILED_PATTERNS = [(re.compile(p, re.IGNORECASE), r) for p, r in SENSITIVE_PATTERNS]


def sanitize_log(text: str) -> str:
    """Remove credentials from text for safe logging."""
    if not text:
        return text

    result = text
    for pattern, replacement in _COMPILED_PATTERNS:
        result = pattern.sub(replacement, result)

    return result


def sanitize_for_log(value: Union[str, bytes, BaseException, None], max_length: int = 200) -> str:
    """Sanitize and truncate a value for logging.

    Args:
        value: The value to sanitize (string, bytes or an exception)
        max_length: Maximum length of returned string

    Returns:
        Sanitized, truncated string safe for logging
    """
    if value is None:
        return "<None>"

    if isinstance(value, bytes):
        text = value.decode('utf-8', errors='replace')
    elif isinstance(value, BaseException):
        text = f"{type(value).__name__}: {value}"
    else:
        text = str(value)

    sanitized = sanitize_log(text)

    if len(sanitized) > max_length:
        return sanitized[:max_length] + f"... [{len(text)} chars total]"

    return sanitized
