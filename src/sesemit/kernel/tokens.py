"""Token helpers for SES sentences."""

import re
from typing import Optional, Sequence

GENERATED_TOKEN = "Generated"
SHORT_ID_LENGTH = 6
SHORT_ID_PLACEHOLDER = "xxxxxx"

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_\-]")


def sanitize_ses_token(value: Optional[str]) -> str:
    """
    Normalize free text into a token that is safe inside an SES sentence.

    Rules (in order):
    - None / empty / all-whitespace -> "Generated"
    - strip surrounding whitespace
    - each run of whitespace -> "_"
    - anything outside [A-Za-z0-9_-] -> "_"
    - leading digit gets a "_" prefix

    The function is idempotent: sanitizing a sanitized token returns it unchanged.
    """
    if value is None or not value.strip():
        return GENERATED_TOKEN
    token = _WHITESPACE_RE.sub("_", value.strip())
    token = _UNSAFE_RE.sub("_", token)
    if token[0] in "0123456789":
        token = "_" + token
    return token


def short_id(node_id: Optional[str]) -> str:
    """First six characters of an id (placeholder when there is no id)."""
    if node_id is None:
        return SHORT_ID_PLACEHOLDER
    return node_id[:SHORT_ID_LENGTH]


def join_with_and(items: Sequence[str]) -> str:
    """Join names as a natural-language list: "A", "A and B", "A, B, and C"."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + ", and " + items[-1]
