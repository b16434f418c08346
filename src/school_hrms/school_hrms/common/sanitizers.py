"""Input clean-up applied before values are stored or displayed.

Sanitizers never reject; validation lives in ``validators``.
"""

from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MAX_TEXT_LENGTH

_CONTROL_RE = re.compile(r"[\x00-\x1F\x7F]")
_UNSAFE_RE = re.compile(r"[<>]")
_WS_RE = re.compile(r"\s+")


def collapse_whitespace(value: Optional[str]) -> str:
    return _WS_RE.sub(" ", value or "").strip()


def sanitize_string(value: Optional[str], max_length: int = MAX_TEXT_LENGTH) -> str:
    if not value or not isinstance(value, str):
        return ""
    cleaned = _UNSAFE_RE.sub("", _CONTROL_RE.sub("", value)).strip()
    return cleaned[:max_length]


def sanitize_name(value: Optional[str]) -> str:
    """Letters (accented included), spaces, hyphens, apostrophes and periods."""
    if not value or not isinstance(value, str):
        return ""
    cleaned = _CONTROL_RE.sub("", value)
    cleaned = re.sub(r"[^A-Za-zÀ-ÖØ-öø-ɏ\s\-'.]", "", cleaned)
    return collapse_whitespace(cleaned)


def sanitize_phone(value: Optional[str]) -> str:
    """Digits only, international ``+63 9..`` rewritten to local ``09..``."""
    if not value or not isinstance(value, str):
        return ""
    digits = re.sub(r"\D", "", value)
    if len(digits) == 12 and digits.startswith("639"):
        digits = "0" + digits[2:]
    return digits[:11]


def sanitize_url(value: Optional[str]) -> str:
    cleaned = sanitize_string(value)
    if cleaned and not re.match(r"^https?://", cleaned, re.IGNORECASE):
        cleaned = "https://" + cleaned
    return cleaned


def sanitize_govt_id(value: Optional[str]) -> str:
    if not value or not isinstance(value, str):
        return ""
    cleaned = re.sub(r"[^A-Za-z0-9\s\-]", "", _CONTROL_RE.sub("", value))
    return collapse_whitespace(cleaned)


def mask_govt_id(value: Optional[str], visible: int = 4) -> str:
    """Mask an ID for display, leaving only the last ``visible`` characters.

    Separators such as ``-`` keep their position: ``12-3456789-0`` -> ``**-****789-0``.
    IDs with ``visible`` or fewer characters are masked completely.
    """
    if not value or not value.strip():
        return ""
    text = value.strip()
    total = sum(1 for ch in text if ch.isalnum())
    keep_from = total - visible if total > visible else total

    out: list[str] = []
    seen = 0
    for ch in text:
        if not ch.isalnum():
            out.append(ch)
            continue
        out.append(ch if seen >= keep_from else "*")
        seen += 1
    return "".join(out)
