from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.constants import MAX_USER_MESSAGE_LENGTH
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

GENERIC_ERROR = "Something went wrong. Please try again."
INTERNAL_ERROR = "internal_error"

# Substrings that mark a message as internal (stack traces, driver errors, SQL).
_TECHNICAL_MARKERS = (
    "traceback",
    "exception",
    "stack trace",
    "sql",
    "errno",
    "syntax",
    "constraint",
    'file "',
    ", line ",
    "0x",
)

_ERROR_CODES = (
    (ValidationError, "validation_error"),
    (AuthenticationError, "unauthenticated"),
    (AuthorizationError, "forbidden"),
    (NotFoundError, "not_found"),
    (ConflictError, "conflict"),
    (UnavailableError, "unavailable"),
)


def error_code_for(exc: BaseException) -> str:
    for error_cls, code in _ERROR_CODES:
        if isinstance(exc, error_cls):
            return code
    return INTERNAL_ERROR


def user_facing_message(message: Optional[str], fallback: str = GENERIC_ERROR) -> str:
    """Return ``message`` if it is short and non-technical, else ``fallback``."""
    if not message:
        return fallback
    text = str(message).strip()
    if not text or len(text) > MAX_USER_MESSAGE_LENGTH or "\n" in text:
        return fallback
    lowered = text.lower()
    if any(marker in lowered for marker in _TECHNICAL_MARKERS):
        return fallback
    return text


@dataclass(frozen=True)
class Envelope:
    """Uniform result of a data-access operation: ``{success, data?, error?}``."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    field_errors: dict[str, str] = field(default_factory=dict)
    code: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "Envelope":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls, error: str, field_errors: Optional[dict[str, str]] = None, code: str = INTERNAL_ERROR
    ) -> "Envelope":
        return cls(success=False, error=error, field_errors=dict(field_errors or {}), code=code)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Envelope":
        code = error_code_for(exc)
        if code == INTERNAL_ERROR:
            return cls.fail(user_facing_message(str(exc)), code=code)
        return cls.fail(str(exc), getattr(exc, "field_errors", None), code=code)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"success": self.success}
        if self.data is not None:
            out["data"] = self.data
        if self.error is not None:
            out["error"] = self.error
        if self.field_errors:
            out["fieldErrors"] = dict(self.field_errors)
        return out
