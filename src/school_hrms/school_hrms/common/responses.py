from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import jsonify

from ..core.exceptions import DomainError
from .envelope import GENERIC_ERROR, INTERNAL_ERROR, Envelope, error_code_for

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "validation_error": 400,
    "unauthenticated": 401,
    "forbidden": 403,
    "not_found": 404,
    "conflict": 409,
    "unavailable": 503,
    INTERNAL_ERROR: 500,
}


def status_for(exc: BaseException) -> int:
    return _STATUS_BY_CODE[error_code_for(exc)]


def json_error(message: str, status: int, field_errors: Optional[dict] = None):
    return jsonify(Envelope.fail(message, field_errors).to_dict()), status


def json_envelope(envelope: Envelope, *, success_status: int = 200):
    if envelope.success:
        return jsonify(envelope.to_dict()), success_status
    return jsonify(envelope.to_dict()), _STATUS_BY_CODE.get(envelope.code or INTERNAL_ERROR, 500)


def json_errors(view):
    """Turn domain exceptions raised by a view into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return json_error(str(e), status_for(e), getattr(e, "field_errors", None))
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error(GENERIC_ERROR, 500)

    return wrapper
