from __future__ import annotations

from flask import jsonify

from ..core.exceptions import DomainError
from .datetime_utils import format_timestamp


def ok(payload: dict, status: int = 200):
    body = {"success": True, "timestamp": format_timestamp(), **payload}
    return jsonify(body), status


def fail(message: str, status: int, **extra):
    body = {"success": False, "message": message, **extra, "timestamp": format_timestamp()}
    return jsonify(body), status


def domain_error(e: DomainError):
    return fail(str(e), e.status_code)


def internal_error(message: str, e: Exception):
    # Raw exception text is echoed back to the caller.
    return fail(message, 500, error=str(e))
