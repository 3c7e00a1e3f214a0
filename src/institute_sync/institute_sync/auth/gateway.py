from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import request

from ..common.responses import domain_error
from ..core.exceptions import AuthenticationError, AuthorizationError

BEARER_PREFIX = "Bearer "


class AccessGateway:
    """Static bearer-token check shared by every API route.

    One token grants full read/write/delete access; there is no session or expiry.
    """

    def __init__(self, api_token: str):
        self._api_token = api_token

    def authorize(self, header: Optional[str]) -> None:
        if not header or not header.startswith(BEARER_PREFIX):
            raise AuthenticationError("API token is required")

        token = header[len(BEARER_PREFIX):].strip()
        if not token:
            raise AuthenticationError("API token is required")
        if token != self._api_token:
            raise AuthorizationError("API token is invalid")


def token_required(gateway: AccessGateway):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                gateway.authorize(request.headers.get("Authorization"))
            except (AuthenticationError, AuthorizationError) as e:
                return domain_error(e)
            return view(*args, **kwargs)

        return wrapper

    return decorator
