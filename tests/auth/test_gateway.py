from __future__ import annotations

import pytest

from src.institute_sync.institute_sync.auth.gateway import AccessGateway
from src.institute_sync.institute_sync.core.exceptions import AuthenticationError, AuthorizationError


@pytest.mark.parametrize("header", [None, "", "secret", "Basic secret", "Bearer ", "Bearer    "])
def test_missing_or_malformed_header_is_unauthenticated(header):
    with pytest.raises(AuthenticationError):
        AccessGateway("secret").authorize(header)


def test_wrong_token_is_forbidden():
    with pytest.raises(AuthorizationError):
        AccessGateway("secret").authorize("Bearer other")


def test_matching_token_passes():
    AccessGateway("secret").authorize("Bearer secret")
