"""Tests for user identity resolution."""

import pytest

from prepgenie.services.users import AuthenticationError, UserService
from tests.conftest import TEST_TOKEN, TEST_USER_ID, FakeIdentityProvider


def test_authenticate_returns_user_for_known_token() -> None:
    service = UserService(FakeIdentityProvider())

    user = service.authenticate(TEST_TOKEN)

    assert user.id == TEST_USER_ID


@pytest.mark.parametrize("token", [None, "", "stale-token"])
def test_authenticate_rejects_missing_or_unknown_token(token: str | None) -> None:
    service = UserService(FakeIdentityProvider())

    with pytest.raises(AuthenticationError):
        service.authenticate(token)
