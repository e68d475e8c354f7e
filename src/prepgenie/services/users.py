"""User identity resolution."""

from dataclasses import dataclass
from typing import Protocol

from prepgenie.domain.models import UserIdentity


class AuthenticationError(Exception):
    """Raised when a request cannot be tied to a user."""


class IdentityProvider(Protocol):
    """Interface for the session/auth provider."""

    def get_user(self, access_token: str) -> UserIdentity | None:
        """Return the user for an access token, if valid."""


@dataclass
class UserService:
    """Application service for resolving the calling user."""

    provider: IdentityProvider

    def authenticate(self, access_token: str | None) -> UserIdentity:
        """Return the user for the token or raise AuthenticationError."""
        if not access_token:
            raise AuthenticationError("Not authenticated")
        user = self.provider.get_user(access_token)
        if user is None:
            raise AuthenticationError("Not authenticated")
        return user
