"""Supabase Auth identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from prepgenie.domain.models import UserIdentity
from prepgenie.services.users import IdentityProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolves access tokens through Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> UserIdentity | None:
        """Return the user owning the access token, if Supabase accepts it."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Supabase rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UserIdentity(id=UUID(response.user.id), email=response.user.email)
