"""
Login against the hosted auth provider.

Credentials (e-mail, password hash, sessions) are owned by Supabase
Auth.  This service only forwards the e-mail/password pair and hands
the resulting session back to the client; tokens from that session
are later checked by ``core.security.TokenVerifier``.
"""

import logging
from typing import Any, Dict

import httpx
from supabase import AuthApiError, AuthError, Client, create_client

from ..core.config import Settings
from ..core.db import run_blocking
from ..core.errors import Unauthorized, UpstreamFailure

logger = logging.getLogger(__name__)


class SupabaseCredentialStore:
    """Credential Store collaborator backed by Supabase Auth."""

    def __init__(self, client: Client) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseCredentialStore":
        # Signing in stores the user session on the client and switches its
        # database headers to that user, so logins get a client of their own.
        return cls(create_client(settings.supabase_url, settings.supabase_key))

    def _sign_in_sync(self, email: str, password: str) -> Dict[str, Any]:
        response = self._client.auth.sign_in_with_password({"email": email, "password": password})
        session = response.session.model_dump(mode="json") if response.session else None
        user = response.user.model_dump(mode="json") if response.user else None
        return {"session": session, "user": user}

    async def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Exchange credentials for a session.

        Raises ``Unauthorized`` when the provider rejects the credentials
        and ``UpstreamFailure`` for any other provider error.
        """
        try:
            result = await run_blocking(self._sign_in_sync, email, password)
        except AuthApiError as exc:
            if exc.status is not None and 400 <= exc.status < 500:
                logger.info("Login rejected for %s: %s", email, exc.message)
                raise Unauthorized("Email atau password salah") from exc
            raise UpstreamFailure("auth") from exc
        except (AuthError, httpx.HTTPError) as exc:
            raise UpstreamFailure("auth") from exc
        if not result["session"]:
            raise Unauthorized("Email atau password salah")
        logger.info("User %s logged in", email)
        return result


def identity_from_claims(claims: Dict[str, Any]) -> Dict[str, Any]:
    """Shape the verified token claims into the ``/api/me`` user object."""
    return {
        "id": claims.get("sub"),
        "email": claims.get("email"),
        "role": claims.get("role"),
    }
