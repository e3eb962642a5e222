"""
Bearer token verification and the access guard dependency.

Access tokens are issued by the Supabase auth server (see
``services.auth_service``) and signed with the project's JWT secret
using HMAC-SHA256.  ``TokenVerifier`` checks the signature, the
``alg`` header, the ``exp`` timestamp and the ``aud`` claim locally,
so guarded requests do not need a round trip to the auth server.

``get_current_user`` is the single gate in front of every mutating
endpoint: no header (or a non-bearer one) yields 401, a token that
fails verification yields 403.  ``get_session_user`` guards ``/api/me``
and answers 401 in both cases.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import Forbidden, Unauthorized

logger = logging.getLogger(__name__)


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


class TokenVerifier:
    """Validate HS256 JWTs issued by the hosted auth provider."""

    def __init__(self, secret: str, audience: Optional[str] = "authenticated", leeway: int = 0) -> None:
        self.secret = secret
        self.audience = audience
        self.leeway = leeway

    def _audience_ok(self, claims: Dict[str, Any]) -> bool:
        if not self.audience:
            return True
        aud = claims.get("aud")
        if isinstance(aud, list):
            return self.audience in aud
        return aud == self.audience

    def verify(self, token: str) -> Optional[Dict[str, Any]]:
        """Verify and decode a JWT.

        Returns the claims dictionary when the signature, algorithm,
        expiry and audience all check out; otherwise ``None``.
        """
        if not self.secret:
            logger.error("SUPABASE_JWT_SECRET is not configured; rejecting token")
            return None
        parts = token.split(".")
        if len(parts) != 3:
            return None
        header_b64, payload_b64, signature_b64 = parts
        try:
            header = json.loads(_b64_url_decode(header_b64))
            claims = json.loads(_b64_url_decode(payload_b64))
            actual_sig = _b64_url_decode(signature_b64)
        except (ValueError, UnicodeDecodeError):
            return None
        if not isinstance(header, dict) or not isinstance(claims, dict):
            return None
        if header.get("alg") != "HS256":
            return None
        expected_sig = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), self.secret)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)) or exp + self.leeway < time.time():
            return None
        if not self._audience_ok(claims):
            return None
        return claims


security = HTTPBearer(auto_error=False)


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


def _authenticate(request: Request, credentials, verifier: TokenVerifier, rejected) -> Dict[str, Any]:
    if credentials is None or not credentials.credentials.strip():
        raise Unauthorized("Token tidak ditemukan")
    claims = verifier.verify(credentials.credentials.strip())
    if claims is None:
        raise rejected("Token tidak valid atau sudah kedaluwarsa")
    request.state.user = claims
    return claims


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Dict[str, Any]:
    """Dependency that gates mutating endpoints.

    Raises ``Unauthorized`` when no bearer token is present and
    ``Forbidden`` when the token does not verify.  On success the
    claims are stored on ``request.state.user`` and returned.
    """
    return _authenticate(request, credentials, verifier, Forbidden)


def get_session_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Dict[str, Any]:
    """Like ``get_current_user`` but any failure is 401.

    Used by ``/api/me``, whose clients treat every non-200 answer as
    "not logged in".
    """
    return _authenticate(request, credentials, verifier, Unauthorized)
