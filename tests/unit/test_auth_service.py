import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from supabase import AuthApiError

from academy_api.app.core.errors import Unauthorized, UpstreamFailure
from academy_api.app.services.auth_service import SupabaseCredentialStore, identity_from_claims


class _Dumpable(SimpleNamespace):
    def model_dump(self, mode="python"):
        return dict(self.__dict__)


def _client(sign_in):
    client = MagicMock(name="supabase")
    client.auth.sign_in_with_password.side_effect = sign_in
    return client


def test_sign_in_returns_session_and_user():
    response = SimpleNamespace(
        session=_Dumpable(access_token="jwt", refresh_token="r", token_type="bearer"),
        user=_Dumpable(id="u-1", email="admin@akademi.id"),
    )
    client = _client(lambda creds: response)
    result = asyncio.run(SupabaseCredentialStore(client).sign_in("admin@akademi.id", "rahasia"))
    client.auth.sign_in_with_password.assert_called_once_with({"email": "admin@akademi.id", "password": "rahasia"})
    assert result["session"]["access_token"] == "jwt"
    assert result["user"]["email"] == "admin@akademi.id"


def test_rejected_credentials_are_unauthorized():
    def reject(creds):
        raise AuthApiError("Invalid login credentials", 400, "invalid_credentials")

    with pytest.raises(Unauthorized) as excinfo:
        asyncio.run(SupabaseCredentialStore(_client(reject)).sign_in("a@b.c", "wrong"))
    assert excinfo.value.status_code == 401


def test_provider_outage_is_upstream_failure():
    def outage(creds):
        raise AuthApiError("upstream unavailable", 503, None)

    with pytest.raises(UpstreamFailure):
        asyncio.run(SupabaseCredentialStore(_client(outage)).sign_in("a@b.c", "pw"))


def test_network_error_is_upstream_failure():
    def down(creds):
        raise httpx.ConnectError("dns failure")

    with pytest.raises(UpstreamFailure):
        asyncio.run(SupabaseCredentialStore(_client(down)).sign_in("a@b.c", "pw"))


def test_missing_session_is_unauthorized():
    client = _client(lambda creds: SimpleNamespace(session=None, user=None))
    with pytest.raises(Unauthorized):
        asyncio.run(SupabaseCredentialStore(client).sign_in("a@b.c", "pw"))


def test_identity_from_claims():
    identity = identity_from_claims({"sub": "u-1", "email": "x@y.z", "role": "authenticated", "aud": "authenticated"})
    assert identity == {"id": "u-1", "email": "x@y.z", "role": "authenticated"}
