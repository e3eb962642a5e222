"""Global pytest fixtures.

Centralizes:
 - Project root path insertion (so tests run without an editable install)
 - In-memory collaborators (record store, media uploader, credential store)
 - An application wired to those collaborators and a bearer token for it
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from academy_api.app.core.config import Settings  # noqa: E402
from academy_api.app.core.security import TokenVerifier  # noqa: E402
from academy_api.app.main import create_app  # noqa: E402
from tests.fakes import (  # noqa: E402
    JWT_SECRET,
    FakeCredentialStore,
    FakeMediaUploader,
    InMemoryRecordStore,
    make_token,
)


# -------------------- Collaborators -------------------- #

@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def media():
    return FakeMediaUploader()


@pytest.fixture
def credentials():
    return FakeCredentialStore()


# -------------------- Application -------------------- #

def build_app(store, media, credentials):
    return create_app(
        Settings(jwt_secret=JWT_SECRET),
        record_store=store,
        media_uploader=media,
        credential_store=credentials,
        token_verifier=TokenVerifier(JWT_SECRET),
    )


@pytest.fixture
def client(store, media, credentials):
    with TestClient(build_app(store, media, credentials)) as test_client:
        yield test_client


@pytest.fixture
def token():
    return make_token()


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def photo():
    return {"foto_url": ("budi.jpg", b"\xff\xd8\xff\xe0fake-jpeg", "image/jpeg")}
