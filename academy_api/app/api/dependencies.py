"""
API dependencies.

The collaborators are process-wide singletons kept on ``app.state``.
``ensure_collaborators`` builds whichever of them were not injected;
it runs at startup and again, as a no-op, before each lookup so that
serverless runtimes that skip the lifespan still get them on first use.
"""

from typing import Any, Dict, Optional, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from academy_api.app.core.db import SupabaseRecordStore
from academy_api.app.core.errors import BadRequest
from academy_api.app.services.auth_service import SupabaseCredentialStore
from academy_api.app.services.media_service import CloudinaryMediaUploader


def ensure_collaborators(app: FastAPI) -> None:
    state = app.state
    settings = state.settings
    if state.record_store is None:
        state.record_store = SupabaseRecordStore.from_settings(settings)
    if state.credential_store is None:
        state.credential_store = SupabaseCredentialStore.from_settings(settings)
    if state.media_uploader is None:
        state.media_uploader = CloudinaryMediaUploader.from_settings(settings)


async def get_record_store(request: Request):
    ensure_collaborators(request.app)
    return request.app.state.record_store


async def get_media_uploader(request: Request):
    ensure_collaborators(request.app)
    return request.app.state.media_uploader


async def get_credential_store(request: Request):
    ensure_collaborators(request.app)
    return request.app.state.credential_store


def is_json_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


async def read_json_changes(request: Request, model: Type[BaseModel]) -> Optional[Dict[str, Any]]:
    """Supplied fields of a JSON update body, validated against ``model``.

    Returns ``None`` for any other content type so the caller falls back
    to the multipart form fields.
    """
    if not is_json_request(request):
        return None
    try:
        payload = await request.json()
    except ValueError:
        raise BadRequest("Body JSON tidak valid")
    try:
        changes = model.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_context=False))
    return changes.model_dump(mode="json", exclude_none=True)
