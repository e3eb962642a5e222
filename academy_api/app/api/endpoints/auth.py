"""
Authentication endpoints.

Login is delegated to the hosted auth provider; ``/me`` echoes the
identity carried by a verified bearer token.
"""

from fastapi import APIRouter, Depends

from academy_api.app.api.dependencies import get_credential_store
from academy_api.app.core.security import get_session_user
from academy_api.app.schemas.auth import CurrentUser, LoginRequest, LoginResponse, MeResponse
from academy_api.app.services.auth_service import identity_from_claims


router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, credential_store=Depends(get_credential_store)) -> LoginResponse:
    """Exchange e-mail and password for a session.

    Returns 401 when the credentials are rejected.
    """
    result = await credential_store.sign_in(payload.email, payload.password)
    return LoginResponse(message="Login berhasil", session=result["session"], user=result["user"])


@router.get("/me", response_model=MeResponse)
async def me(current_user: dict = Depends(get_session_user)) -> MeResponse:
    return MeResponse(authenticated=True, user=CurrentUser(**identity_from_claims(current_user)))
