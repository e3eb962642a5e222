"""
Pydantic models for login and the current-user endpoint.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, example="admin@akademi.id")
    password: str = Field(..., min_length=1, example="rahasia")


class LoginResponse(BaseModel):
    message: str
    session: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None


class CurrentUser(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class MeResponse(BaseModel):
    authenticated: bool = True
    user: CurrentUser
