"""
Pydantic models for coach (``pelatih``) data.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CoachBase(BaseModel):
    nama: str = Field(..., example="Coach Indra")
    lisensi: Optional[str] = Field(None, example="AFC C")


class CoachCreate(CoachBase):
    pass


class CoachUpdate(BaseModel):
    nama: Optional[str] = None
    lisensi: Optional[str] = None


class CoachRead(CoachBase):
    id: int
    foto_url: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
