"""
Pydantic models for player (``pemain``) data.

Players are submitted as multipart forms because a photo may travel
with the fields, so ``PlayerCreate``/``PlayerUpdate`` are built by the
endpoint from ``Form`` parameters rather than parsed from JSON.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class PlayerBase(BaseModel):
    nama: str = Field(..., example="Budi")
    posisi: Optional[str] = Field(None, example="Striker")
    tanggal_lahir: Optional[date] = Field(None, example="2010-01-01")


class PlayerCreate(PlayerBase):
    minutes_play: int = Field(0, ge=0, example=0)


class PlayerUpdate(BaseModel):
    """All fields optional; only supplied ones are written."""

    nama: Optional[str] = None
    posisi: Optional[str] = None
    tanggal_lahir: Optional[date] = None
    minutes_play: Optional[int] = Field(None, ge=0)


class PlayerRead(PlayerBase):
    id: int
    foto_url: Optional[str] = None
    minutes_play: int = 0
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
