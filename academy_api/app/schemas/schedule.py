"""
Pydantic models for match schedule (``jadwal``) entries.

``jam`` is kept as a string (``"15:30"``) because the frontend sends
free-form kick-off times and the column is nullable.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class ScheduleBase(BaseModel):
    lawan: str = Field(..., example="SSB Garuda Muda")
    tanggal: date = Field(..., example="2025-08-17")
    lokasi: str = Field(..., example="Lapangan Merdeka")
    jam: Optional[str] = Field(None, example="15:30")
    tipe_pertandingan: Optional[str] = Field(None, example="Uji coba")


class ScheduleCreate(ScheduleBase):
    pass


class ScheduleUpdate(BaseModel):
    lawan: Optional[str] = None
    tanggal: Optional[date] = None
    jam: Optional[str] = None
    lokasi: Optional[str] = None
    tipe_pertandingan: Optional[str] = None


class ScheduleRead(BaseModel):
    id: int
    lawan: str
    tanggal: date
    lokasi: Optional[str] = None
    jam: Optional[str] = None
    tipe_pertandingan: Optional[str] = None
    foto_url: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
