"""
Match schedule endpoints.

The list is not paginated: all entries matching the optional ``lawan``
filter are returned in kick-off order.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status

from academy_api.app.api.dependencies import get_media_uploader, get_record_store, read_json_changes
from academy_api.app.core.security import get_current_user
from academy_api.app.schemas.common import MessageResponse, PageEnvelope, UpdateResponse
from academy_api.app.schemas.schedule import ScheduleCreate, ScheduleRead, ScheduleUpdate
from academy_api.app.services.schedule_service import ScheduleService


router = APIRouter()


@router.post("", response_model=ScheduleRead, status_code=status.HTTP_201_CREATED)
async def create_schedule(
    lawan: str = Form(...),
    tanggal: date = Form(...),
    lokasi: str = Form(...),
    jam: Optional[str] = Form(None),
    tipe_pertandingan: Optional[str] = Form(None),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> ScheduleRead:
    data = ScheduleCreate(
        lawan=lawan, tanggal=tanggal, lokasi=lokasi, jam=jam, tipe_pertandingan=tipe_pertandingan
    )
    return await ScheduleService.create(
        store, media, data.model_dump(mode="json"), photo=foto_url, current_user=current_user
    )


@router.get("", response_model=PageEnvelope[ScheduleRead])
async def list_schedule(
    lawan: Optional[str] = Query(None),
    store=Depends(get_record_store),
) -> PageEnvelope:
    return await ScheduleService.list_schedule(store, lawan=lawan)


@router.put("/{schedule_id}", response_model=UpdateResponse[ScheduleRead])
async def update_schedule(
    schedule_id: int,
    request: Request,
    lawan: Optional[str] = Form(None),
    tanggal: Optional[date] = Form(None),
    jam: Optional[str] = Form(None),
    lokasi: Optional[str] = Form(None),
    tipe_pertandingan: Optional[str] = Form(None),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> UpdateResponse:
    changes = await read_json_changes(request, ScheduleUpdate)
    if changes is None:
        changes = ScheduleUpdate(
            lawan=lawan, tanggal=tanggal, jam=jam, lokasi=lokasi, tipe_pertandingan=tipe_pertandingan
        ).model_dump(mode="json", exclude_none=True)
    rows = await ScheduleService.update(
        store, media, schedule_id, changes, photo=foto_url, current_user=current_user
    )
    return UpdateResponse[ScheduleRead](message=ScheduleService.message("diperbarui"), data=rows)


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_schedule(
    schedule_id: int,
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
) -> MessageResponse:
    await ScheduleService.delete(store, schedule_id, current_user=current_user)
    return MessageResponse(message=ScheduleService.message("dihapus"))
