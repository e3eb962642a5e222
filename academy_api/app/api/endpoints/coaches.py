"""
Coach endpoints.  Same shape as the player routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status

from academy_api.app.api.dependencies import get_media_uploader, get_record_store, read_json_changes
from academy_api.app.core.security import get_current_user
from academy_api.app.schemas.coach import CoachCreate, CoachRead, CoachUpdate
from academy_api.app.schemas.common import MessageResponse, PageEnvelope, UpdateResponse
from academy_api.app.services.coach_service import CoachService


router = APIRouter()


@router.post("", response_model=CoachRead, status_code=status.HTTP_201_CREATED)
async def create_coach(
    nama: str = Form(...),
    lisensi: Optional[str] = Form(None),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> CoachRead:
    data = CoachCreate(nama=nama, lisensi=lisensi)
    return await CoachService.create(
        store, media, data.model_dump(mode="json"), photo=foto_url, current_user=current_user
    )


@router.get("", response_model=PageEnvelope[CoachRead])
async def list_coaches(
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
    nama: Optional[str] = Query(None),
    lisensi: Optional[str] = Query(None),
    store=Depends(get_record_store),
) -> PageEnvelope:
    """List coaches, newest first, optionally filtered by name and licence."""
    return await CoachService.list_coaches(store, page=page, page_size=page_size, nama=nama, lisensi=lisensi)


@router.put("/{coach_id}", response_model=UpdateResponse[CoachRead])
async def update_coach(
    coach_id: int,
    request: Request,
    nama: Optional[str] = Form(None),
    lisensi: Optional[str] = Form(None),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> UpdateResponse:
    changes = await read_json_changes(request, CoachUpdate)
    if changes is None:
        changes = CoachUpdate(nama=nama, lisensi=lisensi).model_dump(mode="json", exclude_none=True)
    rows = await CoachService.update(store, media, coach_id, changes, photo=foto_url, current_user=current_user)
    return UpdateResponse[CoachRead](message=CoachService.message("diperbarui"), data=rows)


@router.delete("/{coach_id}", response_model=MessageResponse)
async def delete_coach(
    coach_id: int,
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
) -> MessageResponse:
    await CoachService.delete(store, coach_id, current_user=current_user)
    return MessageResponse(message=CoachService.message("dihapus"))
