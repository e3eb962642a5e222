"""
Player endpoints.

Create and update accept ``multipart/form-data`` so a photo can be
sent in the ``foto_url`` file field alongside the player fields; update
also takes a plain JSON object.
Listing is public; every mutating route requires a bearer token.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile, status

from academy_api.app.api.dependencies import get_media_uploader, get_record_store, read_json_changes
from academy_api.app.core.security import get_current_user
from academy_api.app.schemas.common import MessageResponse, PageEnvelope, UpdateResponse
from academy_api.app.schemas.player import PlayerCreate, PlayerRead, PlayerUpdate
from academy_api.app.services.player_service import PlayerService


router = APIRouter()


@router.post("", response_model=PlayerRead, status_code=status.HTTP_201_CREATED)
async def create_player(
    nama: str = Form(...),
    posisi: Optional[str] = Form(None),
    tanggal_lahir: Optional[date] = Form(None),
    minutes_play: int = Form(0, ge=0),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> PlayerRead:
    """Register a player, uploading the photo first when one is attached."""
    data = PlayerCreate(nama=nama, posisi=posisi, tanggal_lahir=tanggal_lahir, minutes_play=minutes_play)
    return await PlayerService.create(
        store, media, data.model_dump(mode="json"), photo=foto_url, current_user=current_user
    )


@router.get("", response_model=PageEnvelope[PlayerRead])
async def list_players(
    page: int = Query(1),
    page_size: int = Query(10, alias="pageSize"),
    nama: Optional[str] = Query(None),
    tanggal: Optional[date] = Query(None),
    store=Depends(get_record_store),
) -> PageEnvelope:
    """List players, newest first.

    - **nama**: case-insensitive substring of the player's name.
    - **tanggal**: exact birth date (``YYYY-MM-DD``).
    """
    return await PlayerService.list_players(store, page=page, page_size=page_size, nama=nama, tanggal=tanggal)


@router.put("/{player_id}", response_model=UpdateResponse[PlayerRead])
async def update_player(
    player_id: int,
    request: Request,
    nama: Optional[str] = Form(None),
    posisi: Optional[str] = Form(None),
    tanggal_lahir: Optional[date] = Form(None),
    minutes_play: Optional[int] = Form(None, ge=0),
    foto_url: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
    media=Depends(get_media_uploader),
) -> UpdateResponse:
    """Partially update a player; omitted fields keep their stored value.

    Accepts the same fields as a JSON object when no photo is sent.
    """
    changes = await read_json_changes(request, PlayerUpdate)
    if changes is None:
        changes = PlayerUpdate(
            nama=nama, posisi=posisi, tanggal_lahir=tanggal_lahir, minutes_play=minutes_play
        ).model_dump(mode="json", exclude_none=True)
    rows = await PlayerService.update(
        store, media, player_id, changes, photo=foto_url, current_user=current_user
    )
    return UpdateResponse[PlayerRead](message=PlayerService.message("diperbarui"), data=rows)


@router.delete("/{player_id}", response_model=MessageResponse)
async def delete_player(
    player_id: int,
    current_user: dict = Depends(get_current_user),
    store=Depends(get_record_store),
) -> MessageResponse:
    await PlayerService.delete(store, player_id, current_user=current_user)
    return MessageResponse(message=PlayerService.message("dihapus"))
