"""
Shared create/update/delete flow for the academy resources.

Players, coaches and schedule entries are all handled the same way: an
optional photo is uploaded first, then exactly one insert, update or
delete is issued against the entity's table.  When the database write
after an upload fails, the freshly uploaded asset is removed again so
that retries do not accumulate orphaned photos on the CDN.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from fastapi import UploadFile
from pydantic import BaseModel

from academy_api.app.core.errors import BadRequest, UpstreamFailure
from academy_api.app.services.media_service import UploadedMedia

PHOTO_FIELD = "foto_url"


def has_file(upload: Optional[UploadFile]) -> bool:
    """True when the multipart request actually carried a file."""
    return upload is not None and bool(upload.filename)


class ResourceService:
    """Base class; subclasses set ``table``, ``model`` and ``label``."""

    table: str = ""
    model: Type[BaseModel] = BaseModel
    # Human-readable name used in response messages, e.g. "Pemain".
    label: str = ""

    @classmethod
    def _logger(cls) -> logging.Logger:
        return logging.getLogger(cls.__module__)

    @classmethod
    async def _upload(cls, media, photo: Optional[UploadFile]) -> Optional[UploadedMedia]:
        if not has_file(photo):
            return None
        return await media.upload(photo, subfolder=cls.table)

    @classmethod
    async def create(
        cls,
        store,
        media,
        values: Dict[str, Any],
        photo: Optional[UploadFile] = None,
        current_user: Optional[dict] = None,
    ) -> BaseModel:
        """Upload the optional photo, then insert one row."""
        uploaded = await cls._upload(media, photo)
        row = dict(values)
        row[PHOTO_FIELD] = uploaded.url if uploaded else None
        try:
            created = await store.insert(cls.table, row)
        except UpstreamFailure:
            if uploaded:
                await media.discard(uploaded)
            raise
        cls._logger().info(
            "User %s created %s %s",
            (current_user or {}).get("sub"),
            cls.table,
            created.get("id"),
        )
        return cls.model.model_validate(created)

    @classmethod
    async def update(
        cls,
        store,
        media,
        record_id: int,
        values: Dict[str, Any],
        photo: Optional[UploadFile] = None,
        current_user: Optional[dict] = None,
    ) -> List[BaseModel]:
        """Merge supplied fields (and a new photo) into one row.

        Only keys present in ``values`` with a non-``None`` value are
        written.  An id that matches no row yields an empty list and
        any photo uploaded for it is discarded.
        """
        changes = {key: value for key, value in values.items() if value is not None}
        if not changes and not has_file(photo):
            raise BadRequest("Tidak ada data yang diperbarui")
        uploaded = await cls._upload(media, photo)
        if uploaded:
            changes[PHOTO_FIELD] = uploaded.url
        try:
            rows = await store.update(cls.table, record_id, changes)
        except UpstreamFailure:
            if uploaded:
                await media.discard(uploaded)
            raise
        if uploaded and not rows:
            await media.discard(uploaded)
        cls._logger().info(
            "User %s updated %s %s (%d row(s))",
            (current_user or {}).get("sub"),
            cls.table,
            record_id,
            len(rows),
        )
        return [cls.model.model_validate(row) for row in rows]

    @classmethod
    async def delete(cls, store, record_id: int, current_user: Optional[dict] = None) -> None:
        """Delete by id; a missing id is not an error."""
        await store.delete(cls.table, record_id)
        cls._logger().info(
            "User %s deleted %s %s",
            (current_user or {}).get("sub"),
            cls.table,
            record_id,
        )

    @classmethod
    def message(cls, action: str) -> str:
        return f"{cls.label} berhasil {action}"
