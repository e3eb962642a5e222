"""
Photo uploads to Cloudinary.

``CloudinaryMediaUploader`` sends a multipart ``UploadFile`` to the
Cloudinary upload API and returns the hosted URL together with the
asset's ``public_id``.  Uploads are not idempotent: every call creates
a new asset, so callers use :meth:`discard` to remove an asset whose
follow-up database write failed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import UploadFile

from ..core.config import Settings
from ..core.db import run_blocking
from ..core.errors import UpstreamFailure

logger = logging.getLogger(__name__)

# Photos are stored already scaled down; the frontend only shows cards
# and thumbnails.
DEFAULT_TRANSFORMATION = [
    {"width": 800, "height": 800, "crop": "limit"},
    {"quality": "auto", "fetch_format": "auto"},
]


@dataclass(frozen=True)
class UploadedMedia:
    url: str
    public_id: Optional[str] = None


class CloudinaryMediaUploader:
    """Media Upload collaborator backed by the Cloudinary SDK."""

    def __init__(self, folder: str = "akademi", transformation=None) -> None:
        self.folder = folder
        self.transformation = transformation or DEFAULT_TRANSFORMATION

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryMediaUploader":
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )
        logger.info("Cloudinary configured for cloud %s", settings.cloudinary_cloud_name or "<unset>")
        return cls(folder=settings.cloudinary_folder)

    def _folder_for(self, subfolder: str) -> str:
        return f"{self.folder}/{subfolder}" if subfolder else self.folder

    async def upload(self, upload: UploadFile, subfolder: str = "") -> UploadedMedia:
        """Upload ``upload`` and return its secure URL."""
        try:
            result = await run_blocking(
                cloudinary.uploader.upload,
                upload.file,
                folder=self._folder_for(subfolder),
                resource_type="image",
                transformation=self.transformation,
            )
        except CloudinaryError as exc:
            raise UpstreamFailure("media") from exc
        logger.info("Uploaded %s as %s", upload.filename, result.get("public_id"))
        return UploadedMedia(url=result["secure_url"], public_id=result.get("public_id"))

    async def discard(self, media: UploadedMedia) -> None:
        """Remove an uploaded asset; failures are logged, not raised."""
        if not media.public_id:
            return
        try:
            await run_blocking(cloudinary.uploader.destroy, media.public_id, invalidate=True)
        except CloudinaryError:
            logger.exception("Could not remove orphaned asset %s", media.public_id)
        else:
            logger.info("Removed orphaned asset %s", media.public_id)
