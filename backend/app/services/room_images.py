# backend/app/services/room_images.py

import asyncio
import logging
from typing import Protocol, Sequence

from fastapi import UploadFile

logger = logging.getLogger(__name__)

ROOM_IMAGES_CATEGORY = "room-images"


class ImageStorage(Protocol):
    async def upload(
        self,
        content: bytes,
        original_name: str | None,
        category: str,
        content_type: str | None = None,
    ) -> str: ...


async def _upload_one(storage: ImageStorage, file: UploadFile) -> str:
    content = await file.read()
    return await storage.upload(
        content,
        file.filename,
        ROOM_IMAGES_CATEGORY,
        content_type=file.content_type,
    )


async def upload_room_images(storage: ImageStorage, files: Sequence[UploadFile]) -> list[str]:
    """
    Upload all files concurrently and return their URLs.

    URLs come back in the same order as `files`, whatever order the uploads
    finish in. The first failure propagates.
    """
    if not files:
        return []

    urls = await asyncio.gather(*(_upload_one(storage, f) for f in files))
    logger.info(f"Uploaded {len(urls)} room image(s)")
    return list(urls)
