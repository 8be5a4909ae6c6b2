# backend/app/routers/property_rooms.py
# POST = multipart form (+ up to 5 images), GET = all room types of a user

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from starlette.datastructures import FormData, UploadFile

from ..auth import get_current_user_id
from ..schemas.common import DataEnvelope
from ..schemas.property_rooms import PropertyRoomCreate, PropertyRoomRead
from ..services.property_rooms import PropertyRoomsService, get_property_rooms_service
from ..services.room_form import FormValidationError, normalize_room_form
from ..services.room_images import upload_room_images
from ..services.storage import S3Storage, StorageError, get_optional_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/property/rooms", tags=["Property Rooms"])

ROOM_IMAGES_FIELD = "uploadRoomImages"
MAX_ROOM_IMAGES = 5

_number = {"type": "number"}
_string = {"type": "string"}
_boolean = {"type": "boolean"}

CREATE_ROOM_FORM_SCHEMA = {
    "type": "object",
    "required": ["roomTypeName"],
    "properties": {
        "roomTypeName": _string,
        "floorNumber": _number,
        "totalRooms": _number,
        "roomType": _string,
        "bedType": _string,
        "roomView": _string,
        "smokingAllowed": _boolean,
        "extraBedAllowed": _boolean,
        "amenities": {"type": "array", "items": _string},
        "availabilityStart": {"type": "string", "format": "date"},
        "availabilityEnd": {"type": "string", "format": "date"},
        "baseAdult": _number,
        "maxAdult": _number,
        "maxChildren": _number,
        "maxOccupancy": _number,
        "baseRate": _number,
        "extraAdultCharge": _number,
        "childCharge": _number,
        "totalRoomsInProperty": _number,
        ROOM_IMAGES_FIELD: {
            "type": "array",
            "maxItems": MAX_ROOM_IMAGES,
            "items": {"type": "string", "format": "binary"},
        },
    },
}


# ──────────────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────────────

def split_form(form: FormData) -> tuple[dict[str, Any], list[UploadFile]]:
    """
    Separate plain fields from image files.

    Repeated keys (and `key[]`) become lists, single keys stay strings.
    Files are only accepted under ROOM_IMAGES_FIELD.
    """
    body: dict[str, Any] = {}
    files: list[UploadFile] = []

    for key in form.keys():
        values = form.getlist(key)
        uploads = [v for v in values if isinstance(v, UploadFile)]

        if uploads:
            if key != ROOM_IMAGES_FIELD:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Unexpected file field '{key}'",
                )
            # empty <input type="file"> parts carry no filename
            files.extend(u for u in uploads if u.filename)
            continue

        name = key[:-2] if key.endswith("[]") else key
        value = list(values) if key.endswith("[]") or len(values) > 1 else values[0]

        # `amenities` and `amenities[]` in one form are merged
        if name in body:
            existing = body[name] if isinstance(body[name], list) else [body[name]]
            body[name] = existing + (value if isinstance(value, list) else [value])
        else:
            body[name] = value

    if len(files) > MAX_ROOM_IMAGES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {MAX_ROOM_IMAGES} files allowed in '{ROOM_IMAGES_FIELD}'",
        )

    return body, files


def build_create_dto(body: dict[str, Any]) -> PropertyRoomCreate:
    try:
        return PropertyRoomCreate.model_validate(normalize_room_form(body))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        ) from None
    except FormValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from None


# ──────────────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "",
    response_model=DataEnvelope[PropertyRoomRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a room type for the property",
    responses={status.HTTP_201_CREATED: {"description": "Room created."}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"multipart/form-data": {"schema": CREATE_ROOM_FORM_SCHEMA}},
        }
    },
)
async def create_property_room(
    request: Request,
    user_id: str = Depends(get_current_user_id),
    storage: Optional[S3Storage] = Depends(get_optional_storage),
    service: PropertyRoomsService = Depends(get_property_rooms_service),
):
    async with request.form(max_files=MAX_ROOM_IMAGES * 2) as form:
        body, files = split_form(form)
        data = build_create_dto(body)

        if files and storage is None:
            logger.error("Room images received but S3_BUCKET is not configured")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Image storage is not configured",
            )

        try:
            image_urls = await upload_room_images(storage, files)
        except StorageError as e:
            logger.exception(f"Room image upload failed for user {user_id}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Image upload failed",
            ) from e

    room = await run_in_threadpool(service.create, user_id, data, image_urls)
    return DataEnvelope(data=PropertyRoomRead.model_validate(room))


@router.get(
    "/{user_id}",
    response_model=DataEnvelope[list[PropertyRoomRead]],
    summary="Get all room types for a user",
    responses={status.HTTP_200_OK: {"description": "Rooms fetched."}},
)
def list_property_rooms(
    user_id: str,
    service: PropertyRoomsService = Depends(get_property_rooms_service),
):
    rooms = service.find_all_by_user(user_id)
    return DataEnvelope(data=[PropertyRoomRead.model_validate(r) for r in rooms])
