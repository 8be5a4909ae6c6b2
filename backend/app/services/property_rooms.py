# backend/app/services/property_rooms.py
"""
Persistence for property rooms.

The router hands over an already validated PropertyRoomCreate plus the image
URLs returned by storage; this service only stores and lists rows.
"""

import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import PropertyRooms as DBPropertyRoom
from ..schemas.property_rooms import PropertyRoomCreate
from .events import emit_event

logger = logging.getLogger(__name__)


class PropertyRoomsService:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: str,
        data: PropertyRoomCreate,
        image_urls: list[str],
    ) -> DBPropertyRoom:
        obj = DBPropertyRoom(
            user_id=user_id,
            room_images=list(image_urls),
            **data.model_dump(),
        )
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)

        logger.info(f"Property room {obj.id} created for user {user_id}")

        emit_event("property_room_created", {
            "room_id": obj.id,
            "user_id": user_id,
            "images": len(obj.room_images),
        })
        return obj

    def find_all_by_user(self, user_id: str) -> list[DBPropertyRoom]:
        return (
            self.db.query(DBPropertyRoom)
            .filter(DBPropertyRoom.user_id == user_id)
            .order_by(DBPropertyRoom.id)
            .all()
        )


def get_property_rooms_service(db: Session = Depends(get_db)) -> PropertyRoomsService:
    return PropertyRoomsService(db)
