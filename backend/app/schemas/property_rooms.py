# backend/app/schemas/property_rooms.py
# Wire format is camelCase (roomTypeName, floorNumber, ...), attributes are snake_case.

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class PropertyRoomBase(BaseModel):
    room_type_name: str
    floor_number: Optional[int] = None
    total_rooms: Optional[int] = None

    room_type: Optional[str] = None
    bed_type: Optional[str] = None
    room_view: Optional[str] = None

    smoking_allowed: bool = False
    extra_bed_allowed: bool = False
    amenities: list[str] = []

    availability_start: Optional[date] = None
    availability_end: Optional[date] = None

    base_adult: Optional[int] = None
    max_adult: Optional[int] = None
    max_children: Optional[int] = None
    max_occupancy: Optional[int] = None

    base_rate: Optional[float] = None
    extra_adult_charge: Optional[float] = None
    child_charge: Optional[float] = None

    total_rooms_in_property: Optional[int] = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class PropertyRoomCreate(PropertyRoomBase):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def check_availability_window(self):
        start, end = self.availability_start, self.availability_end
        if start and end and end < start:
            raise ValueError("availabilityEnd must not be before availabilityStart")
        return self


class PropertyRoomRead(PropertyRoomBase):
    id: int
    user_id: str
    room_images: list[str] = []
    created_at: Optional[datetime] = None
