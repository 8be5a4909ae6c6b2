# backend/app/services/room_form.py
"""
Normalization of the room-creation form.

Multipart forms deliver every value as a string, and form encoders drop the
array brackets when a list has a single element. This module turns the raw
field mapping into something the PropertyRoomCreate schema can validate.
"""

import math
from typing import Any, Mapping

NUMERIC_FIELDS = (
    "floorNumber",
    "totalRooms",
    "baseAdult",
    "maxAdult",
    "maxChildren",
    "maxOccupancy",
    "baseRate",
    "extraAdultCharge",
    "childCharge",
    "totalRoomsInProperty",
)

BOOLEAN_FIELDS = ("smokingAllowed", "extraBedAllowed")

DATE_FIELDS = ("availabilityStart", "availabilityEnd")


class FormValidationError(ValueError):
    """A form field could not be coerced to its semantic type."""

    def __init__(self, field: str, value: Any, message: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}: {message}")


def parse_number(field: str, value: Any) -> int | float:
    """
    Convert a form value to a number.

    Integers stay integers ("3" → 3), anything else parseable becomes a float
    ("85.50" → 85.5). Whitespace around the value is ignored.
    """
    if isinstance(value, bool):
        raise FormValidationError(field, value, "expected a number")
    if isinstance(value, (int, float)):
        number = value
    else:
        raw = str(value).strip()
        try:
            number = int(raw)
        except ValueError:
            try:
                number = float(raw)
            except ValueError:
                raise FormValidationError(field, value, f"'{value}' is not a number") from None

    if isinstance(number, float) and not math.isfinite(number):
        raise FormValidationError(field, value, "number must be finite")
    return number


def parse_flag(value: Any) -> bool:
    return value is True or value == "true"


def normalize_amenities(value: Any) -> list[str]:
    if value is None or value == "":
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def normalize_room_form(body: Mapping[str, Any]) -> dict[str, Any]:
    """Return a normalized copy of the form body; `body` itself is left untouched."""
    data = dict(body)

    data["amenities"] = normalize_amenities(data.get("amenities"))

    for field in NUMERIC_FIELDS:
        value = data.get(field)
        if value is None or value == "":
            data.pop(field, None)
            continue
        data[field] = parse_number(field, value)

    # blank <input type="date"> submits ""
    for field in DATE_FIELDS:
        if data.get(field) == "":
            data.pop(field)

    for field in BOOLEAN_FIELDS:
        data[field] = parse_flag(data.get(field))

    return data
