# backend/app/schemas/common.py

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Response wrapper: the payload lives under `data`."""

    data: T
