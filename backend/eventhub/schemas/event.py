"""
Pydantic schemas for event-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field("", max_length=5000)
    date: datetime
    location: str = Field("", max_length=255)
    image_url: str = Field("", max_length=500)
    capacity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)
    category_id: str


class EventUpdate(BaseModel):
    """Partial update; only fields that are set are applied. Unknown fields are rejected."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    date: Optional[datetime] = None
    location: Optional[str] = Field(None, max_length=255)
    image_url: Optional[str] = Field(None, max_length=500)
    capacity: Optional[int] = Field(None, gt=0)
    price: Optional[float] = Field(None, ge=0)
    category_id: Optional[str] = None

    model_config = {"extra": "forbid"}


class EventResponse(BaseModel):
    id: str
    title: str
    description: str
    date: datetime
    location: str
    image_url: str
    capacity: int
    price: float
    category_id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EventAvailability(BaseModel):
    event_id: str
    capacity: int
    booked: int
    remaining: int
