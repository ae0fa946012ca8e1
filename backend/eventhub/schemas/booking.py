"""
Pydantic schemas for booking-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from eventhub.models.booking import BookingStatus
from eventhub.schemas.event import EventResponse
from eventhub.schemas.user import UserPublic


class BookingCreate(BaseModel):
    event_id: str
    number_of_tickets: int = Field(default=1, gt=0)


class BookingResponse(BaseModel):
    id: str
    event_id: str
    user_id: str
    number_of_tickets: int
    total_amount: float
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookingWithEvent(BookingResponse):
    """A user's booking joined with its event; `event` is None once the event is deleted."""

    event: Optional[EventResponse] = None


class BookingWithUser(BookingResponse):
    user: Optional[UserPublic] = None
