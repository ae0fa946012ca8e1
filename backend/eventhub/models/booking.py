"""
Booking record representing a user's tickets for an event.

Key design decisions:
- Status field allows cancellation without deleting records
- number_of_tickets allows multi-ticket bookings in one call
- `pending` is a valid status but no operation moves a booking into or out of it
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Booking:
    id: str
    event_id: str
    user_id: str
    number_of_tickets: int
    total_amount: float
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    @property
    def holds_capacity(self) -> bool:
        return self.status != BookingStatus.CANCELLED
