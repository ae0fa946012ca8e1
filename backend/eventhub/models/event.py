"""
Event record.

`capacity` is a hard ceiling on the tickets held by non-cancelled bookings
for the event; see BookingService for where that is enforced.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Event:
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
