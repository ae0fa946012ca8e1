from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class NotificationType(str, Enum):
    BOOKING = "booking"
    CANCELLATION = "cancellation"
    UPDATE = "update"


@dataclass(frozen=True)
class Notification:
    id: str
    user_id: str
    message: str
    type: NotificationType
    is_read: bool
    created_at: datetime
    related_id: Optional[str] = None
