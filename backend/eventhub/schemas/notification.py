from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from eventhub.models.notification import NotificationType


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    message: str
    type: NotificationType
    is_read: bool
    related_id: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class MarkAllReadResponse(BaseModel):
    updated: int
