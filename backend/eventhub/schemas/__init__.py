from eventhub.schemas.analytics import AnalyticsBucket, AnalyticsResponse, Timeframe
from eventhub.schemas.booking import BookingCreate, BookingResponse, BookingWithEvent, BookingWithUser
from eventhub.schemas.category import CategoryResponse
from eventhub.schemas.event import EventAvailability, EventCreate, EventResponse, EventUpdate
from eventhub.schemas.notification import MarkAllReadResponse, NotificationResponse
from eventhub.schemas.user import LoginRequest, RegisterRequest, UserPublic, to_public

__all__ = [
    "AnalyticsBucket", "AnalyticsResponse", "Timeframe",
    "BookingCreate", "BookingResponse", "BookingWithEvent", "BookingWithUser",
    "CategoryResponse",
    "EventAvailability", "EventCreate", "EventResponse", "EventUpdate",
    "MarkAllReadResponse", "NotificationResponse",
    "LoginRequest", "RegisterRequest", "UserPublic", "to_public",
]
