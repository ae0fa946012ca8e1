from eventhub.models.booking import Booking, BookingStatus
from eventhub.models.category import Category
from eventhub.models.event import Event
from eventhub.models.notification import Notification, NotificationType
from eventhub.models.user import User, UserRole

__all__ = [
    "Booking", "BookingStatus",
    "Category",
    "Event",
    "Notification", "NotificationType",
    "User", "UserRole",
]
