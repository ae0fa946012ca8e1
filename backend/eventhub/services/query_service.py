"""
Read-side lookups over the directory store, plus the notification read flags.

Joined views are built here so that users always leave through the
`UserPublic` projection.
"""

from typing import Optional

from eventhub.core.errors import NotFoundError
from eventhub.core.logging import get_logger
from eventhub.models import Booking, Category, Event, Notification
from eventhub.schemas.booking import BookingResponse, BookingWithEvent, BookingWithUser
from eventhub.schemas.event import EventAvailability, EventResponse
from eventhub.schemas.user import to_public
from eventhub.services.booking_service import committed_tickets
from eventhub.stores.interfaces import Collection, DirectoryStore

logger = get_logger(__name__)


class QueryService:
    def __init__(self, store: DirectoryStore) -> None:
        self._store = store

    # Events

    def list_events(self, category_id: Optional[str] = None, search: Optional[str] = None) -> list[Event]:
        """
        Return events, optionally narrowed to one category and/or to those whose
        title or description contains `search` (case-insensitive).
        """
        needle = search.strip().lower() if search else ""

        def matches(event: Event) -> bool:
            if category_id and event.category_id != category_id:
                return False
            if needle and needle not in event.title.lower() and needle not in event.description.lower():
                return False
            return True

        return self._store.find_all(Collection.EVENTS, matches)

    def get_event(self, event_id: str) -> Event:
        event = self._store.find_by_id(Collection.EVENTS, event_id)
        if event is None:
            raise NotFoundError("Event", event_id)
        return event

    def get_event_availability(self, event_id: str) -> EventAvailability:
        event = self.get_event(event_id)
        booked = committed_tickets(self._store, event_id)
        return EventAvailability(
            event_id=event.id,
            capacity=event.capacity,
            booked=booked,
            remaining=max(event.capacity - booked, 0),
        )

    # Categories

    def list_categories(self) -> list[Category]:
        return self._store.find_all(Collection.CATEGORIES)

    def get_category(self, category_id: str) -> Category:
        category = self._store.find_by_id(Collection.CATEGORIES, category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    # Bookings

    def get_booking(self, booking_id: str) -> Booking:
        booking = self._store.find_by_id(Collection.BOOKINGS, booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    def get_user_bookings(self, user_id: str) -> list[BookingWithEvent]:
        """Bookings made by a user, each with its event (None if the event was deleted)."""
        bookings = self._store.find_all(Collection.BOOKINGS, lambda b: b.user_id == user_id)
        joined = []
        for booking in bookings:
            event = self._store.find_by_id(Collection.EVENTS, booking.event_id)
            joined.append(BookingWithEvent(
                **BookingResponse.model_validate(booking).model_dump(),
                event=EventResponse.model_validate(event) if event is not None else None,
            ))
        return joined

    def get_event_bookings(self, event_id: str) -> list[BookingWithUser]:
        """Bookings for an event, each with the booking user's public profile."""
        bookings = self._store.find_all(Collection.BOOKINGS, lambda b: b.event_id == event_id)
        joined = []
        for booking in bookings:
            user = self._store.find_by_id(Collection.USERS, booking.user_id)
            joined.append(BookingWithUser(
                **BookingResponse.model_validate(booking).model_dump(),
                user=to_public(user) if user is not None else None,
            ))
        return joined

    # Notifications

    def get_user_notifications(self, user_id: str) -> list[Notification]:
        """Newest first. Notifications created in the same instant keep reverse insertion order."""
        notifications = self._store.find_all(Collection.NOTIFICATIONS, lambda n: n.user_id == user_id)
        return sorted(reversed(notifications), key=lambda n: n.created_at, reverse=True)

    def get_notification(self, notification_id: str) -> Notification:
        notification = self._store.find_by_id(Collection.NOTIFICATIONS, notification_id)
        if notification is None:
            raise NotFoundError("Notification", notification_id)
        return notification

    def mark_notification_read(self, notification_id: str) -> Notification:
        notification = self._store.update_by_id(
            Collection.NOTIFICATIONS, notification_id, {"is_read": True}
        )
        if notification is None:
            raise NotFoundError("Notification", notification_id)
        return notification

    def mark_all_notifications_read(self, user_id: str) -> int:
        """Flip every unread notification of the user. Returns how many changed."""
        unread = self._store.find_all(
            Collection.NOTIFICATIONS,
            lambda n: n.user_id == user_id and not n.is_read,
        )
        for notification in unread:
            self._store.update_by_id(Collection.NOTIFICATIONS, notification.id, {"is_read": True})
        if unread:
            logger.info("notifications_marked_read", user_id=user_id, count=len(unread))
        return len(unread)
