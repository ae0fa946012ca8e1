"""
Booking service with capacity-checked ticket reservation.

CAPACITY RULE
=============

For any event, the tickets held by its non-cancelled bookings never exceed
`event.capacity`. There is no denormalised "available" counter: committed
tickets are summed from the bookings on every check, so cancelling a booking
frees its tickets without any extra bookkeeping.

The check and the insert run under the event's lock (see EventLocks), so two
concurrent requests cannot both pass the check against the same remaining
tickets. A call rejected with CapacityExceededError leaves no trace in the store.
"""

from datetime import datetime, timezone
from typing import Optional

from eventhub.core.errors import CapacityExceededError, InvalidBookingError, NotFoundError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import (
    booking_latency,
    record_booking_attempt,
    record_cancellation,
    record_notification,
)
from eventhub.models import Booking, BookingStatus, Event, Notification, NotificationType
from eventhub.services.event_locks import EventLocks
from eventhub.stores.interfaces import Collection, DirectoryStore

logger = get_logger(__name__)


def committed_tickets(store: DirectoryStore, event_id: str) -> int:
    """Sum of tickets over the event's non-cancelled bookings."""
    bookings = store.find_all(
        Collection.BOOKINGS,
        lambda b: b.event_id == event_id and b.holds_capacity,
    )
    return sum(b.number_of_tickets for b in bookings)


def _validate_ticket_count(number_of_tickets) -> None:
    # bool is an int subclass; True tickets is not a count
    if isinstance(number_of_tickets, bool) or not isinstance(number_of_tickets, int):
        raise InvalidBookingError("number_of_tickets must be an integer")
    if number_of_tickets <= 0:
        raise InvalidBookingError("number_of_tickets must be positive")


class BookingService:
    """Creates and cancels bookings; notifies the event owner of new bookings."""

    def __init__(self, store: DirectoryStore, locks: Optional[EventLocks] = None) -> None:
        self._store = store
        self._locks = locks or EventLocks()

    def create_booking(self, event_id: str, user_id: str, number_of_tickets: int) -> Booking:
        """
        Book tickets for an event.

        Raises:
            InvalidBookingError: number_of_tickets is not a positive integer.
            NotFoundError: the event does not exist.
            CapacityExceededError: the event cannot hold the extra tickets.
        """
        try:
            _validate_ticket_count(number_of_tickets)
        except InvalidBookingError:
            record_booking_attempt("invalid")
            raise

        # Unknown ids never reach the lock registry
        if self._store.find_by_id(Collection.EVENTS, event_id) is None:
            record_booking_attempt("not_found")
            raise NotFoundError("Event", event_id)

        with booking_latency.time(), self._locks.hold(event_id):
            # Re-read under the lock; the event may have been edited or deleted
            event: Optional[Event] = self._store.find_by_id(Collection.EVENTS, event_id)
            if event is None:
                record_booking_attempt("not_found")
                raise NotFoundError("Event", event_id)

            committed = committed_tickets(self._store, event_id)
            if committed + number_of_tickets > event.capacity:
                available = max(event.capacity - committed, 0)
                logger.warning(
                    "booking_rejected_capacity",
                    event_id=event_id,
                    user_id=user_id,
                    requested=number_of_tickets,
                    available=available,
                )
                record_booking_attempt("capacity_exceeded")
                raise CapacityExceededError(event_id, number_of_tickets, available)

            now = datetime.now(timezone.utc)
            booking = Booking(
                id=self._store.next_id(Collection.BOOKINGS),
                event_id=event_id,
                user_id=user_id,
                number_of_tickets=number_of_tickets,
                total_amount=event.price * number_of_tickets,
                status=BookingStatus.CONFIRMED,
                created_at=now,
                updated_at=now,
            )
            self._store.insert(Collection.BOOKINGS, booking)
            self._notify_owner(event, booking)

        record_booking_attempt("success")
        logger.info(
            "booking_created",
            booking_id=booking.id,
            user_id=user_id,
            event_id=event_id,
            tickets=number_of_tickets,
            total_amount=booking.total_amount,
        )
        return booking

    def _notify_owner(self, event: Event, booking: Booking) -> Notification:
        notification = Notification(
            id=self._store.next_id(Collection.NOTIFICATIONS),
            user_id=event.created_by,
            message=f'New booking for event "{event.title}"',
            type=NotificationType.BOOKING,
            is_read=False,
            related_id=booking.id,
            created_at=booking.created_at,
        )
        self._store.insert(Collection.NOTIFICATIONS, notification)
        record_notification(notification.type.value)
        return notification

    def cancel_booking(self, booking_id: str) -> Booking:
        """
        Cancel a booking, freeing its tickets.

        Cancelling an already-cancelled booking succeeds and changes nothing.

        Raises:
            NotFoundError: the booking does not exist.
        """
        booking: Optional[Booking] = self._store.find_by_id(Collection.BOOKINGS, booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)

        with self._locks.hold(booking.event_id):
            booking = self._store.find_by_id(Collection.BOOKINGS, booking_id)
            if booking.status == BookingStatus.CANCELLED:
                record_cancellation(already_cancelled=True)
                logger.info("booking_already_cancelled", booking_id=booking_id)
                return booking

            booking = self._store.update_by_id(
                Collection.BOOKINGS,
                booking_id,
                {"status": BookingStatus.CANCELLED, "updated_at": datetime.now(timezone.utc)},
            )

        record_cancellation(already_cancelled=False)
        logger.info(
            "booking_cancelled",
            booking_id=booking.id,
            user_id=booking.user_id,
            event_id=booking.event_id,
            tickets_released=booking.number_of_tickets,
        )
        return booking
