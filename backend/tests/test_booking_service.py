"""
Unit tests for BookingService: capacity rule, cancellation and notifications.
"""

import pytest

from eventhub.core.errors import CapacityExceededError, InvalidBookingError, NotFoundError
from eventhub.models import BookingStatus, NotificationType
from eventhub.services.booking_service import BookingService
from eventhub.services.event_locks import EventLocks
from eventhub.stores import Collection


def test_create_booking(services, store, test_event, customer):
    booking = services.bookings.create_booking(test_event.id, customer.id, 3)

    assert booking.status == BookingStatus.CONFIRMED
    assert booking.number_of_tickets == 3
    assert booking.total_amount == test_event.price * 3
    assert booking.created_at == booking.updated_at
    assert store.find_by_id(Collection.BOOKINGS, booking.id) == booking


def test_create_booking_notifies_event_owner(services, store, test_event, customer, admin):
    booking = services.bookings.create_booking(test_event.id, customer.id, 1)

    notifications = store.find_all(Collection.NOTIFICATIONS)
    assert len(notifications) == 1
    notification = notifications[0]
    assert notification.user_id == admin.id
    assert notification.type == NotificationType.BOOKING
    assert notification.related_id == booking.id
    assert notification.is_read is False
    assert test_event.title in notification.message


def test_create_booking_unknown_event(services, store, customer):
    with pytest.raises(NotFoundError):
        services.bookings.create_booking("missing", customer.id, 1)
    assert store.find_all(Collection.BOOKINGS) == []


def test_unknown_events_leave_no_locks_behind(store, customer):
    locks = EventLocks()
    bookings = BookingService(store, locks)

    for i in range(1000):
        with pytest.raises(NotFoundError):
            bookings.create_booking(f"bogus-{i}", customer.id, 1)

    assert len(locks) == 0


def test_event_lock_lives_only_while_held(store, test_event, customer):
    locks = EventLocks()
    with locks.hold(test_event.id):
        assert len(locks) == 1
    assert len(locks) == 0

    BookingService(store, locks).create_booking(test_event.id, customer.id, 1)
    assert len(locks) == 0


@pytest.mark.parametrize("tickets", [0, -1, 1.5, "2", True, None])
def test_create_booking_rejects_invalid_ticket_counts(services, store, test_event, customer, tickets):
    with pytest.raises(InvalidBookingError):
        services.bookings.create_booking(test_event.id, customer.id, tickets)
    assert store.find_all(Collection.BOOKINGS) == []


def test_booking_up_to_exact_capacity(services, small_event, customer):
    booking = services.bookings.create_booking(small_event.id, customer.id, 2)
    assert booking.number_of_tickets == small_event.capacity


def test_capacity_exceeded_leaves_no_trace(services, store, small_event, customer, other_customer):
    services.bookings.create_booking(small_event.id, customer.id, 2)
    bookings_before = store.find_all(Collection.BOOKINGS)
    notifications_before = store.find_all(Collection.NOTIFICATIONS)

    with pytest.raises(CapacityExceededError) as exc_info:
        services.bookings.create_booking(small_event.id, other_customer.id, 1)

    assert exc_info.value.available == 0
    assert exc_info.value.requested == 1
    assert store.find_all(Collection.BOOKINGS) == bookings_before
    assert store.find_all(Collection.NOTIFICATIONS) == notifications_before


def test_capacity_never_exceeded_over_many_bookings(services, store, make_event, customer):
    event = make_event(capacity=10)
    requests = [3, 4, 5, 2, 1, 1, 6, 1]
    for tickets in requests:
        try:
            services.bookings.create_booking(event.id, customer.id, tickets)
        except CapacityExceededError:
            pass
        held = sum(
            b.number_of_tickets
            for b in store.find_all(Collection.BOOKINGS)
            if b.event_id == event.id and b.status != BookingStatus.CANCELLED
        )
        assert held <= event.capacity

    # 3 + 4 + 2 + 1 = 10, then everything else is rejected
    assert held == 10


def test_cancel_booking(services, test_event, customer):
    booking = services.bookings.create_booking(test_event.id, customer.id, 1)

    cancelled = services.bookings.cancel_booking(booking.id)

    assert cancelled.status == BookingStatus.CANCELLED
    assert cancelled.updated_at >= booking.updated_at
    assert cancelled.created_at == booking.created_at


def test_cancel_twice_is_a_noop(services, store, test_event, customer):
    booking = services.bookings.create_booking(test_event.id, customer.id, 1)

    first = services.bookings.cancel_booking(booking.id)
    second = services.bookings.cancel_booking(booking.id)

    assert second.status == BookingStatus.CANCELLED
    assert second == first
    assert store.find_by_id(Collection.BOOKINGS, booking.id) == first


def test_cancel_unknown_booking(services):
    with pytest.raises(NotFoundError):
        services.bookings.cancel_booking("missing")


def test_cancellation_frees_capacity(services, small_event, customer, other_customer):
    """Capacity 2: fill it, get rejected, cancel, then book again."""
    booking_a = services.bookings.create_booking(small_event.id, customer.id, 2)
    assert booking_a.total_amount == 2 * small_event.price

    with pytest.raises(CapacityExceededError):
        services.bookings.create_booking(small_event.id, other_customer.id, 1)

    cancelled = services.bookings.cancel_booking(booking_a.id)
    assert cancelled.status == BookingStatus.CANCELLED

    booking_b = services.bookings.create_booking(small_event.id, other_customer.id, 1)
    assert booking_b.status == BookingStatus.CONFIRMED


def test_booking_does_not_validate_user(services, test_event):
    booking = services.bookings.create_booking(test_event.id, "ghost", 1)
    assert booking.user_id == "ghost"
