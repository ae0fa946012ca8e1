"""
Booking endpoints with capacity-checked ticket reservation.

Handlers are plain `def`, so FastAPI runs them in its threadpool; concurrent
bookings for one event are serialised inside BookingService.
"""

from fastapi import APIRouter, Depends, status

from eventhub.api.deps import get_current_user, get_services
from eventhub.core.errors import PermissionDeniedError
from eventhub.schemas.booking import BookingCreate, BookingResponse, BookingWithEvent
from eventhub.schemas.user import UserPublic
from eventhub.services import Services

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking_data: BookingCreate,
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """
    Book tickets for an event.

    Returns 409 if the event does not have enough tickets left and 404 if it
    does not exist.
    """
    booking = services.bookings.create_booking(
        booking_data.event_id, user.id, booking_data.number_of_tickets
    )
    return BookingResponse.model_validate(booking)


@router.get("/", response_model=list[BookingWithEvent])
def list_user_bookings(
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """Get all bookings for the calling user, with their events."""
    return services.queries.get_user_bookings(user.id)


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: str,
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """Cancel a booking and free its tickets. Cancelling twice is not an error."""
    booking = services.queries.get_booking(booking_id)
    if booking.user_id != user.id and not user.is_admin:
        raise PermissionDeniedError("Cannot cancel another user's booking")
    return BookingResponse.model_validate(services.bookings.cancel_booking(booking_id))
