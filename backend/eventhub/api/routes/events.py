"""
Event endpoints: public browsing plus admin create/edit/delete.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from eventhub.api.deps import get_services, require_admin
from eventhub.schemas.booking import BookingWithUser
from eventhub.schemas.event import EventAvailability, EventCreate, EventResponse, EventUpdate
from eventhub.schemas.user import UserPublic
from eventhub.services import Services

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("/", response_model=list[EventResponse])
def list_events_endpoint(
    category_id: Optional[str] = Query(None),
    search: Optional[str] = Query(None, max_length=200),
    services: Services = Depends(get_services),
):
    """List events, optionally filtered by category and a title/description search term."""
    events = services.queries.list_events(category_id=category_id, search=search)
    return [EventResponse.model_validate(e) for e in events]


@router.get("/{event_id}", response_model=EventResponse)
def get_event_endpoint(event_id: str, services: Services = Depends(get_services)):
    return EventResponse.model_validate(services.queries.get_event(event_id))


@router.get("/{event_id}/availability", response_model=EventAvailability)
def get_event_availability(event_id: str, services: Services = Depends(get_services)):
    """Capacity, tickets held by non-cancelled bookings, and what is left."""
    return services.queries.get_event_availability(event_id)


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event_endpoint(
    event_data: EventCreate,
    admin: UserPublic = Depends(require_admin),
    services: Services = Depends(get_services),
):
    """Create a new event owned by the calling admin."""
    event = services.events.create_event(event_data, created_by=admin.id)
    return EventResponse.model_validate(event)


@router.patch("/{event_id}", response_model=EventResponse)
def update_event_endpoint(
    event_id: str,
    patch: EventUpdate,
    admin: UserPublic = Depends(require_admin),
    services: Services = Depends(get_services),
):
    """Partial update. Capacity cannot drop below the tickets already booked (409)."""
    return EventResponse.model_validate(services.events.update_event(event_id, patch))


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event_endpoint(
    event_id: str,
    admin: UserPublic = Depends(require_admin),
    services: Services = Depends(get_services),
):
    services.events.delete_event(event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{event_id}/bookings", response_model=list[BookingWithUser])
def list_event_bookings(
    event_id: str,
    admin: UserPublic = Depends(require_admin),
    services: Services = Depends(get_services),
):
    """All bookings for an event with the booking users' public profiles."""
    return services.queries.get_event_bookings(event_id)
