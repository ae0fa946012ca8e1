"""
Event administration: create, edit and delete events.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import ValidationError

from eventhub.core.errors import CapacityExceededError, InvalidEventError, NotFoundError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_event_action
from eventhub.models import Event
from eventhub.schemas.event import EventCreate, EventUpdate
from eventhub.services.booking_service import committed_tickets
from eventhub.services.event_locks import EventLocks
from eventhub.stores.interfaces import Collection, DirectoryStore

logger = get_logger(__name__)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with stored timestamps."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


class EventService:
    def __init__(self, store: DirectoryStore, locks: Optional[EventLocks] = None) -> None:
        self._store = store
        self._locks = locks or EventLocks()

    def _require_category(self, category_id: str) -> None:
        if self._store.find_by_id(Collection.CATEGORIES, category_id) is None:
            raise NotFoundError("Category", category_id)

    def create_event(self, data: EventCreate, created_by: str) -> Event:
        """Create a new event owned by `created_by`."""
        self._require_category(data.category_id)

        now = datetime.now(timezone.utc)
        event = Event(
            id=self._store.next_id(Collection.EVENTS),
            title=data.title,
            description=data.description,
            date=as_utc(data.date),
            location=data.location,
            image_url=data.image_url,
            capacity=data.capacity,
            price=data.price,
            category_id=data.category_id,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        self._store.insert(Collection.EVENTS, event)

        record_event_action("create")
        logger.info("event_created", event_id=event.id, title=event.title, capacity=event.capacity)
        return event

    def update_event(self, event_id: str, patch: Union[EventUpdate, dict]) -> Event:
        """
        Apply a partial update.

        Raises:
            NotFoundError: the event, or a newly referenced category, does not exist.
            InvalidEventError: the patch has unknown fields or out-of-range values.
            CapacityExceededError: the new capacity is below the tickets already booked.
        """
        if not isinstance(patch, EventUpdate):
            try:
                patch = EventUpdate.model_validate(patch)
            except ValidationError as exc:
                logger.warning("event_update_rejected", event_id=event_id, errors=exc.error_count())
                raise InvalidEventError(_describe(exc)) from None
        changes = {k: v for k, v in patch.model_dump(exclude_unset=True).items() if v is not None}
        if "date" in changes:
            changes["date"] = as_utc(changes["date"])

        with self._locks.hold(event_id):
            event = self._store.find_by_id(Collection.EVENTS, event_id)
            if event is None:
                raise NotFoundError("Event", event_id)

            if "category_id" in changes:
                self._require_category(changes["category_id"])

            if "capacity" in changes:
                booked = committed_tickets(self._store, event_id)
                if changes["capacity"] < booked:
                    logger.warning(
                        "event_capacity_below_booked",
                        event_id=event_id,
                        capacity=changes["capacity"],
                        booked=booked,
                    )
                    raise CapacityExceededError(
                        event_id,
                        booked,
                        changes["capacity"],
                        message=f"Capacity cannot drop below the {booked} tickets already booked",
                    )

            changes["updated_at"] = datetime.now(timezone.utc)
            event = self._store.update_by_id(Collection.EVENTS, event_id, changes)

        record_event_action("update")
        logger.info("event_updated", event_id=event_id, fields=sorted(changes))
        return event

    def delete_event(self, event_id: str) -> None:
        """Remove the event. Its bookings are kept and show up without an event."""
        with self._locks.hold(event_id):
            if not self._store.remove_by_id(Collection.EVENTS, event_id):
                raise NotFoundError("Event", event_id)

        record_event_action("delete")
        logger.info("event_deleted", event_id=event_id)
