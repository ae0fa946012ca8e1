"""
Service wiring. Every service shares one store and one set of event locks,
so bookings and capacity edits on the same event are serialised together.
"""

from dataclasses import dataclass

from eventhub.services.analytics_service import AnalyticsService
from eventhub.services.auth_service import AuthService
from eventhub.services.booking_service import BookingService
from eventhub.services.event_locks import EventLocks
from eventhub.services.event_service import EventService
from eventhub.services.query_service import QueryService
from eventhub.stores.interfaces import DirectoryStore


@dataclass
class Services:
    store: DirectoryStore
    bookings: BookingService
    queries: QueryService
    events: EventService
    auth: AuthService
    analytics: AnalyticsService

    @classmethod
    def build(cls, store: DirectoryStore) -> "Services":
        locks = EventLocks()
        return cls(
            store=store,
            bookings=BookingService(store, locks),
            queries=QueryService(store),
            events=EventService(store, locks),
            auth=AuthService(store),
            analytics=AnalyticsService(store),
        )


__all__ = [
    "AnalyticsService", "AuthService", "BookingService", "EventLocks",
    "EventService", "QueryService", "Services",
]
