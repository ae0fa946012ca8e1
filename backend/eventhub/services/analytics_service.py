"""
Time-bucketed counts of events and bookings for the admin dashboard chart.

Timeframes (all relative to `now`, UTC):
  week  - one bucket per day, Sunday to Saturday, labelled "Sun".."Sat"
  month - one bucket per day of the month, labelled "1".."31"
  year  - one bucket per month, labelled "Jan".."Dec"

Events are placed by their `date`, bookings by their `created_at`.
Buckets are half-open [start, end).
"""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from eventhub.schemas.analytics import AnalyticsBucket, AnalyticsResponse, Timeframe
from eventhub.services.event_service import as_utc
from eventhub.stores.interfaces import Collection, DirectoryStore

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def bucket_bounds(timeframe: Timeframe, now: datetime) -> list[tuple[str, datetime, datetime]]:
    """Return (label, start, end) for every bucket of the timeframe containing `now`."""
    today = _midnight(now)

    if timeframe == Timeframe.WEEK:
        # weekday(): Monday=0 .. Sunday=6
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return [
            (WEEKDAY_LABELS[i], start + timedelta(days=i), start + timedelta(days=i + 1))
            for i in range(7)
        ]

    if timeframe == Timeframe.MONTH:
        start = today.replace(day=1)
        days = calendar.monthrange(start.year, start.month)[1]
        return [
            (str(i + 1), start + timedelta(days=i), start + timedelta(days=i + 1))
            for i in range(days)
        ]

    buckets = []
    for month in range(1, 13):
        start = today.replace(month=month, day=1)
        end = start.replace(year=start.year + 1, month=1) if month == 12 else start.replace(month=month + 1)
        buckets.append((MONTH_LABELS[month - 1], start, end))
    return buckets


class AnalyticsService:
    def __init__(self, store: DirectoryStore) -> None:
        self._store = store

    def event_analytics(
        self,
        timeframe: Union[Timeframe, str] = Timeframe.MONTH,
        now: Optional[datetime] = None,
    ) -> AnalyticsResponse:
        timeframe = Timeframe(timeframe)
        now = as_utc(now) if now is not None else datetime.now(timezone.utc)

        event_dates = [as_utc(e.date) for e in self._store.find_all(Collection.EVENTS)]
        booking_dates = [as_utc(b.created_at) for b in self._store.find_all(Collection.BOOKINGS)]

        buckets = [
            AnalyticsBucket(
                label=label,
                events=sum(1 for d in event_dates if start <= d < end),
                bookings=sum(1 for d in booking_dates if start <= d < end),
            )
            for label, start, end in bucket_bounds(timeframe, now)
        ]
        return AnalyticsResponse(timeframe=timeframe, buckets=buckets)
