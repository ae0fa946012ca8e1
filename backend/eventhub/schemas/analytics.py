"""
Pydantic schemas for the admin analytics chart.
"""

from enum import Enum

from pydantic import BaseModel


class Timeframe(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class AnalyticsBucket(BaseModel):
    label: str
    events: int
    bookings: int


class AnalyticsResponse(BaseModel):
    timeframe: Timeframe
    buckets: list[AnalyticsBucket]
