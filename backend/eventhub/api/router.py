"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter

from eventhub.api.routes import analytics, auth, bookings, categories, events, notifications

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(events.router)
api_router.include_router(categories.router)
api_router.include_router(bookings.router)
api_router.include_router(notifications.router)
api_router.include_router(analytics.router)
