from fastapi import APIRouter, Depends, Query

from eventhub.api.deps import get_services, require_admin
from eventhub.schemas.analytics import AnalyticsResponse, Timeframe
from eventhub.schemas.user import UserPublic
from eventhub.services import Services

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/events", response_model=AnalyticsResponse)
def event_analytics(
    timeframe: Timeframe = Query(Timeframe.MONTH),
    admin: UserPublic = Depends(require_admin),
    services: Services = Depends(get_services),
):
    """Events (by date) and bookings (by creation time) per day or month of the current period."""
    return services.analytics.event_analytics(timeframe)
