from fastapi import APIRouter, Depends

from eventhub.api.deps import get_current_user, get_services
from eventhub.core.errors import NotFoundError
from eventhub.schemas.notification import MarkAllReadResponse, NotificationResponse
from eventhub.schemas.user import UserPublic
from eventhub.services import Services

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/", response_model=list[NotificationResponse])
def list_notifications(
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    """The calling user's notifications, newest first."""
    notifications = services.queries.get_user_notifications(user.id)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    return MarkAllReadResponse(updated=services.queries.mark_all_notifications_read(user.id))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: str,
    user: UserPublic = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    notification = services.queries.get_notification(notification_id)
    # Someone else's notification is reported as missing
    if notification.user_id != user.id:
        raise NotFoundError("Notification", notification_id)
    return NotificationResponse.model_validate(services.queries.mark_notification_read(notification_id))
