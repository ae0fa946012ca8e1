"""
FastAPI dependencies: service lookup and mock identity.

The caller's identity is the user id sent in the USER_HEADER header.
It is trusted as-is; there is no real authentication.
"""

from fastapi import Depends, Request

from eventhub.core.errors import AuthenticationError, NotFoundError, PermissionDeniedError
from eventhub.schemas.user import UserPublic
from eventhub.services import Services


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_current_user(request: Request, services: Services = Depends(get_services)) -> UserPublic:
    header = request.app.state.settings.USER_HEADER
    user_id = request.headers.get(header)
    if not user_id:
        raise AuthenticationError(f"Missing {header} header")
    try:
        return services.auth.get_user(user_id)
    except NotFoundError:
        raise AuthenticationError("Unknown user") from None


def require_admin(user: UserPublic = Depends(get_current_user)) -> UserPublic:
    if not user.is_admin:
        raise PermissionDeniedError("Admin access required")
    return user
