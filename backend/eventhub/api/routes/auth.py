"""
Mock authentication endpoints: login, register and the current user.
"""

from fastapi import APIRouter, Depends, status

from eventhub.api.deps import get_current_user, get_services
from eventhub.schemas.user import LoginRequest, RegisterRequest, UserPublic
from eventhub.services import Services

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=UserPublic)
def login(login_data: LoginRequest, services: Services = Depends(get_services)):
    """Check credentials. The returned `id` is what clients send as their identity header."""
    return services.auth.login(login_data.email, login_data.password)


@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, services: Services = Depends(get_services)):
    """Register a new customer account."""
    return services.auth.register(user_data.name, user_data.email, user_data.password)


@router.get("/me", response_model=UserPublic)
def me(user: UserPublic = Depends(get_current_user)):
    return user
