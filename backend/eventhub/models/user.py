"""
User record. The password never leaves the service layer; see
``eventhub.schemas.user.UserPublic`` for the projection returned to callers.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    password: str
    role: UserRole
    created_at: datetime
