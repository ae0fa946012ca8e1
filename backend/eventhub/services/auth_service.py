"""
Mock authentication: email/password lookup against the directory store.

There are no tokens or sessions. Callers identify themselves by user id
(see the USER_HEADER setting); this service only resolves that id.
"""

import hmac
import threading
from datetime import datetime, timezone

from eventhub.core.errors import AuthenticationError, DuplicateEmailError, NotFoundError
from eventhub.core.logging import get_logger
from eventhub.models import User, UserRole
from eventhub.schemas.user import UserPublic, to_public
from eventhub.stores.interfaces import Collection, DirectoryStore

logger = get_logger(__name__)


class AuthService:
    def __init__(self, store: DirectoryStore) -> None:
        self._store = store
        # Email uniqueness is check-then-act across the whole users collection
        self._register_lock = threading.Lock()

    def _find_by_email(self, email: str):
        email = email.lower()
        matches = self._store.find_all(Collection.USERS, lambda u: u.email.lower() == email)
        return matches[0] if matches else None

    def login(self, email: str, password: str) -> UserPublic:
        """
        Check credentials and return the user's public profile.
        Raises AuthenticationError for an unknown email or a wrong password.
        """
        user = self._find_by_email(email)
        if user is None or not hmac.compare_digest(user.password.encode(), password.encode()):
            logger.warning("login_failed", email=email)
            raise AuthenticationError()

        logger.info("user_logged_in", user_id=user.id)
        return to_public(user)

    def register(self, name: str, email: str, password: str) -> UserPublic:
        """Register a customer account. Raises DuplicateEmailError if the email is taken."""
        with self._register_lock:
            if self._find_by_email(email) is not None:
                logger.warning("registration_failed", reason="email_exists", email=email)
                raise DuplicateEmailError(email)

            user = User(
                id=self._store.next_id(Collection.USERS),
                name=name,
                email=email,
                password=password,
                role=UserRole.CUSTOMER,
                created_at=datetime.now(timezone.utc),
            )
            self._store.insert(Collection.USERS, user)

        logger.info("user_registered", user_id=user.id, email=user.email)
        return to_public(user)

    def get_user(self, user_id: str) -> UserPublic:
        user = self._store.find_by_id(Collection.USERS, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return to_public(user)
