"""Domain errors raised by the services.

Services raise these synchronously at the point of violation; the HTTP layer
maps them to responses in ``eventhub.api.errors``.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NOT_FOUND = "NOT_FOUND"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_BOOKING = "INVALID_BOOKING"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_EVENT = "INVALID_EVENT"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when a referenced entity id does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(ErrorCode.NOT_FOUND, f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class CapacityExceededError(DomainError):
    """Raised when tickets would exceed an event's capacity."""

    def __init__(self, event_id: str, requested: int, available: int, message: str = "") -> None:
        super().__init__(
            ErrorCode.CAPACITY_EXCEEDED,
            message or f"Not enough tickets available. Requested: {requested}, Available: {available}",
        )
        self.event_id = event_id
        self.requested = requested
        self.available = available


class InvalidBookingError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_BOOKING, message)


class AuthenticationError(DomainError):
    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(ErrorCode.AUTHENTICATION_FAILED, message)


class PermissionDeniedError(DomainError):
    def __init__(self, message: str = "Not allowed") -> None:
        super().__init__(ErrorCode.PERMISSION_DENIED, message)


class DuplicateEmailError(DomainError):
    def __init__(self, email: str) -> None:
        super().__init__(ErrorCode.DUPLICATE_EMAIL, "User already exists with this email")
        self.email = email


class InvalidEventError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.INVALID_EVENT, message)
