"""Common exceptions for the erp-saved-filters package."""

from enum import Enum
from typing import Optional


class FieldConfigError(ValueError):
    """Raised when a field registry definition is invalid."""

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConditionShapeError(ValueError):
    """Raised when a condition value does not have the shape its operator needs."""

    def __init__(self, message: str, operator: Optional[str] = None) -> None:
        super().__init__(message)
        self.operator = operator


class FailureKind(str, Enum):
    """Classification of persistence failures."""

    NETWORK = "network"
    CORS = "cors"
    SERVER = "server"
    CLIENT = "client"
    OTHER = "other"


class PersistenceError(Exception):
    """Raised when the saved-filters backend call fails."""

    kind = FailureKind.OTHER

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class NetworkError(PersistenceError):
    """Raised when the backend cannot be reached."""

    kind = FailureKind.NETWORK


class CorsBlockedError(PersistenceError):
    """Raised when the response would be blocked by the browser CORS policy."""

    kind = FailureKind.CORS


class ServerError(PersistenceError):
    """Raised when the backend answers with a 5xx status."""

    kind = FailureKind.SERVER


class ClientError(PersistenceError):
    """Raised when the backend rejects the request with a 4xx status."""

    kind = FailureKind.CLIENT
