"""
Errors raised by the SpaceTraders API client.
"""

from typing import Any, Optional, TYPE_CHECKING

from models.envelope import ErrorInfo

if TYPE_CHECKING:
    from models.agent_data import RegistrationData


class ApiError(Exception):
    """Base class for every error the client raises."""


class NetworkError(ApiError):
    """The request never produced a response (connection, DNS, TLS, timeout)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Networking error while accessing the SpaceTraders API: {cause}")


class MissingTokenError(ApiError):
    """No auth token is available to build a client."""

    def __init__(self, detail: str = "missing auth token"):
        super().__init__(f"Cannot access the SpaceTraders API: {detail}.")


class BadRequestError(ApiError):
    """The API answered with a well-formed error envelope."""

    def __init__(self, error: ErrorInfo, status_code: Optional[int] = None):
        self.error = error
        self.status_code = status_code
        super().__init__(f"The SpaceTraders API rejected the request: [{error.code}] {error.message}")

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class DecodeError(ApiError):
    """The response body matched neither the data nor the error shape."""

    def __init__(self, detail: str, status_code: Optional[int] = None, body: Any = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Could not decode SpaceTraders API response (status {status_code}): {detail}")


class InvalidInputError(ApiError, ValueError):
    """A caller-supplied argument failed validation before any request was sent."""


class TokenPersistError(ApiError):
    """
    Registration succeeded but the new token could not be saved.

    The registration payload is attached so the token is not lost.
    """

    def __init__(self, registration: 'RegistrationData', cause: Exception):
        self.registration = registration
        self.cause = cause
        super().__init__(
            f"Registered agent {registration.agent.symbol} but failed to save its token: {cause}"
        )
