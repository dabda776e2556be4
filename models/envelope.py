"""
The outer response envelope shared by every SpaceTraders endpoint.

A body is either ``{"data": ...}`` or ``{"error": {...}}``. There is no
explicit tag, so decoding tries the success shape first and falls back to
the error shape.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from .base import ApiModel

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=ApiModel)

# Decoding a payload against the wrong shape surfaces as one of these.
SHAPE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class EnvelopeError(ValueError):
    """Raised when a body matches neither the data nor the error shape."""


@dataclass(frozen=True)
class ErrorInfo(ApiModel):
    """Shape of errors reported by the SpaceTraders API."""
    message: str
    code: int
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'ErrorInfo':
        """Create ErrorInfo from API response."""
        message = data['message']
        code = data['code']
        extra = data.get('data')
        if not isinstance(message, str):
            raise TypeError("error message must be a string")
        if not isinstance(code, int) or isinstance(code, bool):
            raise TypeError("error code must be an integer")
        if extra is not None and not isinstance(extra, dict):
            raise TypeError("error data must be an object")
        return cls(message=message, code=code, data=extra)


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Tagged union of a successful payload or an API-reported error."""
    data: Optional[T] = None
    error: Optional[ErrorInfo] = None

    def __post_init__(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("ApiResponse must hold exactly one of data or error")

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def from_api_response(cls, body: Any, payload_type: Type[T]) -> 'ApiResponse[T]':
        """
        Decode a response body into the envelope.

        Args:
            body: Parsed JSON body
            payload_type: Model expected under ``data`` on success

        Returns:
            ApiResponse holding either the payload or the error

        Raises:
            EnvelopeError: If the body matches neither shape
        """
        if not isinstance(body, dict):
            raise EnvelopeError(f"Expected a JSON object, got {type(body).__name__}")

        failures = []
        if body.get('data') is not None:
            try:
                return cls(data=payload_type.from_api_response(body['data']))
            except SHAPE_ERRORS as e:
                failures.append(f"data: {e!r}")

        error_body = body.get('error', body)
        try:
            return cls(error=ErrorInfo.from_api_response(error_body))
        except SHAPE_ERRORS as e:
            failures.append(f"error: {e!r}")

        logger.debug("Undecodable %s envelope: %s", payload_type.__name__, failures)
        raise EnvelopeError(
            f"Response matched neither {payload_type.__name__} nor error shape ({'; '.join(failures)})"
        )

    def to_api_response(self) -> Dict[str, Any]:
        if self.error is not None:
            return {'error': self.error.to_api_response()}
        return {'data': self.data.to_api_response()}

    def __str__(self) -> str:
        return str(self.error if self.error is not None else self.data)
