"""
SpaceTraders API client and its error types.
"""

from .client import ApiClient, system_symbol_from_waypoint
from .errors import (
    ApiError,
    BadRequestError,
    DecodeError,
    InvalidInputError,
    MissingTokenError,
    NetworkError,
    TokenPersistError,
)

__all__ = [
    'ApiClient', 'system_symbol_from_waypoint',
    'ApiError', 'BadRequestError', 'DecodeError', 'InvalidInputError',
    'MissingTokenError', 'NetworkError', 'TokenPersistError',
]
