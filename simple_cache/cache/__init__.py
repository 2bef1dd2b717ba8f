"""Cache module for Simple-Cache."""

from .errors import (
    AlreadyExistsError,
    AuthenticationError,
    BadRequestError,
    CacheError,
    CacheErrorCode,
    CacheTimeoutError,
    FailedPreconditionError,
    InternalServerError,
    InvalidArgumentError,
    LimitExceededError,
    NotFoundError,
    PermissionDeniedError,
    RequestCancelledError,
    ServerUnavailableError,
    UnknownError,
    UnknownServiceError,
    convert_error,
)
from .client import SimpleCacheClient

__all__ = [
    "AlreadyExistsError",
    "AuthenticationError",
    "BadRequestError",
    "CacheError",
    "CacheErrorCode",
    "CacheTimeoutError",
    "FailedPreconditionError",
    "InternalServerError",
    "InvalidArgumentError",
    "LimitExceededError",
    "NotFoundError",
    "PermissionDeniedError",
    "RequestCancelledError",
    "ServerUnavailableError",
    "SimpleCacheClient",
    "UnknownError",
    "UnknownServiceError",
    "convert_error",
]
