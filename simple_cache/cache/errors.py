"""
Cache Error Definitions

This module defines the error codes and exception types shared by the
validators, the response model and the client.

Validation problems are raised as InvalidArgumentError before any transport
call. Failures reported by the transport arrive as TransportError and are
mapped onto the CacheError subclass matching their status by convert_error().
"""

from enum import Enum
from typing import Optional

from ..transport.base import StatusCode, TransportError


class CacheErrorCode(Enum):
    """Enumeration of error codes surfaced to callers."""
    INVALID_ARGUMENT_ERROR = "INVALID_ARGUMENT_ERROR"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
    ALREADY_EXISTS_ERROR = "ALREADY_EXISTS_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    FAILED_PRECONDITION_ERROR = "FAILED_PRECONDITION_ERROR"
    LIMIT_EXCEEDED_ERROR = "LIMIT_EXCEEDED_ERROR"
    CANCELLED_ERROR = "CANCELLED_ERROR"
    SERVER_UNAVAILABLE = "SERVER_UNAVAILABLE"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    BAD_REQUEST_ERROR = "BAD_REQUEST_ERROR"
    UNKNOWN_SERVICE_ERROR = "UNKNOWN_SERVICE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class CacheError(Exception):
    """
    Base class for all errors produced by the client.

    Attributes:
        error_code: The CacheErrorCode identifying the failure
        message: Human-readable description
        transport_details: Raw details reported by the transport, if any
    """

    error_code = CacheErrorCode.UNKNOWN_ERROR
    message_wrapper = "Unknown error has occurred"

    def __init__(self, message: str, transport_details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.transport_details = transport_details

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(CacheError):
    """Raised when a request argument fails validation."""
    error_code = CacheErrorCode.INVALID_ARGUMENT_ERROR
    message_wrapper = "Invalid argument passed to cache client"


class NotFoundError(CacheError):
    """The requested cache does not exist."""
    error_code = CacheErrorCode.NOT_FOUND_ERROR
    message_wrapper = "A cache with the specified name does not exist"


class AlreadyExistsError(CacheError):
    """A cache with the requested name already exists."""
    error_code = CacheErrorCode.ALREADY_EXISTS_ERROR
    message_wrapper = "A cache with the specified name already exists"


class AuthenticationError(CacheError):
    """The auth token was rejected."""
    error_code = CacheErrorCode.AUTHENTICATION_ERROR
    message_wrapper = "Invalid authentication credentials to connect to cache service"


class PermissionDeniedError(CacheError):
    """The auth token lacks permission for the operation."""
    error_code = CacheErrorCode.PERMISSION_ERROR
    message_wrapper = "Insufficient permissions to perform an operation on a cache"


class CacheTimeoutError(CacheError):
    """The request did not complete within the configured timeout."""
    error_code = CacheErrorCode.TIMEOUT_ERROR
    message_wrapper = "The client's configured timeout was exceeded"


class FailedPreconditionError(CacheError):
    """The system is not in a state required for the operation."""
    error_code = CacheErrorCode.FAILED_PRECONDITION_ERROR
    message_wrapper = "System is not in a state required for the operation's execution"


class LimitExceededError(CacheError):
    """A service limit was exceeded."""
    error_code = CacheErrorCode.LIMIT_EXCEEDED_ERROR
    message_wrapper = "Request rate, bandwidth, or object size exceeded the limits for this account"


class RequestCancelledError(CacheError):
    """The request was cancelled before completion."""
    error_code = CacheErrorCode.CANCELLED_ERROR
    message_wrapper = "The request was cancelled by the server"


class ServerUnavailableError(CacheError):
    """The service could not be reached."""
    error_code = CacheErrorCode.SERVER_UNAVAILABLE
    message_wrapper = "The server was unable to handle the request"


class InternalServerError(CacheError):
    """The service failed while handling the request."""
    error_code = CacheErrorCode.INTERNAL_SERVER_ERROR
    message_wrapper = "An unexpected error occurred while trying to fulfill the request"


class BadRequestError(CacheError):
    """The service considered the request malformed."""
    error_code = CacheErrorCode.BAD_REQUEST_ERROR
    message_wrapper = "The request was invalid"


class UnknownServiceError(CacheError):
    """The service returned a status the client does not recognise."""
    error_code = CacheErrorCode.UNKNOWN_SERVICE_ERROR
    message_wrapper = "Service returned an unknown response"


class UnknownError(CacheError):
    """Anything else that went wrong while talking to the transport."""
    error_code = CacheErrorCode.UNKNOWN_ERROR
    message_wrapper = "Unknown error has occurred"


_STATUS_TO_ERROR = {
    StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
    StatusCode.OUT_OF_RANGE: BadRequestError,
    StatusCode.UNIMPLEMENTED: BadRequestError,
    StatusCode.NOT_FOUND: NotFoundError,
    StatusCode.ALREADY_EXISTS: AlreadyExistsError,
    StatusCode.UNAUTHENTICATED: AuthenticationError,
    StatusCode.PERMISSION_DENIED: PermissionDeniedError,
    StatusCode.DEADLINE_EXCEEDED: CacheTimeoutError,
    StatusCode.FAILED_PRECONDITION: FailedPreconditionError,
    StatusCode.RESOURCE_EXHAUSTED: LimitExceededError,
    StatusCode.CANCELLED: RequestCancelledError,
    StatusCode.UNAVAILABLE: ServerUnavailableError,
    StatusCode.INTERNAL: InternalServerError,
    StatusCode.DATA_LOSS: InternalServerError,
    StatusCode.ABORTED: InternalServerError,
    StatusCode.UNKNOWN: UnknownServiceError,
}


def convert_error(exc: BaseException) -> CacheError:
    """
    Convert any exception raised while serving a request into a CacheError.

    Args:
        exc: The exception raised by validation or by the transport

    Returns:
        exc itself if it already is a CacheError, the CacheError subclass
        matching a TransportError's status, or UnknownError otherwise.
        The original exception is kept as __cause__.
    """
    if isinstance(exc, CacheError):
        return exc

    if isinstance(exc, TransportError):
        error_class = _STATUS_TO_ERROR.get(exc.status, UnknownServiceError)
        message = f"{error_class.message_wrapper}: {exc.details}" if exc.details else error_class.message_wrapper
        error = error_class(message, transport_details=exc.details)
    else:
        error = UnknownError(f"{UnknownError.message_wrapper}: {exc}")

    error.__cause__ = exc
    return error
