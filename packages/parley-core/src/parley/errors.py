"""Closed error taxonomy raised by every provider adapter.

Callers branch on the exception class (or its ``kind``), never on the
message text. The underlying httpx/pydantic error is kept as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Backend-independent failure categories."""

    TIMEOUT = "timeout"
    CONNECTION_FAILURE = "connection_failure"
    AUTHENTICATION_FAILURE = "authentication_failure"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    HTTP_FAILURE = "http_failure"
    DESERIALIZATION_FAILURE = "deserialization_failure"
    EMPTY_RESPONSE = "empty_response"


class ProviderError(Exception):
    """Base class for all provider call failures."""

    kind: ErrorKind

    def __init__(self, message: str, provider: str = "") -> None:
        super().__init__(message)
        self.provider = provider

    def __reduce__(self):
        return (self.__class__, (str(self), self.provider))


class ProviderTimeoutError(ProviderError):
    """Outbound call exceeded the configured deadline."""

    kind = ErrorKind.TIMEOUT


class ProviderConnectionError(ProviderError):
    """Transport could not reach the endpoint."""

    kind = ErrorKind.CONNECTION_FAILURE


class AuthenticationError(ProviderError):
    """Backend rejected the credentials (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION_FAILURE


class RateLimitError(ProviderError):
    """Backend reported too many requests (HTTP 429)."""

    kind = ErrorKind.RATE_LIMIT_EXCEEDED


class HttpStatusError(ProviderError):
    """Any other non-success HTTP status."""

    kind = ErrorKind.HTTP_FAILURE

    def __init__(self, status: int, body: str, provider: str = "") -> None:
        label = provider or "provider"
        super().__init__(f"{label} API HTTP {status} error: {body}", provider)
        self.status = status
        self.body = body

    def __reduce__(self):
        return (self.__class__, (self.status, self.body, self.provider))


class DeserializationError(ProviderError):
    """Response body did not match the expected schema."""

    kind = ErrorKind.DESERIALIZATION_FAILURE


class EmptyResponseError(ProviderError):
    """Response parsed but carried no usable content."""

    kind = ErrorKind.EMPTY_RESPONSE
