"""Custom exceptions for purlinfo."""
from __future__ import annotations

from enum import Enum

import httpx
from pydantic import ValidationError


class PurlInfoError(Exception):
    """Base exception for all purlinfo errors."""

    pass


class ConfigurationError(PurlInfoError):
    """Exception raised when configuration is invalid."""

    pass


class PurlParseError(PurlInfoError):
    """Exception raised when a purl string cannot be parsed."""

    pass


class OutputError(PurlInfoError):
    """Exception raised when package info cannot be rendered."""

    pass


class ScopeError(PurlInfoError):
    """Base exception for deadline scope failures."""

    pass


class ScopeCancelledError(ScopeError):
    """Exception raised when work is attempted in a cancelled scope."""

    pass


class DeadlineExceededError(ScopeError):
    """Exception raised when a scope's deadline elapses."""

    pass


class ResolutionErrorKind(Enum):
    """Failure categories reported by resolvers."""

    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_ERROR = "upstream_error"
    INVALID_RESPONSE = "invalid_response"
    TRANSPORT = "transport"


class ResolutionError(PurlInfoError):
    """Base exception for package resolution failures.

    Every concrete subclass sets ``kind``, so callers can either catch a
    specific subclass or match on ``error.kind``.
    """

    kind: ResolutionErrorKind

    def __str__(self) -> str:
        message = super().__str__()
        cause = self.__cause__
        detail = describe_cause(cause) if cause is not None else ""
        if detail:
            return f"{message}: {detail}"
        return message


class NotFoundError(ResolutionError):
    """The registry has no package matching the purl."""

    kind = ResolutionErrorKind.NOT_FOUND


class RateLimitedError(ResolutionError):
    """The registry throttled the request (HTTP 429)."""

    kind = ResolutionErrorKind.RATE_LIMITED


class _StatusError(ResolutionError):
    """Resolution error carrying the HTTP status that caused it."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


class UpstreamUnavailableError(_StatusError):
    """The registry reported a transient server-side fault (502/503/504)."""

    kind = ResolutionErrorKind.UPSTREAM_UNAVAILABLE


class UpstreamError(_StatusError):
    """The registry answered with an unexpected non-200 status."""

    kind = ResolutionErrorKind.UPSTREAM_ERROR


class InvalidResponseError(ResolutionError):
    """The registry response could not be decoded into the expected shape."""

    kind = ResolutionErrorKind.INVALID_RESPONSE


class TransportError(ResolutionError):
    """The request failed at the network layer, or was cancelled or timed out."""

    kind = ResolutionErrorKind.TRANSPORT

    @property
    def timed_out(self) -> bool:
        """Check if the failure was a deadline or HTTP timeout.

        Returns:
            True if the underlying cause is a timeout, False otherwise.
        """
        return isinstance(
            self.__cause__, (DeadlineExceededError, httpx.TimeoutException)
        )

    @property
    def cancelled(self) -> bool:
        """Check if the failure was caused by scope cancellation.

        Returns:
            True if the underlying cause is a cancelled scope.
        """
        return isinstance(self.__cause__, ScopeCancelledError)



def describe_cause(cause: BaseException) -> str:
    """Summarize an underlying error on a single line.

    Pydantic validation errors are reduced to ``location: message`` pairs
    joined by ``; ``. Other errors have their whitespace collapsed.

    Args:
        cause: The chained exception.

    Returns:
        One-line description, possibly empty.
    """
    if isinstance(cause, ValidationError):
        parts = []
        for err in cause.errors():
            loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
            parts.append(f"{loc}: {err['msg']}")
        text = "; ".join(parts)
    else:
        text = str(cause)
    return " ".join(text.split())
