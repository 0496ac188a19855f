"""Error Taxonomy for the Atlassian Client

Every exception raised by the library derives from AtlassianClientError.
Errors are raised to the caller and never swallowed by the core.
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..api.response_handler import Response


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AtlassianClientError(Exception):
    """Base exception class for the Atlassian client."""

    severity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, severity: Optional[ErrorSeverity] = None):
        self.message = message
        if severity is not None:
            self.severity = severity
        super().__init__(self.message)


class ConfigurationError(AtlassianClientError):
    """Error raised when configuration is invalid."""
    severity = ErrorSeverity.HIGH


class InvalidURL(AtlassianClientError, ValueError):
    """Malformed base URL or relative path, detected before any network activity."""
    pass


class EncodingError(AtlassianClientError):
    """Payload or header value could not be encoded for the wire."""
    pass


class RequestBuildError(AtlassianClientError, ValueError):
    """Request could not be assembled (bad method, missing context)."""
    pass


class ParameterError(AtlassianClientError, ValueError):
    """A required operation parameter is missing or empty."""
    severity = ErrorSeverity.LOW


class TransportFailure(AtlassianClientError):
    """Connection level failure (DNS, refused, reset, transport timeout)."""
    severity = ErrorSeverity.HIGH

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ContextError(AtlassianClientError):
    """The call's context ended before the response arrived."""
    severity = ErrorSeverity.LOW


class Cancelled(ContextError):
    """The context was cancelled by the caller."""

    def __init__(self, message: str = "context cancelled"):
        super().__init__(message)


class DeadlineExceeded(ContextError):
    """The context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded"):
        super().__init__(message)


class ResponseError(AtlassianClientError):
    """Base class for errors that carry the normalized response."""

    def __init__(self, message: str, response: "Response"):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class HTTPStatusError(ResponseError):
    """A domain operation received a non-2xx status."""
    pass


class DecodingError(ResponseError):
    """Response bytes do not match the expected shape."""
    pass
