"""Custom exception classes for the locloom library.

Every error raised out of a client call is a `LocApiError` carrying the
`Stage` that failed, so callers can tell a malformed base URL from a network
failure from an unexpected response body.
"""

from enum import Enum


class Stage(Enum):
    """The step of a client call at which an error occurred."""

    VALIDATION = "validation"
    CONSTRUCTION = "construction"
    TRANSPORT = "transport"
    DECODE = "decode"


class LocApiError(Exception):
    """Base exception class for all locloom errors."""

    stage: Stage | None = None

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        url: str | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            endpoint: Optional kind of the endpoint being called (e.g. "search").
            url: Optional URL the call was built for.
        """
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.url = url

    def __str__(self) -> str:
        details = []
        if self.stage is not None:
            details.append(f"stage: {self.stage.value}")
        if self.endpoint:
            details.append(f"endpoint: {self.endpoint}")
        if self.url:
            details.append(f"URL: {self.url}")
        if details:
            return f"{self.message} ({', '.join(details)})"
        return self.message


class ValidationError(LocApiError):
    """Represents a caller argument rejected before any URL is built
    (e.g. a page number of zero)."""

    stage = Stage.VALIDATION


class ConstructionError(LocApiError):
    """Raised when a request URL cannot be built because the base URL is not
    a well-formed absolute http(s) URL."""

    stage = Stage.CONSTRUCTION


class ConfigurationError(LocApiError):
    """Represents an error in the library's configuration."""


class TransportError(LocApiError):
    """Represents a failure to obtain a successful HTTP response."""

    stage = Stage.TRANSPORT


class TimeoutError(TransportError):
    """Represents a request timeout error.

    This error is raised when an HTTP request does not complete within the configured timeout.
    """


class NetworkError(TransportError):
    """Represents a network connection error (e.g., DNS resolution failure, connection refused).

    This error indicates a problem in establishing or maintaining a network connection
    to the server during an HTTP request.
    """


class APIError(TransportError):
    """Represents a non-2xx HTTP status returned by the API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        endpoint: str | None = None,
        url: str | None = None,
    ):
        """Initializes the APIError.

        Args:
            message: The error message.
            status_code: The HTTP status code returned by the server.
            endpoint: Optional kind of the endpoint being called.
            url: Optional URL the request was sent to.
        """
        super().__init__(message, endpoint=endpoint, url=url)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{super().__str__()} [status {self.status_code}]"


class NotFoundError(APIError):
    """Represents a resource not found error (404 Not Found)."""

    # No additional methods needed currently


class DecodeError(LocApiError):
    """Raised when a response body does not match the shape expected for the
    endpoint that was queried."""

    stage = Stage.DECODE
