"""Default HTTP transport for locloom.

This module provides `HttpxTransport`, the HTTP collaborator used by
`LocClient` unless another `Transport` is injected. It wraps a synchronous
``httpx.Client`` and owns the connection-level policy the client facade
deliberately leaves out: TLS roots, timeouts, the User-Agent header, and
retries with exponential backoff for transient failures.
"""

import ssl
from typing import Self

import certifi
import httpx
import tenacity
from tenacity import Retrying, stop_after_attempt, wait_exponential

from .config import LocApiSettings, get_settings
from .constants import CLIENT_HEADERS
from .exceptions import NetworkError, TimeoutError, TransportError
from .log_config import logger


class HttpxTransport:
    """Synchronous HTTP transport built on ``httpx.Client``.

    `perform` returns the final ``(status_code, body)`` for any HTTP
    response, including 4xx/5xx ones; interpreting the status is up to the
    caller. Timeouts, network errors and retryable statuses are retried up
    to ``settings.max_retries`` times. If every attempt fails without a
    response, the last `TransportError` is raised.

    The transport holds no per-request state and ``httpx.Client`` is safe to
    share between threads, so one instance can serve concurrent callers.

    Attributes:
        _settings: Configuration for timeouts, retries and the User-Agent.
        _retryable_status_codes: HTTP status codes that trigger a retry.
        _http_client: The underlying ``httpx.Client``.
        _should_close_client: Whether this instance owns ``_http_client``.
    """

    DEFAULT_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset(
        [429, 500, 502, 503, 504]
    )
    """Default set of HTTP status codes considered retryable."""

    def __init__(
        self,
        settings: LocApiSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        retryable_status_codes: frozenset[int] = DEFAULT_RETRYABLE_STATUS_CODES,
    ):
        """Initialize the transport.

        Args:
            settings: Settings to use; defaults to `locloom.config.get_settings()`.
            http_client: Optional pre-configured ``httpx.Client``. A client passed
                in is not closed by `close()`.
            retryable_status_codes: Set of HTTP status codes to retry on.
        """
        self._settings = settings or get_settings()
        self._retryable_status_codes = retryable_status_codes
        self._should_close_client = http_client is None  # Close only if we created it
        self._http_client = http_client or self._create_default_http_client()
        logger.debug(
            f"HttpxTransport initialized (timeout={self._settings.request_timeout}s, "
            f"max_retries={self._settings.max_retries})"
        )

    def _create_default_http_client(self) -> httpx.Client:
        """Create a default ``httpx.Client`` with configured settings."""
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi bundle failed to load. Using default SSL verification."
            )

        return httpx.Client(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={**CLIENT_HEADERS, "User-Agent": self._settings.user_agent},
            follow_redirects=True,
        )

    def _send_once(self, method: str, url: str) -> httpx.Response:
        """Send a single request attempt, mapping httpx failures to locloom errors.

        Raises:
            TimeoutError: If the request times out.
            NetworkError: For connection-level failures.
            TransportError: For any other httpx request error.
        """
        logger.debug(f"Sending request: {method} {url}")
        try:
            response = self._http_client.request(method, url)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {url}")
            raise TimeoutError("Request timed out", url=url) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {url}: {e}")
            raise NetworkError(f"Network error: {e}", url=url) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {url}: {e}")
            raise TransportError(f"HTTP request error: {e}", url=url) from e

        logger.debug(f"Received response: {response.status_code} for {url}")
        logger.trace(f"Response Headers: {response.headers}")
        return response

    def _should_retry_request(self, retry_state: tenacity.RetryCallState) -> bool:
        """Predicate for tenacity: should we retry this attempt?"""
        outcome = retry_state.outcome
        if not outcome:
            return False

        if outcome.failed:
            exc = outcome.exception()
            if isinstance(exc, TimeoutError | NetworkError):
                logger.warning(f"Retrying due to {type(exc).__name__} for {exc.url}")
                return True
            return False

        response: httpx.Response = outcome.result()
        if response.status_code in self._retryable_status_codes:
            logger.warning(
                f"Retrying due to status code {response.status_code} for {response.url}"
            )
            return True
        return False

    def _before_retry_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        """Log details before tenacity sleeps between retries."""
        sleep_time = (
            getattr(retry_state.next_action, "sleep", 0)
            if retry_state.next_action
            else 0
        )
        logger.info(
            f"Retrying request in {sleep_time:.2f} seconds "
            f"after {retry_state.attempt_number} attempt(s)"
        )

    @staticmethod
    def _last_outcome(retry_state: tenacity.RetryCallState) -> httpx.Response:
        """Return the final response once retries are exhausted, or re-raise
        the final attempt's exception."""
        return retry_state.outcome.result()  # type: ignore[union-attr]

    def perform(self, method: str, url: str) -> tuple[int, bytes]:
        """Perform an HTTP request with retries for transient errors.

        Args:
            method: HTTP method. The client only issues ``GET``.
            url: Absolute URL to request.

        Returns:
            tuple[int, bytes]: Status code and body of the final response.

        Raises:
            TransportError: If no response could be obtained.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self._settings.max_retries + 1),  # +1 for initial attempt
            wait=wait_exponential(multiplier=self._settings.backoff_factor),
            retry=self._should_retry_request,
            before_sleep=self._before_retry_sleep,
            retry_error_callback=self._last_outcome,
        )
        response = retrying(self._send_once, method, url)
        return response.status_code, response.content

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._should_close_client and not self._http_client.is_closed:
            self._http_client.close()
            logger.debug("HttpxTransport internal HTTP client closed.")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
