# locloom/types.py
"""Core type definitions and collaborator protocols for locloom.

The client facade performs no I/O and no JSON parsing itself. It talks to an
HTTP transport and a JSON decoder through the protocols defined here, so
either can be swapped (for instance with a fake in tests).
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

QueryPairs = Sequence[tuple[str, str]]
"""Ordered (key, value) query-string pairs, keys possibly repeated."""

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class Transport(Protocol):
    """Protocol for the HTTP collaborator.

    Implementations perform a single request and return the status code and
    raw body. They raise `locloom.exceptions.TransportError` (or a subclass)
    when no response could be obtained at all; non-2xx responses are
    returned, not raised, and the client decides what to do with them.
    Retries and timeouts are the transport's own policy.
    """

    def perform(self, method: str, url: str) -> tuple[int, bytes]:
        """Send a request and return ``(status_code, body)``."""
        ...

    def close(self) -> None:
        """Release any held connections."""
        ...


@runtime_checkable
class Decoder(Protocol):
    """Protocol for the JSON decoding collaborator."""

    def decode(
        self,
        body: bytes,
        shape: type[ModelT],
        *,
        endpoint: str,
        url: str | None = None,
    ) -> ModelT:
        """Decode ``body`` into an instance of ``shape``.

        Raises:
            DecodeError: If the body is not valid JSON or does not fit ``shape``.
        """
        ...
