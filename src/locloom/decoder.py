# locloom/decoder.py
"""Default JSON decoder turning response bodies into response models.

Decoding either yields a fully validated model or raises `DecodeError`;
a body that is truncated, is not a JSON object, or carries a section of the
wrong type is never turned into a partially populated model.
"""

import pydantic

from .exceptions import DecodeError
from .types import ModelT


class JsonDecoder:
    """Decodes JSON bodies with pydantic's ``model_validate_json``."""

    def decode(
        self,
        body: bytes,
        shape: type[ModelT],
        *,
        endpoint: str,
        url: str | None = None,
    ) -> ModelT:
        """Decode ``body`` into an instance of ``shape``.

        Args:
            body: Raw response body.
            shape: The response model expected for the endpoint.
            endpoint: Kind of the endpoint queried, for error context.
            url: URL the body was fetched from, for error context.

        Returns:
            The validated model instance.

        Raises:
            DecodeError: If the body is empty, not valid JSON, not an object,
                or does not fit ``shape``.
        """
        if not body or not body.strip():
            raise DecodeError(
                f"Empty response body, expected {shape.__name__}",
                endpoint=endpoint,
                url=url,
            )
        try:
            return shape.model_validate_json(body)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Response body does not match {shape.__name__}: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}",
                endpoint=endpoint,
                url=url,
            ) from e
