"""Client facade for the Library of Congress JSON API."""

from collections.abc import Iterable
from http import HTTPStatus
from typing import Any, Self

import pydantic

from .attributes import (
    AttributesSelect,
    Facet,
    FacetRequest,
    Format,
    ItemAttributes,
    MediaType,
    ResourceAttributes,
    SortField,
)
from .config import LocApiSettings, get_settings
from .decoder import JsonDecoder
from .endpoints import (
    CollectionEndpoint,
    CollectionsEndpoint,
    Endpoint,
    FormatEndpoint,
    ItemEndpoint,
    ResourceEndpoint,
    SearchEndpoint,
)
from .exceptions import APIError, NotFoundError, TransportError, ValidationError
from .log_config import logger
from .models import (
    CollectionResponse,
    CollectionsResponse,
    FormatResponse,
    ItemResponse,
    LocModel,
    ResourceResponse,
    SearchResponse,
)
from .params import CommonParams, ItemParams, ResourceParams
from .transport import HttpxTransport
from .types import Decoder, ModelT, Transport

FacetsArg = FacetRequest | Facet | str | Iterable[Facet | str] | None

RESPONSE_MODELS: dict[str, type[LocModel]] = {
    "search": SearchResponse,
    "collections": CollectionsResponse,
    "collection": CollectionResponse,
    "format": FormatResponse,
    "item": ItemResponse,
    "resource": ResourceResponse,
}
"""Response model decoded for each endpoint kind."""


def resolve_base_url(base_url: str | None, settings: LocApiSettings) -> str:
    """Pick the base URL: explicit argument, then settings (which read
    ``LOC_API_BASE_URL`` and fall back to the production host)."""
    if base_url:
        return base_url
    return settings.base_url


def normalize_collection_name(name: str) -> str:
    """Turn a collection title or slug into the kebab-case slug the API uses.

    >>> normalize_collection_name("Civil War_Maps")
    'civil-war-maps'
    """
    return "-".join(name.strip().lower().replace("_", " ").split())


class LocClient:
    """Synchronous client for the Library of Congress JSON API.

    Each public method performs one call and returns ``(response, url)``:
    the decoded response model and the exact URL that was requested. The
    URL for any endpoint can also be obtained without a request through
    `url_for`.

    The client holds only its base URL, transport and decoder, none of which
    change after construction, so one instance can be shared by concurrent
    callers.

    Typical usage:
    ```python
    with LocClient() as client:
        response, url = client.search("baseball", facets=["subject:sports"], per_page=25)
        for result in response.results or []:
            print(result.title)
    ```

    Errors are raised as `LocApiError` subclasses whose ``stage`` tells
    where the call failed: ``validation`` for rejected arguments,
    ``construction`` for a malformed base URL, ``transport`` for network
    failures and non-2xx statuses, and ``decode`` for unexpected bodies.
    Nothing is retried here; retries belong to the transport.

    Attributes:
        _settings (LocApiSettings): The resolved settings for this client.
        _base_url (str): Base URL every endpoint URL is built against.
        _transport (Transport): The HTTP collaborator.
        _decoder (Decoder): The JSON decoding collaborator.
    """

    def __init__(
        self,
        base_url: str | None = None,
        settings: LocApiSettings | None = None,
        *,
        transport: Transport | None = None,
        decoder: Decoder | None = None,
    ):
        """Initializes the LocClient.

        Base URL resolution order:
            1. The `base_url` argument.
            2. ``settings.base_url``, read from ``LOC_API_BASE_URL`` when set.
            3. The production host, ``https://www.loc.gov``.

        The base URL is validated when a URL is built, so a malformed value
        surfaces as a `ConstructionError` from the first call.

        Args:
            base_url: Optional explicit base URL.
            settings: Optional `LocApiSettings`. If `None`, global settings
                are loaded via `locloom.config.get_settings()`.
            transport: Optional HTTP collaborator. Defaults to an
                `HttpxTransport` built from the settings, owned (and closed)
                by this client.
            decoder: Optional JSON collaborator. Defaults to `JsonDecoder`.
        """
        self._settings: LocApiSettings = settings or get_settings()
        self._base_url: str = resolve_base_url(base_url, self._settings)
        self._should_close_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(self._settings)
        self._decoder: Decoder = decoder or JsonDecoder()
        logger.debug(f"LocClient initialized for API: {self._base_url}")

    @property
    def base_url(self) -> str:
        """The base URL requests are built against."""
        return self._base_url

    # --- Core operations ---

    def url_for(self, endpoint: Endpoint) -> str:
        """Build the URL for `endpoint` without performing a request.

        Raises:
            ConstructionError: If the client's base URL is malformed.
        """
        return endpoint.build_url(self._base_url)

    def fetch(
        self, endpoint: Endpoint, model: type[ModelT] | None = None
    ) -> tuple[ModelT, str]:
        """Request `endpoint` and decode the body.

        Args:
            endpoint: The endpoint to call.
            model: Response model to decode into. Defaults to the model
                registered for the endpoint's kind in `RESPONSE_MODELS`.

        Returns:
            tuple: The decoded response and the URL that was requested.

        Raises:
            ConstructionError: If the base URL is malformed.
            TransportError: If the request failed or returned a non-2xx status.
            DecodeError: If the body does not match the response model.
        """
        shape = model or RESPONSE_MODELS[endpoint.kind]
        url = self.url_for(endpoint)
        logger.debug(f"Requesting {endpoint.kind} endpoint: {url}")

        try:
            status, body = self._transport.perform("GET", url)
        except TransportError as e:
            e.endpoint = e.endpoint or endpoint.kind
            e.url = e.url or url
            raise

        if not HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES:
            error_cls = NotFoundError if status == HTTPStatus.NOT_FOUND else APIError
            raise error_cls(
                f"API request failed with status {status}",
                status_code=status,
                endpoint=endpoint.kind,
                url=url,
            )

        response = self._decoder.decode(body, shape, endpoint=endpoint.kind, url=url)
        return response, url  # type: ignore[return-value]

    # --- Convenience methods ---

    def search(
        self,
        query: str,
        *,
        attributes: AttributesSelect | None = None,
        facets: FacetsArg = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[SearchResponse, str]:
        """Search across loc.gov (``/search/``).

        Args:
            query: Keyword query.
            attributes: Response sections to include/exclude.
            facets: Facet filters, as a `FacetRequest`, `Facet`s or
                ``"category:value"`` strings.
            per_page: Results per page.
            page: Page number, starting at 1.
            sort: Sort order; relevance when unset.
        """
        params = self._common_params(
            "search", query, attributes, facets, per_page, page, sort
        )
        endpoint = self._endpoint(SearchEndpoint, params=params)
        return self.fetch(endpoint, SearchResponse)

    def get_collections(
        self,
        query: str | None = None,
        *,
        attributes: AttributesSelect | None = None,
        facets: FacetsArg = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[CollectionsResponse, str]:
        """List the digital collections (``/collections/``)."""
        params = self._common_params(
            "collections", query, attributes, facets, per_page, page, sort
        )
        endpoint = self._endpoint(CollectionsEndpoint, params=params)
        return self.fetch(endpoint, CollectionsResponse)

    def get_collection(
        self,
        name: str,
        query: str | None = None,
        *,
        attributes: AttributesSelect | None = None,
        facets: FacetsArg = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[CollectionResponse, str]:
        """Browse the items of one collection (``/collections/{name}/``).

        Args:
            name: Collection slug or title; normalized to kebab-case
                (``"Civil War Maps"`` -> ``civil-war-maps``).
        """
        params = self._common_params(
            "collection", query, attributes, facets, per_page, page, sort
        )
        endpoint = self._endpoint(
            CollectionEndpoint,
            name=normalize_collection_name(name) if isinstance(name, str) else name,
            params=params,
        )
        return self.fetch(endpoint, CollectionResponse)

    def get_format(
        self,
        media_type: MediaType | str,
        query: str | None = None,
        *,
        attributes: AttributesSelect | None = None,
        facets: FacetsArg = None,
        per_page: int | None = None,
        page: int | None = None,
        sort: SortField | None = None,
    ) -> tuple[FormatResponse, str]:
        """Browse items of one media type (``/{media_type}/``).

        Args:
            media_type: A `MediaType` or its wire token (e.g. ``"maps"``).
        """
        params = self._common_params(
            "format", query, attributes, facets, per_page, page, sort
        )
        endpoint = self._endpoint(FormatEndpoint, media_type=media_type, params=params)
        return self.fetch(endpoint, FormatResponse)

    def get_item(
        self, item_id: str, attributes: ItemAttributes | None = None
    ) -> tuple[ItemResponse, str]:
        """Fetch one item's details (``/item/{item_id}/``)."""
        params = self._validated(
            "item", ItemParams, format=Format.JSON, attributes=attributes
        )
        endpoint = self._endpoint(ItemEndpoint, item_id=item_id, params=params)
        return self.fetch(endpoint, ItemResponse)

    def get_resource(
        self, resource_id: str, attributes: ResourceAttributes | None = None
    ) -> tuple[ResourceResponse, str]:
        """Fetch one resource's details (``/resource/{resource_id}/``)."""
        params = self._validated(
            "resource", ResourceParams, format=Format.JSON, attributes=attributes
        )
        endpoint = self._endpoint(
            ResourceEndpoint, resource_id=resource_id, params=params
        )
        return self.fetch(endpoint, ResourceResponse)

    # --- Argument normalization ---

    @staticmethod
    def _validated(kind: str, model: type[ModelT], **fields: Any) -> ModelT:
        """Construct `model`, turning pydantic errors into `ValidationError`."""
        try:
            return model(**fields)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid arguments: {e}", endpoint=kind) from e

    def _endpoint(self, endpoint_cls: type[ModelT], **fields: Any) -> ModelT:
        kind = endpoint_cls.model_fields["kind"].default
        return self._validated(kind, endpoint_cls, **fields)

    def _common_params(
        self,
        kind: str,
        query: str | None,
        attributes: AttributesSelect | None,
        facets: FacetsArg,
        per_page: int | None,
        page: int | None,
        sort: SortField | None,
    ) -> CommonParams:
        if isinstance(query, str):
            query = query.strip() or None
        if isinstance(facets, Iterable) and not isinstance(
            facets, FacetRequest | Facet | str
        ):
            facets = list(facets)
        return self._validated(
            kind,
            CommonParams,
            format=Format.JSON,
            attributes=attributes,
            query=query,
            facets=facets,
            per_page=per_page,
            page=page,
            sort=sort,
        )

    # --- Lifecycle ---

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._should_close_transport:
            self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
