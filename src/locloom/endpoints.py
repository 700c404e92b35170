"""Defines the Library of Congress API endpoints and how their URLs are built.

The API surface is a closed set of six endpoints. Each is an immutable
pydantic model carrying its path identifiers and parameter bundle, tagged by
a literal ``kind``; `Endpoint` is the discriminated union of all six.

Building a URL is separate from sending a request, so the exact URL for a
call can be obtained (for logging, testing or caching by URL) without
touching the network.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Literal
from urllib.parse import quote, quote_plus

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .attributes import MediaType
from .exceptions import ConstructionError
from .params import BaseParams, CommonParams, ItemParams, ResourceParams
from .types import QueryPairs

# --- Endpoint path segments ---
SEARCH = "search"
COLLECTIONS = "collections"
ITEM = "item"
RESOURCE = "resource"


def normalize_base_url(base_url: str, *, endpoint: str | None = None) -> str:
    """Check that `base_url` is an absolute http(s) URL and strip trailing slashes.

    A path prefix on the base URL is kept, so ``https://host/api`` builds
    ``https://host/api/search/``.

    Raises:
        ConstructionError: If the URL cannot be parsed, contains whitespace
            or control characters, is relative, has no host, has a port
            outside 1-65535, or carries a query string or fragment.
    """
    if not isinstance(base_url, str):
        raise ConstructionError(
            f"Base URL must be a string, got {type(base_url).__name__}",
            endpoint=endpoint,
        )
    if any(ch.isspace() or not ch.isprintable() for ch in base_url):
        raise ConstructionError(
            f"Base URL {base_url!r} must not contain whitespace or control characters",
            endpoint=endpoint,
        )
    try:
        parsed = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConstructionError(
            f"Invalid base URL {base_url!r}: {e}", endpoint=endpoint
        ) from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConstructionError(
            f"Base URL {base_url!r} must be an absolute http(s) URL",
            endpoint=endpoint,
        )
    if parsed.port is not None and not 0 < parsed.port <= 65535:
        raise ConstructionError(
            f"Base URL {base_url!r} has an invalid port {parsed.port}",
            endpoint=endpoint,
        )
    if parsed.query or parsed.fragment:
        raise ConstructionError(
            f"Base URL {base_url!r} must not contain a query or fragment",
            endpoint=endpoint,
        )
    return base_url.rstrip("/")


def encode_segment(segment: str) -> str:
    """Percent-encode a caller-supplied path segment, including any ``/``."""
    return quote(segment, safe="")


def encode_query(pairs: QueryPairs) -> str:
    """Join query pairs as ``key=value&...``.

    Values are form-encoded (space becomes ``+``, ``:`` becomes ``%3A``) with
    commas left literal; the ``!`` of the ``at!`` key is left literal too.
    """
    return "&".join(
        f"{quote(key, safe='!')}={quote_plus(value, safe=',')}" for key, value in pairs
    )


class _BaseEndpoint(BaseModel, ABC):
    # Caller-supplied identifiers are stripped before length checks
    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    kind: str
    params: BaseParams

    @property
    @abstractmethod
    def path(self) -> str:
        """The encoded path of this endpoint, with leading and trailing ``/``."""

    def query_pairs(self) -> QueryPairs:
        return self.params.to_query_pairs()

    def build_url(self, base_url: str) -> str:
        """Build the full request URL against `base_url`.

        The query string is only appended when there is at least one pair.

        Raises:
            ConstructionError: If `base_url` is not a well-formed absolute URL.
        """
        base = normalize_base_url(base_url, endpoint=self.kind)
        url = f"{base}{self.path}"
        query = encode_query(self.query_pairs())
        return f"{url}?{query}" if query else url


class SearchEndpoint(_BaseEndpoint):
    """The ``/search/`` endpoint, searching across the whole site."""

    kind: Literal["search"] = "search"
    params: CommonParams = Field(default_factory=CommonParams)

    @property
    def path(self) -> str:
        return f"/{SEARCH}/"


class CollectionsEndpoint(_BaseEndpoint):
    """The ``/collections/`` endpoint, listing all digital collections."""

    kind: Literal["collections"] = "collections"
    params: CommonParams = Field(default_factory=CommonParams)

    @property
    def path(self) -> str:
        return f"/{COLLECTIONS}/"


class CollectionEndpoint(_BaseEndpoint):
    """The ``/collections/{name}/`` endpoint for a single collection."""

    kind: Literal["collection"] = "collection"
    name: str = Field(min_length=1)
    params: CommonParams = Field(default_factory=CommonParams)

    @property
    def path(self) -> str:
        return f"/{COLLECTIONS}/{encode_segment(self.name)}/"


class FormatEndpoint(_BaseEndpoint):
    """The ``/{media_type}/`` endpoint, browsing items of one format."""

    kind: Literal["format"] = "format"
    media_type: MediaType
    params: CommonParams = Field(default_factory=CommonParams)

    @property
    def path(self) -> str:
        return f"/{self.media_type.value}/"


class ItemEndpoint(_BaseEndpoint):
    """The ``/item/{item_id}/`` endpoint for a single item's details."""

    kind: Literal["item"] = "item"
    item_id: str = Field(min_length=1)
    params: ItemParams = Field(default_factory=ItemParams)

    @property
    def path(self) -> str:
        return f"/{ITEM}/{encode_segment(self.item_id)}/"


class ResourceEndpoint(_BaseEndpoint):
    """The ``/resource/{resource_id}/`` endpoint for a single resource."""

    kind: Literal["resource"] = "resource"
    resource_id: str = Field(min_length=1)
    params: ResourceParams = Field(default_factory=ResourceParams)

    @property
    def path(self) -> str:
        return f"/{RESOURCE}/{encode_segment(self.resource_id)}/"


Endpoint = Annotated[
    SearchEndpoint
    | CollectionsEndpoint
    | CollectionEndpoint
    | FormatEndpoint
    | ItemEndpoint
    | ResourceEndpoint,
    Field(discriminator="kind"),
]
"""Any one of the six API endpoints, discriminated by ``kind``."""
