"""Parameter bundles for Library of Congress API requests.

Each bundle is an immutable pydantic model of independently optional
fields. `to_query_pairs()` turns a bundle into the ordered (key, value)
pairs for its query string, leaving out every field that is unset so the
server applies its own default. No cross-field validation is done here;
combinations the API does not accept are rejected by the server.
"""

from abc import ABC, abstractmethod
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from .attributes import (
    AttributesSelect,
    Facet,
    FacetRequest,
    Format,
    ItemAttributes,
    ResourceAttributes,
    SortField,
)
from .constants import FORMAT_KEY, PAGE_KEY, PER_PAGE_KEY, QUERY_KEY, SORT_KEY
from .types import QueryPairs


class BaseParams(BaseModel, ABC):
    """Base class of the parameter bundles."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def merged(self, other: Self) -> Self:
        """Return a copy where every field set on `other` overrides this one.

        Useful for layering per-call arguments over a shared set of defaults
        without mutating either bundle.
        """
        overrides = {
            name: getattr(other, name)
            for name in other.model_fields_set
            if getattr(other, name) is not None
        }
        values = {name: getattr(self, name) for name in type(self).model_fields}
        return type(self)(**(values | overrides))

    @abstractmethod
    def to_query_pairs(self) -> QueryPairs:
        """Return the ordered query pairs for the fields that are set."""


class CommonParams(BaseParams):
    """Query parameters shared by the search, collection and format endpoints.

    Attributes:
        format: Response format (``fo``).
        attributes: Response sections to include/exclude (``at`` / ``at!``).
        query: Keyword search over metadata and full text (``q``).
        facets: Facet filters (repeated ``fa``). Accepts a `FacetRequest`,
            a single `Facet`, or a sequence of facets / ``"category:value"`` strings.
        per_page: Results per page (``c``).
        page: Page number to retrieve, starting at 1 (``sp``).
        sort: Sort order (``sb``).
    """

    format: Format | None = None
    attributes: AttributesSelect | None = None
    query: str | None = None
    facets: FacetRequest | None = None
    per_page: PositiveInt | None = None
    page: PositiveInt | None = None
    sort: SortField | None = None

    @field_validator("facets", mode="before")
    @classmethod
    def coerce_facets(cls, v: Any) -> Any:
        if isinstance(v, str | Facet | list | tuple):
            return {"facets": v}
        return v

    def to_query_pairs(self) -> QueryPairs:
        pairs: list[tuple[str, str]] = []
        if self.format is not None:
            pairs.append((FORMAT_KEY, self.format.value))
        if self.attributes is not None:
            pairs.extend(self.attributes.to_query_pairs())
        if self.query is not None:
            pairs.append((QUERY_KEY, self.query))
        if self.facets is not None:
            pairs.extend(self.facets.to_query_pairs())
        if self.per_page is not None:
            pairs.append((PER_PAGE_KEY, str(self.per_page)))
        if self.page is not None:
            pairs.append((PAGE_KEY, str(self.page)))
        if self.sort is not None:
            pairs.append((SORT_KEY, self.sort.value))
        return pairs


class ItemParams(BaseParams):
    """Parameters for the ``/item/{id}/`` endpoint."""

    format: Format | None = None
    attributes: ItemAttributes | None = None

    def to_query_pairs(self) -> QueryPairs:
        pairs: list[tuple[str, str]] = []
        if self.format is not None:
            pairs.append((FORMAT_KEY, self.format.value))
        if self.attributes is not None:
            pairs.extend(self.attributes.to_query_pairs())
        return pairs


class ResourceParams(BaseParams):
    """Parameters for the ``/resource/{id}/`` endpoint."""

    format: Format | None = None
    attributes: ResourceAttributes | None = None

    def to_query_pairs(self) -> QueryPairs:
        pairs: list[tuple[str, str]] = []
        if self.format is not None:
            pairs.append((FORMAT_KEY, self.format.value))
        if self.attributes is not None:
            pairs.extend(self.attributes.to_query_pairs())
        return pairs
