"""Pydantic models for Library of Congress API responses."""

from .base import (
    FacetFilter,
    FacetGroup,
    ListResponse,
    LocModel,
    PageListItem,
    Pagination,
)
from .collection import CollectionItem, CollectionResponse, CollectionsResponse
from .item import (
    CiteThis,
    File,
    ItemDetail,
    ItemResponse,
    MoreLikeThis,
    Page,
    RelatedItem,
    ResourceDetail,
    ResourceObject,
    ResourceResponse,
    Segment,
)
from .search import FormatResponse, ItemSummary, ResultItem, SearchResponse

__all__ = [
    "CiteThis",
    "CollectionItem",
    "CollectionResponse",
    "CollectionsResponse",
    "FacetFilter",
    "FacetGroup",
    "File",
    "FormatResponse",
    "ItemDetail",
    "ItemResponse",
    "ItemSummary",
    "ListResponse",
    "LocModel",
    "MoreLikeThis",
    "Page",
    "PageListItem",
    "Pagination",
    "RelatedItem",
    "ResourceDetail",
    "ResourceObject",
    "ResourceResponse",
    "ResultItem",
    "SearchResponse",
    "Segment",
]
