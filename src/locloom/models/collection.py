"""Pydantic models for the collection listing and single-collection endpoints."""

from pydantic import Field

from .base import ListResponse, LocModel, StringOrArray
from .search import ResultItem


class CollectionItem(LocModel):
    """A digital collection as listed by ``/collections/``.

    Attributes:
        id: The collection's URL on loc.gov.
        title: Title of the collection.
        description: Short description of the collection.
        url: The collection's landing page.
    """

    id: StringOrArray | None = None
    title: StringOrArray | None = None
    description: StringOrArray | None = None
    private_note: StringOrArray | None = None
    collection_slug: StringOrArray | None = None
    normalized_slug: StringOrArray | None = None
    organization: StringOrArray | None = None
    url: StringOrArray | None = None
    site_map: StringOrArray | None = None
    image_url: StringOrArray | None = None
    subject: StringOrArray | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    created_at: StringOrArray | None = None
    updated_at: StringOrArray | None = None


class CollectionsResponse(ListResponse[CollectionItem]):
    """Response of the ``/collections/`` endpoint."""


class CollectionResponse(ListResponse[ResultItem]):
    """Response of the ``/collections/{name}/`` endpoint; its results are
    the items held in the collection."""
