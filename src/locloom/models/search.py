"""Pydantic models for search and format-browse results.

Reference: https://www.loc.gov/apis/json-and-yaml/responses/search-results/
"""

from pydantic import Field

from .base import (
    BoolOrString,
    ListResponse,
    LocModel,
    NumberOrString,
    StringOrArray,
)


class ItemSummary(LocModel):
    """Condensed item record nested in a search result's ``item`` field."""

    call_number: StringOrArray | None = None
    contributor_names: StringOrArray | None = None
    created_published: StringOrArray | None = None
    date: StringOrArray | None = None
    date_issued: StringOrArray | None = None
    digitized_label: StringOrArray | None = None
    genre: StringOrArray | None = None
    language: StringOrArray | None = None
    location: StringOrArray | None = None
    medium: StringOrArray | None = None
    notes: StringOrArray | None = None
    other_title: StringOrArray | None = None
    publication_frequency: StringOrArray | None = None
    score: NumberOrString | None = None
    subject_headings: StringOrArray | None = None
    subjects: StringOrArray | None = None
    summary: StringOrArray | None = None
    title: StringOrArray | None = None


class ResultItem(LocModel):
    """A single entry of the ``results`` array of a search or browse response.

    Attributes:
        id: The item's URL on loc.gov, which doubles as its identifier.
        title: Title of the item.
        date: Date associated with the item.
        description: Short description, often a list of paragraphs.
        item: Nested condensed record.
        original_format: Formats of the original material.
        online_format: Formats available online.
        type_: Item type(s), sent by the API as ``type``.
    """

    access_restricted: BoolOrString | None = None
    aka: StringOrArray | None = None
    campaigns: StringOrArray | None = None
    contributor: StringOrArray | None = None
    date: StringOrArray | None = None
    dates: StringOrArray | None = None
    description: StringOrArray | None = None
    digitized: BoolOrString | None = None
    extract_timestamp: StringOrArray | None = None
    group: StringOrArray | None = None
    hassegments: BoolOrString | None = None
    id: StringOrArray | None = None
    image_url: StringOrArray | None = None
    index: NumberOrString | None = None
    item: ItemSummary | list[ItemSummary] | None = None
    language: StringOrArray | None = None
    location: StringOrArray | None = None
    mime_type: StringOrArray | None = None
    number: StringOrArray | None = None
    online_format: StringOrArray | None = None
    original_format: StringOrArray | None = None
    other_title: StringOrArray | None = None
    partof: StringOrArray | None = None
    publication_frequency: StringOrArray | None = None
    shelf_id: StringOrArray | None = None
    site: StringOrArray | None = None
    subject: StringOrArray | None = None
    title: StringOrArray | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    url: StringOrArray | None = None


class SearchResponse(ListResponse[ResultItem]):
    """Response of the ``/search/`` endpoint."""


class FormatResponse(ListResponse[ResultItem]):
    """Response of the ``/{media_type}/`` browse endpoints."""
