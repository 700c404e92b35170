"""Pydantic models for the item and resource detail endpoints.

Item and resource responses share most of their sections (``item``,
``resources``, ``cite_this``, ``segments`` ...); they differ in the
``resource`` section, which the resource endpoint fills with a detailed
record of one digitized object.

Reference: https://www.loc.gov/apis/json-and-yaml/responses/item-and-resource/
"""

from typing import Any

from pydantic import Field

from .base import (
    BoolOrString,
    LocModel,
    NumberOrString,
    Pagination,
    StringOrArray,
    first_or_none,
)


class CiteThis(LocModel):
    """Citation strings for an item in several styles."""

    apa: StringOrArray | None = None
    chicago: StringOrArray | None = None
    mla: StringOrArray | None = None


class File(LocModel):
    """One file of a resource (an image tile source, audio stream, PDF ...).

    Attributes:
        url: Where the file can be downloaded.
        mimetype: MIME type of the file.
        size: File size in bytes.
        use: The file's role, e.g. "master" or "service".
    """

    caption: StringOrArray | None = None
    duration: NumberOrString | None = None
    format: Any = None
    height: NumberOrString | None = None
    info: StringOrArray | None = None
    levels: NumberOrString | None = None
    mimetype: StringOrArray | None = None
    other_name: StringOrArray | None = None
    profile: StringOrArray | None = None
    protocol: StringOrArray | None = None
    size: NumberOrString | None = None
    streams: StringOrArray | None = None
    tiles: StringOrArray | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    url: StringOrArray | None = None
    use: StringOrArray | None = None
    width: NumberOrString | None = None


class ResourceObject(LocModel):
    """An entry of the ``resources`` section: one digitized object of an item."""

    caption: StringOrArray | None = None
    duration: NumberOrString | list[NumberOrString] | None = None
    # Usually a list of pages, each a list of file variants
    files: list[list[File]] | list[File] | None = None
    height: NumberOrString | list[NumberOrString] | None = None
    id: StringOrArray | None = None
    image: StringOrArray | None = None
    mimetype: StringOrArray | None = None
    size: NumberOrString | list[NumberOrString] | None = None
    title: StringOrArray | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    url: StringOrArray | None = None
    width: NumberOrString | list[NumberOrString] | None = None


class ResourceDetail(LocModel):
    """The ``resource`` section of a resource response."""

    audio: StringOrArray | None = None
    background: StringOrArray | None = None
    begin: StringOrArray | None = None
    caption: StringOrArray | None = None
    capture_range: StringOrArray | None = None
    djvu_text_file: StringOrArray | None = None
    download_restricted: BoolOrString | None = None
    duration: NumberOrString | None = None
    end: StringOrArray | None = None
    files: list[list[File]] | list[File] | None = None
    fulltext_derivative: StringOrArray | None = None
    fulltext_file: StringOrArray | None = None
    height: NumberOrString | None = None
    id: StringOrArray | None = None
    image: StringOrArray | None = None
    info: StringOrArray | None = None
    paprika_resource_path: StringOrArray | None = None
    pdf: StringOrArray | None = None
    representative_index: NumberOrString | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    url: StringOrArray | None = None
    uuid: StringOrArray | None = None
    version: NumberOrString | None = None
    video: StringOrArray | None = None
    video_stream: StringOrArray | None = None
    width: NumberOrString | None = None
    word_coordinates: StringOrArray | None = None


class ItemDetail(LocModel):
    """The ``item`` section: the full bibliographic record of an item."""

    access_advisory: StringOrArray | None = None
    access_restricted: BoolOrString | None = None
    aka: StringOrArray | None = None
    batch: StringOrArray | None = None
    call_number: StringOrArray | None = None
    contents: StringOrArray | None = None
    contributor_names: StringOrArray | None = None
    contributors: StringOrArray | None = None
    created_published: StringOrArray | None = None
    date: StringOrArray | None = None
    description: StringOrArray | None = None
    digital_id: StringOrArray | None = None
    digitized: BoolOrString | None = None
    display_offsite: BoolOrString | None = None
    extract_urls: StringOrArray | None = None
    group: StringOrArray | None = None
    id: StringOrArray | None = None
    image_url: StringOrArray | None = None
    index: NumberOrString | None = None
    item_type: StringOrArray | None = None
    language: StringOrArray | None = None
    location_country: StringOrArray | None = None
    location_county: StringOrArray | None = None
    locations: StringOrArray | None = None
    newspaper_title: StringOrArray | None = None
    notes: StringOrArray | None = None
    online_format: StringOrArray | None = None
    original_format: StringOrArray | None = None
    partof_division: StringOrArray | None = None
    partof_title: StringOrArray | None = None
    place_of_publication: StringOrArray | None = None
    publication_frequency: StringOrArray | None = None
    related_items: StringOrArray | None = None
    resources: StringOrArray | None = None
    rights: StringOrArray | None = None
    score: NumberOrString | None = None
    shelf_id: StringOrArray | None = None
    site: StringOrArray | None = None
    source_collection: StringOrArray | None = None
    subject: StringOrArray | None = None
    subject_headings: StringOrArray | None = None
    subjects: StringOrArray | None = None
    summary: StringOrArray | None = None
    title: StringOrArray | None = None
    url: StringOrArray | None = None


class Segment(LocModel):
    """An entry of the ``segments`` section; kept open as its shape varies."""


class RelatedItem(LocModel):
    """An entry of the ``related_items`` section."""


class MoreLikeThis(LocModel):
    """An entry of the ``more_like_this`` section."""


class Page(LocModel):
    """An entry of the ``page`` section."""


class _DetailResponse(LocModel):
    """Sections shared by item and resource responses."""

    articles_and_essays: StringOrArray | None = None
    calendar_url: StringOrArray | None = None
    cite_this: CiteThis | list[CiteThis] | None = None
    fulltext_service: StringOrArray | None = None
    item: ItemDetail | list[ItemDetail] | None = None
    locations: StringOrArray | None = None
    more_like_this: MoreLikeThis | list[MoreLikeThis] | None = None
    newspaper_holdings_url: StringOrArray | None = None
    next_issue: StringOrArray | None = None
    options: Any = None
    page: Page | list[Page] | None = None
    pagination: Pagination | list[Pagination] | None = None
    previous_issue: StringOrArray | None = None
    related_items: RelatedItem | list[RelatedItem] | None = None
    resources: ResourceObject | list[ResourceObject] | None = None
    segments: Segment | list[Segment] | None = None
    status: NumberOrString | None = None
    timestamp: NumberOrString | None = None
    title_url: StringOrArray | None = None
    traditional_knowledge_labels: StringOrArray | None = None
    type_: StringOrArray | None = Field(default=None, alias="type")
    views: Any = None
    word_coordinates_pages: Any = None
    word_coordinates_query: Any = None

    @property
    def item_record(self) -> ItemDetail | None:
        """The ``item`` section as a single record, whichever shape it arrived in."""
        return first_or_none(self.item)

    @property
    def citation(self) -> CiteThis | None:
        """The ``cite_this`` section as a single record."""
        return first_or_none(self.cite_this)


class ItemResponse(_DetailResponse):
    """Response of the ``/item/{item_id}/`` endpoint."""

    resource: Any = None


class ResourceResponse(_DetailResponse):
    """Response of the ``/resource/{resource_id}/`` endpoint."""

    resource: ResourceDetail | list[ResourceDetail] | None = None
