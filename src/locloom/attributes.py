"""Facet, attribute, sort and format vocabulary for Library of Congress requests.

Everything the wire protocol spells from a fixed vocabulary is an `Enum`
here, so a request the API would reject for an unknown token cannot be
built. Each type knows how to turn itself into the query pairs it
contributes; none of them perform any encoding, which is left to
`locloom.endpoints`.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import ATTRIBUTES_EXCLUDE_KEY, ATTRIBUTES_INCLUDE_KEY, FACET_KEY
from .types import QueryPairs


class Format(Enum):
    """Response formats accepted by the ``fo`` parameter."""

    JSON = "json"
    YAML = "yaml"


class MediaType(Enum):
    """Browse categories served under ``/{media_type}/``."""

    AUDIO = "audio"
    BOOKS = "books"
    FILM_AND_VIDEOS = "film-and-videos"
    LEGISLATION = "legislation"
    MANUSCRIPTS = "manuscripts"
    MAPS = "maps"
    NEWSPAPERS = "newspapers"
    PHOTOS = "photos"
    NOTATED_MUSIC = "notated-music"
    WEB_ARCHIVES = "web-archives"


class SortField(Enum):
    """Sort orders accepted by the ``sb`` parameter.

    Relevance is the server's default ordering and is selected by leaving
    the sort unset.
    """

    DATE = "date"
    DATE_DESC = "date_desc"
    TITLE = "title_s"
    TITLE_DESC = "title_s_desc"
    SHELF_ID = "shelf_id"
    SHELF_ID_DESC = "shelf_id_desc"


class FacetCategory(Enum):
    """Facet tags recognized by the ``fa`` filter parameter."""

    SUBJECT = "subject"
    LOCATION = "location"
    LOCATION_COUNTRY = "location_country"
    LOCATION_STATE = "location_state"
    LOCATION_COUNTY = "location_county"
    LOCATION_CITY = "location_city"
    CONTRIBUTOR = "contributor"
    PARTOF = "partof"
    LANGUAGE = "language"
    ORIGINAL_FORMAT = "original-format"
    ONLINE_FORMAT = "online-format"
    DATES = "dates"
    SITE = "site"
    DIGITIZED = "digitized"
    ACCESS_RESTRICTED = "access-restricted"


class Facet(BaseModel):
    """A single facet filter, serialized as ``"<category>:<value>"``.

    Attributes:
        category: The facet tag.
        value: The value to filter on, e.g. ``"animals"``.
    """

    category: FacetCategory
    value: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __str__(self) -> str:
        return f"{self.category.value}:{self.value}"

    @classmethod
    def parse(cls, text: str) -> "Facet":
        """Build a facet from its ``"<category>:<value>"`` text form.

        Raises:
            ValueError: If the text has no colon or names an unknown category.
        """
        tag, sep, value = text.partition(":")
        if not sep:
            raise ValueError(f"Facet '{text}' is not of the form 'category:value'")
        try:
            category = FacetCategory(tag)
        except ValueError as e:
            raise ValueError(f"Unknown facet category '{tag}' in '{text}'") from e
        return cls(category=category, value=value)

    @classmethod
    def subject(cls, value: str) -> "Facet":
        return cls(category=FacetCategory.SUBJECT, value=value)

    @classmethod
    def location(cls, value: str) -> "Facet":
        return cls(category=FacetCategory.LOCATION, value=value)

    @classmethod
    def contributor(cls, value: str) -> "Facet":
        return cls(category=FacetCategory.CONTRIBUTOR, value=value)

    @classmethod
    def language(cls, value: str) -> "Facet":
        return cls(category=FacetCategory.LANGUAGE, value=value)

    @classmethod
    def dates(cls, value: str) -> "Facet":
        return cls(category=FacetCategory.DATES, value=value)


class FacetRequest(BaseModel):
    """An ordered set of facet filters.

    Each facet becomes its own ``fa`` query entry, in input order. Facets
    may be given as `Facet` instances or in their ``"category:value"`` text
    form.

    Attributes:
        facets: The facets to apply, in request order.
    """

    facets: tuple[Facet, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("facets", mode="before")
    @classmethod
    def parse_text_facets(cls, v: Any) -> Any:
        """Accept ``"category:value"`` strings alongside `Facet` objects."""
        if isinstance(v, str | Facet):
            v = [v]
        if isinstance(v, Iterable):
            return tuple(Facet.parse(f) if isinstance(f, str) else f for f in v)
        return v

    @classmethod
    def from_strings(cls, filters: Iterable[str]) -> "FacetRequest":
        """Build a request from ``"category:value"`` strings."""
        return cls(facets=tuple(filters))

    def __bool__(self) -> bool:
        return bool(self.facets)

    def to_query_pairs(self) -> QueryPairs:
        """Return one ``("fa", "<category>:<value>")`` pair per facet."""
        return [(FACET_KEY, str(facet)) for facet in self.facets]

    def to_query_param(self) -> str:
        """Return the pipe-joined form, e.g. ``"location:ohio|subject:wildlife"``."""
        return "|".join(str(facet) for facet in self.facets)


class AttributesSelect(BaseModel):
    """Selection of top-level response sections to include or exclude.

    Include entries are sent as ``at=a,b`` and exclude entries as
    ``at!=c,d``. Duplicates are dropped, keeping the first occurrence.

    Attributes:
        include: Sections the server should populate, e.g. ``("pagination", "results")``.
        exclude: Sections the server should leave out, e.g. ``("more_like_this",)``.
    """

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __bool__(self) -> bool:
        return bool(self.include or self.exclude)

    def to_query_pairs(self) -> QueryPairs:
        pairs: list[tuple[str, str]] = []
        if self.include:
            pairs.append((ATTRIBUTES_INCLUDE_KEY, ",".join(dict.fromkeys(self.include))))
        if self.exclude:
            pairs.append((ATTRIBUTES_EXCLUDE_KEY, ",".join(dict.fromkeys(self.exclude))))
        return pairs

    def to_query_param(self) -> str:
        """Return the unencoded ``at=...&at!=...`` fragment."""
        return "&".join(f"{key}={value}" for key, value in self.to_query_pairs())


class _SectionFlags(BaseModel):
    """Optional per-section flags: True includes a section, False excludes
    it, None leaves it to the server. Sections are named after the fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_attributes_select(self) -> AttributesSelect:
        include = []
        exclude = []
        for name in type(self).model_fields:
            flag = getattr(self, name)
            if flag is True:
                include.append(name)
            elif flag is False:
                exclude.append(name)
        return AttributesSelect(include=tuple(include), exclude=tuple(exclude))

    def to_query_pairs(self) -> QueryPairs:
        return self.to_attributes_select().to_query_pairs()


class ItemAttributes(_SectionFlags):
    """Sections of an ``/item/{id}/`` response.

    Attributes:
        item: The item's bibliographic record (``at=item``).
        resources: Links to the item's digitized resources (``at=resources``).
        cite_this: Citation strings (``at=cite_this``).
    """

    item: bool | None = None
    resources: bool | None = None
    cite_this: bool | None = None


class ResourceAttributes(_SectionFlags):
    """Sections of a ``/resource/{id}/`` response.

    Attributes:
        resource: The individual resource record (``at=resource``).
        page: Page information (``at=page``).
        segments: Segment information (``at=segments``).
        cite_this: Citation strings (``at=cite_this``).
        resources: Sibling resource links (``at=resources``).
        item: The parent item's record (``at=item``).
    """

    resource: bool | None = None
    page: bool | None = None
    segments: bool | None = None
    cite_this: bool | None = None
    resources: bool | None = None
    item: bool | None = None
