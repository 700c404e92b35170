"""Base Pydantic models for Library of Congress API responses.

This module defines the building blocks shared by every response shape:
the permissive model base, the scalar-or-list field types the API uses
interchangeably, the ``pagination`` and ``facets`` sections, and the
generic list-response envelope.

Every field is optional. Which sections the server populates depends on
the caller's attribute selection, so a missing section decodes to ``None``
rather than failing.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

# The API returns many fields either as a scalar or as a list of scalars.
StringOrArray = str | list[str]
NumberOrString = int | float | str
BoolOrString = bool | str

ResultT = TypeVar("ResultT", bound=BaseModel)


class LocModel(BaseModel):
    """Base model for all response shapes.

    Unknown fields are kept (available through ``model_extra``) so the
    models stay usable as the API adds sections.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PageListItem(LocModel):
    """One entry of the ``pagination.page_list`` array.

    Attributes:
        number: The page number.
        url: The URL of that page, or None for the current page.
    """

    number: NumberOrString | None = None
    url: StringOrArray | None = None


class Pagination(LocModel):
    """The ``pagination`` section of a list response.

    Attributes:
        current: The current page number.
        first: URL of the first page.
        last: URL of the last page.
        next: URL of the next page, None on the last page.
        previous: URL of the previous page, None on the first page.
        of: Total number of results.
        total: Total number of pages.
        perpage: Results per page.
        perpage_options: Allowed page sizes.
        results: Human-readable range of results on this page (e.g. "1 - 25").
        page_list: Links to neighbouring pages.
    """

    current: NumberOrString | None = None
    first: StringOrArray | None = None
    last: StringOrArray | None = None
    next: StringOrArray | None = None
    previous: StringOrArray | None = None
    of: NumberOrString | None = None
    total: NumberOrString | None = None
    perpage: NumberOrString | None = None
    perpage_options: int | list[int] | None = None
    results: StringOrArray | None = None
    page_list: PageListItem | list[PageListItem] | None = None
    # "from" is a keyword
    from_: NumberOrString | None = Field(default=None, alias="from")
    to: NumberOrString | None = None


class FacetFilter(LocModel):
    """A single filter value within a facet group, with toggle links.

    Attributes:
        count: Number of results matching this filter.
        term: The filter term.
        title: Display title of the filter.
        on: URL applying the filter.
        off: URL removing the filter.
        not_: URL excluding the filter.
    """

    count: NumberOrString | None = None
    term: StringOrArray | None = None
    title: StringOrArray | None = None
    on: StringOrArray | None = None
    off: StringOrArray | None = None
    not_: StringOrArray | None = Field(default=None, alias="not")


class FacetGroup(LocModel):
    """One facet category in the ``facets`` section (e.g. all subjects)."""

    type_: str | None = Field(default=None, alias="type")
    filters: FacetFilter | list[FacetFilter] | None = None


class ListResponse(LocModel, Generic[ResultT]):
    """Generic envelope for the list-style endpoints (search, collections,
    collection, format).

    Attributes:
        facets: Facet groups available for narrowing the results.
        pagination: Paging information.
        results: The page of results, or None if the section was not returned.
        status: Status reported by the API, when present.
        timestamp: Server-side timestamp, when present.
    """

    facets: FacetGroup | list[FacetGroup] | None = None
    pagination: Pagination | None = None
    results: list[ResultT] | None = None
    status: NumberOrString | None = None
    timestamp: NumberOrString | None = None

    @property
    def total_results(self) -> int | None:
        """Total number of results reported by ``pagination.of``, if numeric."""
        if self.pagination is None or self.pagination.of is None:
            return None
        try:
            return int(self.pagination.of)
        except (TypeError, ValueError):
            return None

    @property
    def next_page_url(self) -> str | None:
        """URL of the next page of results, or None on the last page.

        This is informational only; the client never follows it on its own.
        """
        if self.pagination is None:
            return None
        next_url = self.pagination.next
        if isinstance(next_url, list):
            return next_url[0] if next_url else None
        return next_url


def first_or_none(value: Any) -> Any:
    """Return the value itself, or the first element if it is a list."""
    if isinstance(value, list):
        return value[0] if value else None
    return value
