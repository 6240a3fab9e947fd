"""Pagination settings for data queries and paged response envelopes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from kuekit.numbers import str_to_int

FIRST_PAGE = 1
PAGINATION_MIN_LIMIT = 10
SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"
DEFAULT_SORT_COLUMN = "id"
DEFAULT_SORT_DIRECTION = "asc"

_ZERO_DECIMAL = re.compile(r"^(.*\d)\.0*$")


@dataclass
class Datapaging:
    """Limit, page, ordering, filter and date-range settings for a query."""

    date_in_timestamp: bool = False
    limit: int = 0
    page: int = 0
    # Entries of the form "<field> <asc|desc>", e.g. ["distance desc"].
    order_by: list[str] = field(default_factory=list)
    order_by_multi: list[str] = field(default_factory=list)
    filter_column: str = ""
    filter_value: str = ""
    date_latest: datetime | None = None
    date_earliest: datetime | None = None
    date_between_prefix: str = ""

    def is_nil(self) -> bool:
        """Return True when no limit, page or ordering is set."""
        return not (self.with_limit() or self.with_page_offset() or self.with_order_by())

    def get_offset(self) -> int:
        """Return the number of rows to skip for the current page."""
        return (self.page - 1) * self.limit

    def with_limit(self) -> bool:
        return self.limit != 0

    def with_page_offset(self) -> bool:
        return self.page != 0

    def with_order_by(self) -> bool:
        return len(self.order_by) > 0

    def with_order_by_multi(self) -> bool:
        return len(self.order_by_multi) > 0

    def between(self, earliest: datetime | None, latest: datetime | None) -> Datapaging:
        """Return a copy restricted to the given date range."""
        return replace(self, date_earliest=earliest, date_latest=latest)

    def with_date_between(self) -> bool:
        """True when a date range is set and compared as Unix seconds."""
        return (
            self.date_earliest is not None
            and self.date_latest is not None
            and not self.date_in_timestamp
        )

    def with_date_time_between(self) -> bool:
        """True when a date range is set and compared as timestamps."""
        return (
            self.date_earliest is not None
            and self.date_latest is not None
            and self.date_in_timestamp
        )

    def build_query(self, sql_query: str) -> str:
        """Append ORDER BY, LIMIT and OFFSET clauses to a raw SQL query."""
        if self.with_order_by():
            sql_query += " ORDER BY " + ", ".join(self.order_by)
        if self.with_limit():
            sql_query += f" LIMIT {self.limit}"
        if self.with_page_offset():
            sql_query += f" OFFSET {self.limit * self.page - self.limit}"
        return sql_query


@dataclass
class DataPagingResponse:
    """A page of records with its position and totals."""

    page_number: int = 0
    page_size: int = 0
    limit: int = 0
    total_record_count: int = 0
    records: Any = None

    def set_page_size(self) -> DataPagingResponse:
        """Compute the number of pages from the total and the limit."""
        if self.limit != 0:
            self.page_size = math.ceil(self.total_record_count / self.limit)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "page_size": self.page_size,
            "limit": self.limit,
            "total_record_count": self.total_record_count,
            "records": self.records,
        }


def new_paging(limit: int, page: int, order_by: list[str]) -> Datapaging:
    """Create pagination with a limit, a page and ordering."""
    return Datapaging(limit=limit, page=page, order_by=list(order_by))


def no_pagination() -> Datapaging:
    """Return empty pagination."""
    return Datapaging()


def _prepare_sort_by(param: str, allowed_sort_columns: list[str]) -> str:
    return param if param in allowed_sort_columns else DEFAULT_SORT_COLUMN


def _prepare_sort_direction(param: str) -> str:
    return param if param in (SORT_ASCENDING, SORT_DESCENDING) else SORT_ASCENDING


def _lenient_int(text: str) -> int:
    match = _ZERO_DECIMAL.match(text)
    if match:
        text = match.group(1)
    return str_to_int(text, 0)


def prepare_pagination(params: dict[str, str], allowed_sort_columns: list[str]) -> Datapaging:
    """Build pagination from query parameters.

    Reads search, sort_by, sort_direction, page and limit. Unknown sort
    columns fall back to "id", unknown directions to "asc", pages below 1
    to 1, and a missing or non-positive limit to 10.
    """
    search = params.get("search", "")
    sort_by = params.get("sort_by", "")
    sort_direction = params.get("sort_direction", "")
    page = _lenient_int(params.get("page", ""))

    limit = PAGINATION_MIN_LIMIT
    limit_text = params.get("limit", "")
    if limit_text:
        parsed = str_to_int(limit_text, 0)
        if parsed > 0:
            limit = parsed

    page = max(page, FIRST_PAGE)

    return Datapaging(
        limit=limit,
        page=page,
        order_by=[
            _prepare_sort_by(sort_by, allowed_sort_columns),
            _prepare_sort_direction(sort_direction),
        ],
        filter_value=search,
    )