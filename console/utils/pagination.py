"""Pagination and search parameters shared by list views"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 20, 50, 100)


@dataclass(frozen=True)
class PaginationRequest:
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: Optional[str] = None
    is_ascending: Optional[bool] = None
    search_term: Optional[str] = None

    @classmethod
    def from_query_params(cls, params, default_sort: Optional[str] = None,
                          default_ascending: Optional[bool] = None) -> "PaginationRequest":
        """
        Build from console query params (page, page_size, sort_by, ascending, search).
        Bad numbers fall back to defaults; page sizes outside the allowed options use the default.
        """
        try:
            page_number = max(1, int(params.get('page', 1)))
        except (TypeError, ValueError):
            page_number = 1

        try:
            page_size = int(params.get('page_size', DEFAULT_PAGE_SIZE))
        except (TypeError, ValueError):
            page_size = DEFAULT_PAGE_SIZE
        if page_size not in PAGE_SIZE_OPTIONS:
            page_size = DEFAULT_PAGE_SIZE

        ascending = params.get('ascending')
        if ascending is None:
            is_ascending = default_ascending
        else:
            is_ascending = str(ascending).lower() in ('1', 'true', 'yes')

        return cls(
            page_number=page_number,
            page_size=page_size,
            sort_by=params.get('sort_by') or default_sort,
            is_ascending=is_ascending,
            search_term=(params.get('search') or '').strip() or None,
        )

    def to_query(self) -> dict:
        """Query parameters in the remote API's naming"""
        query = {
            'PageNumber': str(self.page_number),
            'PageSize': str(self.page_size),
        }
        if self.sort_by:
            query['SortBy'] = self.sort_by
        if self.is_ascending is not None:
            query['IsAscending'] = 'true' if self.is_ascending else 'false'
        if self.search_term:
            query['SearchTerm'] = self.search_term
        return query

    def cache_key(self) -> list:
        return [self.page_number, self.page_size, self.sort_by, self.is_ascending, self.search_term]
