"""Pagination metadata for movie search results."""

import math

from pydantic import BaseModel, ConfigDict, Field

PER_PAGE = 100


def page_offset(page: int, per_page: int = PER_PAGE) -> int:
    """Calculate SQL offset from a 1-indexed page number."""
    return (page - 1) * per_page


def last_page(total: int, per_page: int = PER_PAGE) -> int:
    """Number of pages needed for total rows, 0 when there are none."""
    return math.ceil(total / per_page) if total > 0 else 0


class Pagination(BaseModel):
    """Pagination block of a search response.

    Serialized with camelCase keys; `from_` is exposed as `from`.
    """

    model_config = ConfigDict(populate_by_name=True)

    total: int
    last_page: int = Field(alias="lastPage")
    per_page: int = Field(alias="perPage")
    current_page: int = Field(alias="currentPage")
    from_: int = Field(alias="from")
    to: int
    prev_page: int | None = Field(alias="prevPage")
    next_page: int | None = Field(alias="nextPage")

    @classmethod
    def compute(
        cls,
        total: int,
        page: int,
        returned: int,
        per_page: int = PER_PAGE,
    ) -> "Pagination":
        """Build pagination from total count and the rows of one page.

        A page past the last one is not an error: it yields an
        empty slice with no next page.

        Args:
            total: Total rows matching the filters.
            page: Requested page (1-indexed).
            returned: Rows actually returned for this page.
            per_page: Page size.

        Returns:
            Pagination metadata.
        """
        offset = page_offset(page, per_page)
        pages = last_page(total, per_page)
        return cls(
            total=total,
            last_page=pages,
            per_page=per_page,
            current_page=page,
            from_=offset,
            to=offset + returned,
            prev_page=page - 1 if page > 1 else None,
            next_page=page + 1 if page < pages else None,
        )
