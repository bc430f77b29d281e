"""Request parameter validation.

All checks run before the store is touched.
"""

import re
from collections.abc import Iterable

from moviedb.services.catalog.errors import InvalidArgument
from moviedb.services.catalog.pagination import PER_PAGE

_YEAR_PATTERN = re.compile(r"\d{4}", re.ASCII)
_INTEGER_PATTERN = re.compile(r"[+-]?\d+(\.0*)?", re.ASCII)

# Largest page whose row offset fits a signed 64-bit integer
MAX_PAGE = (2**63 - 1) // PER_PAGE + 1


def parse_page(raw: str | int | None) -> int:
    """Parse the page query parameter.

    Integral decimal text is accepted ("2", "2.0"); missing means 1.
    Pages past MAX_PAGE are refused like any other bad value.

    Args:
        raw: Raw page value.

    Returns:
        Page number, at least 1.

    Raises:
        InvalidArgument: If the value is not an integer in 1..MAX_PAGE.
    """
    if raw is None:
        return 1
    if isinstance(raw, bool):
        raise InvalidArgument("Invalid page format. page must be a number.")
    if isinstance(raw, int):
        page = raw
    else:
        text = raw.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            raise InvalidArgument("Invalid page format. page must be a number.")
        page = int(text.split(".", 1)[0])
    if not 1 <= page <= MAX_PAGE:
        raise InvalidArgument("Invalid page format. page must be a number.")
    return page


def parse_year(raw: str | None) -> int | None:
    """Parse the year query parameter.

    Args:
        raw: Raw year value.

    Returns:
        Year as int, or None when absent or empty.

    Raises:
        InvalidArgument: If the value is not exactly four digits.
    """
    if raw is None or raw == "":
        return None
    if not _YEAR_PATTERN.fullmatch(raw):
        raise InvalidArgument("Invalid year format. Format must be yyyy.")
    return int(raw)


def reject_query_params(names: Iterable[str]) -> None:
    """Refuse any query parameter on parameter-free endpoints.

    Args:
        names: Names of the query parameters supplied.

    Raises:
        InvalidArgument: Listing the offending names.
    """
    offending = list(dict.fromkeys(names))
    if offending:
        raise InvalidArgument(
            f"Invalid query parameters: {', '.join(offending)}. "
            "Query parameters are not permitted."
        )
