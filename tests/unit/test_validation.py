"""Unit tests for request parameter validation."""

import pytest

from moviedb.services.catalog.errors import InvalidArgument
from moviedb.services.catalog.validation import MAX_PAGE, parse_page, parse_year, reject_query_params

PAGE_MESSAGE = "Invalid page format. page must be a number."
YEAR_MESSAGE = "Invalid year format. Format must be yyyy."


class TestParsePage:
    """Tests for parse_page."""

    @staticmethod
    def test_missing_defaults_to_first_page() -> None:
        """No page means page 1."""
        assert parse_page(None) == 1

    @staticmethod
    @pytest.mark.parametrize(("raw", "expected"), [("1", 1), ("12", 12), ("2.0", 2), (" 3 ", 3), (4, 4)])
    def test_accepted_values(raw, expected: int) -> None:
        """Integral text and ints are accepted."""
        assert parse_page(raw) == expected

    @staticmethod
    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "1e2", "0", "-1", "٣", "2 0", 0, -5, True])
    def test_rejected_values(raw) -> None:
        """Anything but a positive integer is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            parse_page(raw)

        assert exc_info.value.message == PAGE_MESSAGE
        assert exc_info.value.status_code == 400

    @staticmethod
    def test_largest_page() -> None:
        """The last page whose offset fits a 64-bit integer is accepted."""
        assert parse_page(MAX_PAGE) == MAX_PAGE
        assert parse_page(str(MAX_PAGE)) == MAX_PAGE

    @staticmethod
    @pytest.mark.parametrize("raw", ["99999999999999999999", MAX_PAGE + 1, str(MAX_PAGE + 1)])
    def test_oversized_pages_rejected(raw) -> None:
        """Pages whose offset would overflow the store are rejected."""
        with pytest.raises(InvalidArgument, match=PAGE_MESSAGE):
            parse_page(raw)


class TestParseYear:
    """Tests for parse_year."""

    @staticmethod
    def test_missing_year() -> None:
        """No year means no year filter."""
        assert parse_year(None) is None

    @staticmethod
    def test_empty_year() -> None:
        """An empty year is the same as no year."""
        assert parse_year("") is None

    @staticmethod
    @pytest.mark.parametrize(("raw", "expected"), [("1972", 1972), ("0999", 999), ("2024", 2024)])
    def test_four_digits(raw: str, expected: int) -> None:
        """Exactly four ASCII digits are accepted."""
        assert parse_year(raw) == expected

    @staticmethod
    @pytest.mark.parametrize("raw", ["19aa", "123", "12345", " ", " 1972", "1972\n", "١٩٧٢"])
    def test_rejected_years(raw: str) -> None:
        """Any other shape is rejected."""
        with pytest.raises(InvalidArgument, match=YEAR_MESSAGE):
            parse_year(raw)


class TestRejectQueryParams:
    """Tests for reject_query_params."""

    @staticmethod
    def test_no_params() -> None:
        """No parameters is accepted."""
        reject_query_params([])

    @staticmethod
    def test_lists_offending_names() -> None:
        """Every supplied name is listed once, in order."""
        with pytest.raises(InvalidArgument) as exc_info:
            reject_query_params(["a", "b", "a"])

        assert exc_info.value.message == (
            "Invalid query parameters: a, b. Query parameters are not permitted."
        )
