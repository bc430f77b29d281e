"""Normalizers for semi-structured catalog fields.

Ratings come from several bodies with their own encodings and the
characters column holds JSON of uneven quality. None of these
functions raise: bad input degrades to a safe default.
"""

import json
import math

RatingValue = int | float | str | None


def _parse_number(text: str) -> int | float | None:
    """Parse text as a non-negative finite number.

    Args:
        text: Candidate numeric text.

    Returns:
        int for integral values ("7", "7.0"), float otherwise, None if
        not numeric. Digit separators ("1_000") are not numeric.
    """
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def normalize_rating(value: RatingValue) -> RatingValue:
    """Convert a raw rating to a number when it encodes one.

    "7.5/10" keeps the numerator, "85%" drops the percent sign.
    Anything still not numeric is returned as text, unchanged
    apart from that stripping.

    Args:
        value: Raw rating value from the store.

    Returns:
        Parsed number, or the (stripped) original text.
    """
    if not isinstance(value, str):
        return value

    text = value
    if "/" in text:
        text = text.split("/", 1)[0]
    if text.endswith("%"):
        text = text[:-1]

    number = _parse_number(text)
    if number is None or number < 0:
        return text
    return number


def cast_rating(value: RatingValue, digits: int | None = None) -> int | float | None:
    """Cast a raw rating to a number, or None.

    Args:
        value: Raw rating value from the store.
        digits: Decimal places to keep. None casts to int.

    Returns:
        Numeric rating or None when the value is not numeric.
    """
    number = normalize_rating(value)
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        return None
    if digits is None:
        return int(number)
    return round(float(number), digits)


def decode_characters(raw: str | None) -> list[str]:
    """Decode the JSON characters field of a credit.

    Args:
        raw: JSON array of character names, as stored.

    Returns:
        Character names; empty list for null, empty or malformed input.
    """
    if raw is None or not isinstance(raw, str) or not raw.strip():
        return []
    try:
        decoded = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(decoded, list):
        return []
    return [name for name in decoded if isinstance(name, str)]


def split_genres(raw: str | None) -> list[str]:
    """Explode the comma-delimited genre column.

    Args:
        raw: Stored genre string, e.g. "Crime,Drama".

    Returns:
        Genre names in source order, without empty entries.
    """
    if not raw:
        return []
    return [genre.strip() for genre in raw.split(",") if genre.strip()]
