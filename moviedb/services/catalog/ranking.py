"""Category ranking of movie credits."""

from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import TypeVar

T = TypeVar("T")

# Most preferred first.
CATEGORY_PREFERENCE = (
    "production_designer",
    "editor",
    "cinematographer",
    "producer",
    "writer",
    "director",
    "actor",
    "actress",
)

UNRANKED = 999

CATEGORY_RANKS = MappingProxyType({category: rank for rank, category in enumerate(CATEGORY_PREFERENCE)})


def category_rank(category: str | None) -> int:
    """Rank of a credit category, UNRANKED when not in the preference table."""
    if category is None:
        return UNRANKED
    return CATEGORY_RANKS.get(category, UNRANKED)


def rank_credits(
    credits: Iterable[T],
    key: Callable[[T], str | None] = lambda credit: credit.category,
) -> list[T]:
    """Order credits by category preference.

    The sort is stable and has no secondary key: credits sharing a
    rank, unranked categories included, keep their incoming order.

    Args:
        credits: Credits in join order.
        key: Extracts the category of a credit.

    Returns:
        New list ordered by category rank.
    """
    return sorted(credits, key=lambda credit: category_rank(key(credit)))
