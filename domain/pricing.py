"""
Domain: prices and price ordering.

Prices travel as decimal strings ("18000.00") and are compared numerically,
never lexically.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from .errors import InvalidPrice, InvalidSortOrder

_PRICE_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")

T = TypeVar("T")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @staticmethod
    def coerce(value: Union["SortOrder", str, None]) -> Optional["SortOrder"]:
        """Accept a SortOrder, its string value, or None (no sorting)."""

        if value is None or isinstance(value, SortOrder):
            return value
        try:
            return SortOrder(str(value).lower())
        except ValueError:
            raise InvalidSortOrder(f"Sort order must be 'asc' or 'desc', got '{value}'") from None


def parse_price(value: Union[str, Decimal, int]) -> Decimal:
    """
    Parse a price into a Decimal.

    Accepts a non-negative number with at most two fractional digits.
    """

    if isinstance(value, Decimal):
        text = format(value, "f")
    else:
        text = str(value).strip()

    if not _PRICE_PATTERN.match(text):
        raise InvalidPrice(
            f"Price must be a valid decimal number with up to 2 decimal places, got '{value}'"
        )

    try:
        return Decimal(text)
    except InvalidOperation:
        raise InvalidPrice(f"Price is not a valid decimal: '{value}'") from None


def sort_by_price(
    items: Iterable[T],
    price_of: Callable[[T], Decimal],
    order: Union[SortOrder, str, None],
) -> List[T]:
    """Return a new list ordered by price (stable); unchanged order when `order` is None."""

    resolved = SortOrder.coerce(order)
    result = list(items)
    if resolved is None:
        return result
    # sorted() is stable for both directions when reverse=True
    return sorted(result, key=price_of, reverse=resolved is SortOrder.DESC)


__all__ = ["SortOrder", "parse_price", "sort_by_price"]
