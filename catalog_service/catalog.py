from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Iterator, Optional, Union

PriceInput = Union[int, float, str, Decimal]


class ItemNotFound(KeyError):
    """Raised when an item name has no entry in the catalog."""

    def __init__(self, item: str):
        super().__init__(item)
        self.item = item

    def __str__(self) -> str:
        return f"No such item: {self.item!r}"


def to_price(value: PriceInput) -> Decimal:
    """Converts a literal price into a non-negative Decimal."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    try:
        # str() keeps floats like 10.5 from dragging in binary noise
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid price: {value!r}") from None
    if not price.is_finite() or price < 0:
        raise ValueError(f"Invalid price: {value!r}")
    return price


def format_price(price: Decimal) -> str:
    """Renders a price as dollars with two decimal places, e.g. $50.00."""
    return f"${price:.2f}"


class Catalog(Mapping):
    """
    Read-only mapping of item name to price.

    Built once from a literal set of entries; there is no way to add, change
    or remove an item afterwards.
    """

    def __init__(self, entries: Optional[Mapping[str, PriceInput]] = None):
        prices = {}
        for item, value in (entries or {}).items():
            if not isinstance(item, str):
                raise ValueError(f"Item names must be strings, got {item!r}")
            prices[item] = to_price(value)
        self._prices = MappingProxyType(prices)

    def __getitem__(self, item: str) -> Decimal:
        return self._prices[item]

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"Catalog({dict(self._prices)!r})"

    def price_of(self, item: str) -> Decimal:
        try:
            return self._prices[item]
        except KeyError:
            raise ItemNotFound(item) from None


DEFAULT_CATALOG = Catalog({"shoes": 50, "socks": 4})
