"""Problems working on sequences of values and records."""

from itertools import chain
from typing import Iterable, Optional, Sequence, TypeVar

from practice_kit.core import Product, RatedItem

T = TypeVar("T")

MIN_RATING = 4


def filter_by_rating(items: Iterable[RatedItem], min_rating: float = MIN_RATING) -> list[RatedItem]:
    """
    Keep items rated at least min_rating.

    Args:
        items: Rated items to filter
        min_rating: Lowest rating that is kept (inclusive)

    Returns:
        New list with matching items in their original order
    """
    return [item for item in items if item.rating >= min_rating]


def concatenate_arrays(*arrays: Sequence[T]) -> list[T]:
    """Join sequences into one list, one level deep."""
    return list(chain.from_iterable(arrays))


def get_most_expensive_product(products: Iterable[Product]) -> Optional[Product]:
    """
    Find the product with the highest price.

    Returns None for no products. On a tie the first product wins.
    """
    most_expensive: Optional[Product] = None

    for product in products:
        # Strict comparison keeps the earliest of equally priced products
        if most_expensive is None or product.price > most_expensive.price:
            most_expensive = product

    return most_expensive
