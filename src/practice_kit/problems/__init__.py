"""Practice problems."""

from practice_kit.problems.async_ops import SQUARE_DELAY, square_async
from practice_kit.problems.sequences import (
    MIN_RATING,
    concatenate_arrays,
    filter_by_rating,
    get_most_expensive_product,
)
from practice_kit.problems.strings import format_string
from practice_kit.problems.values import get_day_type, process_value

__all__ = [
    "format_string",
    "filter_by_rating",
    "concatenate_arrays",
    "process_value",
    "get_most_expensive_product",
    "get_day_type",
    "square_async",
    "MIN_RATING",
    "SQUARE_DELAY",
]
