"""Small practice problems: strings, sequences, classes, enums and async."""

from practice_kit.core import (
    Car,
    Day,
    NegativeInputError,
    Product,
    RatedItem,
    TypeMismatchError,
    Vehicle,
)
from practice_kit.problems import (
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
    square_async,
)

__all__ = [
    "RatedItem",
    "Product",
    "Vehicle",
    "Car",
    "Day",
    "NegativeInputError",
    "TypeMismatchError",
    "format_string",
    "filter_by_rating",
    "concatenate_arrays",
    "process_value",
    "get_most_expensive_product",
    "get_day_type",
    "square_async",
]
