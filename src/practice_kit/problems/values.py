"""Problems dispatching on the kind of value."""

from typing import Union

from practice_kit.core import Day, TypeMismatchError

WEEKEND = frozenset({Day.SATURDAY, Day.SUNDAY})


def process_value(value: Union[str, int, float]) -> Union[int, float]:
    """
    Length of text, or double of a number.

    Text length is counted in UTF-16 code units, so characters outside the
    Basic Multilingual Plane (emoji and the like) count as two.

    Raises:
        TypeMismatchError: value is neither str nor a real number (bool included)
    """
    if isinstance(value, str):
        return len(value.encode("utf-16-le")) // 2
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value * 2
    raise TypeMismatchError(f"Expected text or number, got {type(value).__name__}")


def get_day_type(day: Day) -> str:
    """
    Classify a day as "Weekend" or "Weekday".

    Raises:
        TypeMismatchError: day is not a Day member (plain strings included)
    """
    if not isinstance(day, Day):
        raise TypeMismatchError(f"Expected Day, got {type(day).__name__}")
    return "Weekend" if day in WEEKEND else "Weekday"
