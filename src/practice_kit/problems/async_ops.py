"""Asynchronous problems."""

import asyncio
from typing import Union

from practice_kit.core import NegativeInputError

SQUARE_DELAY = 1.0  # seconds

Number = Union[int, float]


async def square_async(n: Number, delay: float = SQUARE_DELAY) -> Number:
    """Square n after waiting delay seconds.

    Negative input is rejected before the wait starts.

    Raises:
        NegativeInputError: n is below zero
    """
    if n < 0:
        raise NegativeInputError("Negative number not allowed")

    await asyncio.sleep(delay)
    return n * n
