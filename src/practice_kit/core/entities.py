"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum

from practice_kit.core.interfaces import Describable


@dataclass
class RatedItem:
    """Item with a numeric rating, e.g. a book or a movie."""

    title: str
    rating: float


@dataclass
class Product:
    """Product with a price."""

    name: str
    price: float


@dataclass(frozen=True)
class Vehicle(Describable):
    """Vehicle with make and year, fixed at construction."""

    make: str
    year: int

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True)
class Car(Vehicle):
    """Car is a vehicle that also knows its model."""

    model: str

    def get_model(self) -> str:
        return f"Model: {self.model}"


class Day(str, Enum):
    """Day of the week."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, name: str) -> "Day":
        """Look up a day by its name, ignoring case and surrounding spaces."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown day: {name!r}") from None


@dataclass
class ProblemResult:
    """Outcome of running one practice problem on its sample input."""

    number: int
    title: str
    call: str
    output: str
