"""Core domain layer."""

from practice_kit.core.entities import Car, Day, Product, ProblemResult, RatedItem, Vehicle
from practice_kit.core.errors import NegativeInputError, PracticeKitError, TypeMismatchError
from practice_kit.core.interfaces import Describable, ReportGenerator

__all__ = [
    "RatedItem",
    "Product",
    "Vehicle",
    "Car",
    "Day",
    "ProblemResult",
    "Describable",
    "ReportGenerator",
    "PracticeKitError",
    "NegativeInputError",
    "TypeMismatchError",
]
