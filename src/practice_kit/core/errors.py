"""Errors raised by the practice problems."""


class PracticeKitError(Exception):
    """Base class for practice-kit errors."""


class NegativeInputError(PracticeKitError, ValueError):
    """Input number was negative where only non-negative numbers are allowed."""


class TypeMismatchError(PracticeKitError, TypeError):
    """Value is neither text nor a number."""
