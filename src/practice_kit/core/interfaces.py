"""Core interfaces."""

from abc import ABC, abstractmethod
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from practice_kit.core.entities import ProblemResult


class Describable(ABC):
    """Anything that can describe itself as text."""

    @abstractmethod
    def get_info(self) -> str:
        """Return a human readable description."""
        pass


class ReportGenerator(ABC):
    """Interface for rendering problem results."""

    @abstractmethod
    async def generate(self, results: list["ProblemResult"], report_date: date) -> str:
        """Generate report from problem results."""
        pass
