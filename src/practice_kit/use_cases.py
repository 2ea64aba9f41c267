"""Business logic use cases."""

from datetime import date
from pathlib import Path

from practice_kit.config import Settings
from practice_kit.core import (
    Car,
    Day,
    NegativeInputError,
    Product,
    ProblemResult,
    RatedItem,
    ReportGenerator,
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


class ProblemShowcase:
    """Service that runs every problem on sample input and renders the results."""

    def __init__(self, settings: Settings, report_generator: ReportGenerator) -> None:
        self.settings = settings
        self.report_generator = report_generator

    async def run(self) -> list[ProblemResult]:
        """Run problems 1..8 in order."""
        results = [
            self._format_string(),
            self._filter_by_rating(),
            self._concatenate_arrays(),
            self._vehicles(),
            self._process_value(),
            self._most_expensive_product(),
            self._day_type(),
            await self._square_async(),
        ]
        return results

    async def generate_report(self, results: list[ProblemResult], report_date: date) -> str:
        """Render results with the configured report generator."""
        return await self.report_generator.generate(results, report_date)

    def save_report(self, report: str, output_path: Path) -> None:
        """Save report to file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report, encoding="utf-8")
        print(f"Report saved to {output_path}")

    def _format_string(self) -> ProblemResult:
        upper = format_string("Hello")
        lower = format_string("Hello", False)
        return ProblemResult(
            number=1,
            title="Format string",
            call='format_string("Hello")\nformat_string("Hello", False)',
            output=f"{upper!r}, {lower!r}",
        )

    def _filter_by_rating(self) -> ProblemResult:
        books = [
            RatedItem(title="Book A", rating=4.5),
            RatedItem(title="Book B", rating=3.2),
            RatedItem(title="Book C", rating=5.0),
        ]
        kept = filter_by_rating(books, min_rating=self.settings.min_rating)
        return ProblemResult(
            number=2,
            title="Filter by rating",
            call=f"filter_by_rating(books, min_rating={self.settings.min_rating:g})",
            output=", ".join(item.title for item in kept) or "(none)",
        )

    def _concatenate_arrays(self) -> ProblemResult:
        joined = concatenate_arrays([1, 2], [3], [4, 5])
        return ProblemResult(
            number=3,
            title="Concatenate arrays",
            call="concatenate_arrays([1, 2], [3], [4, 5])",
            output=repr(joined),
        )

    def _vehicles(self) -> ProblemResult:
        car = Car("Toyota", 2020, "Corolla")
        return ProblemResult(
            number=4,
            title="Vehicle and car",
            call='car = Car("Toyota", 2020, "Corolla")\ncar.get_info()\ncar.get_model()',
            output=f"{car.get_info()!r}, {car.get_model()!r}",
        )

    def _process_value(self) -> ProblemResult:
        return ProblemResult(
            number=5,
            title="Process value",
            call='process_value("hello")\nprocess_value(10)',
            output=f"{process_value('hello')}, {process_value(10)}",
        )

    def _most_expensive_product(self) -> ProblemResult:
        products = [
            Product(name="Pen", price=10),
            Product(name="Notebook", price=25),
            Product(name="Bag", price=50),
        ]
        product = get_most_expensive_product(products)
        return ProblemResult(
            number=6,
            title="Most expensive product",
            call="get_most_expensive_product(products)",
            output=product.name if product else "None",
        )

    def _day_type(self) -> ProblemResult:
        return ProblemResult(
            number=7,
            title="Day type",
            call="get_day_type(Day.MONDAY)\nget_day_type(Day.SUNDAY)",
            output=f"{get_day_type(Day.MONDAY)!r}, {get_day_type(Day.SUNDAY)!r}",
        )

    async def _square_async(self) -> ProblemResult:
        delay = self.settings.square_delay
        squared = await square_async(5, delay=delay)

        try:
            await square_async(-1, delay=delay)
            rejected = "no error"
        except NegativeInputError as e:
            rejected = f"{type(e).__name__}: {e}"

        return ProblemResult(
            number=8,
            title="Square async",
            call="await square_async(5)\nawait square_async(-1)",
            output=f"{squared}, {rejected}",
        )
