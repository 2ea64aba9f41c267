"""CLI entry point for practice kit."""

import asyncio
import math
from datetime import date, datetime
from pathlib import Path
from typing import NoReturn, Optional, Union

import typer
import yaml

from practice_kit.adapters.report import MarkdownReportGenerator
from practice_kit.config import Settings, get_settings
from practice_kit.core import Day, PracticeKitError
from practice_kit.problems import format_string, get_day_type, process_value, square_async
from practice_kit.use_cases import ProblemShowcase

cli = typer.Typer(help="Run practice problems from the command line.", no_args_is_help=True)


def app() -> None:
    """CLI entry point."""
    cli()


def _fail(message: str) -> NoReturn:
    print(f"⚠️  {message}")
    raise typer.Exit(code=1)


def _parse_number(raw: str) -> Union[int, float, None]:
    """Parse int or float, None when raw is not a number.

    Exits on nan and infinity.
    """
    for cast in (int, float):
        try:
            number = cast(raw)
        except ValueError:
            continue
        if not math.isfinite(number):
            _fail(f"Not a finite number: {raw!r}")
        return number
    return None


def _load_settings(config: Path) -> Settings:
    """Load settings, exiting with a warning on an invalid config."""
    try:
        return get_settings(config)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        _fail(f"Invalid config: {e}")


@cli.command()
def demo(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to write the markdown report"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
) -> None:
    """Run all problems on sample input and write a markdown report."""
    asyncio.run(async_demo(output, config))


async def async_demo(output: Optional[Path], config: Path) -> None:
    """Async implementation of demo command."""
    settings = _load_settings(config)

    print("\n" + "=" * 70)
    print("🧩 PRACTICE KIT - problem showcase")
    print("=" * 70)
    print(f"\n⚙️  Settings:")
    print(f"  • Min rating: {settings.min_rating:g}")
    print(f"  • Square delay: {settings.square_delay:g}s")

    showcase = ProblemShowcase(settings, MarkdownReportGenerator())
    results = await showcase.run()

    for result in results:
        print(f"\n{result.number}. {result.title}")
        for line in result.call.splitlines():
            print(f"  >>> {line}")
        print(f"  └─ {result.output}")

    report_date = date.today()
    report = await showcase.generate_report(results, report_date)

    if output is None:
        timestamp = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
        output = settings.reports_dir / f"{timestamp}_practice.md"

    showcase.save_report(report, output)

    print("\n" + "=" * 70)
    print(f"✅ Done: {len(results)} problems")
    print("=" * 70)


@cli.command("format")
def format_command(
    text: str,
    lower: bool = typer.Option(False, "--lower", help="Lower-case instead of upper-case"),
) -> None:
    """Upper-case (or lower-case) TEXT."""
    print(format_string(text, to_upper=not lower))


@cli.command()
def day(name: str) -> None:
    """Tell whether NAME is a weekday or the weekend."""
    try:
        parsed = Day.parse(name)
    except ValueError as e:
        _fail(str(e))
    print(get_day_type(parsed))


@cli.command(context_settings={"ignore_unknown_options": True})
def value(raw: str = typer.Argument(..., metavar="VALUE")) -> None:
    """Double a number, or count the characters of text."""
    number = _parse_number(raw)
    try:
        print(process_value(raw if number is None else number))
    except PracticeKitError as e:
        _fail(str(e))


@cli.command(context_settings={"ignore_unknown_options": True})
def square(
    raw: str = typer.Argument(..., metavar="N"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
) -> None:
    """Square N after the configured delay."""
    number = _parse_number(raw)
    if number is None:
        _fail(f"Not a number: {raw!r}")

    settings = _load_settings(config)
    try:
        print(asyncio.run(square_async(number, delay=settings.square_delay)))
    except PracticeKitError as e:
        _fail(str(e))


if __name__ == "__main__":
    app()
