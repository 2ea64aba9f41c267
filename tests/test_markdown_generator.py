"""Tests for markdown report generator."""

from datetime import date

import pytest

from practice_kit.adapters.report import MarkdownReportGenerator
from practice_kit.core import ProblemResult


@pytest.mark.asyncio
async def test_generate_empty() -> None:
    """Test report without results."""
    generator = MarkdownReportGenerator()

    report = await generator.generate([], date(2024, 5, 1))

    assert "01.05.2024" in report
    assert "No problems were run." in report


@pytest.mark.asyncio
async def test_generate_sections_in_problem_order() -> None:
    """Test each result gets a section, ordered by number."""
    generator = MarkdownReportGenerator()
    results = [
        ProblemResult(number=2, title="Second", call="second()", output="2"),
        ProblemResult(number=1, title="First", call="first()\nagain()", output="'ONE'"),
    ]

    report = await generator.generate(results, date(2024, 5, 1))

    assert "Problems solved: 2" in report
    assert report.index("## 1. First") < report.index("## 2. Second")
    assert "```python\nfirst()\nagain()\n```" in report
    assert "**Output:** `'ONE'`" in report
