"""Markdown report generator."""

from datetime import date

from practice_kit.core import ProblemResult, ReportGenerator


class MarkdownReportGenerator(ReportGenerator):
    """Generate markdown write-up from problem results."""

    async def generate(self, results: list[ProblemResult], report_date: date) -> str:
        """Generate markdown report."""
        title = f"# 🧩 Practice problems, {report_date.strftime('%d.%m.%Y')}"

        if not results:
            return f"{title}\n\nNo problems were run."

        lines = [
            title,
            "",
            f"Problems solved: {len(results)}",
            "",
        ]

        for result in sorted(results, key=lambda r: r.number):
            lines.extend(self._format_result(result))

        return "\n".join(lines)

    def _format_result(self, result: ProblemResult) -> list[str]:
        """Format single problem section."""
        return [
            f"## {result.number}. {result.title}",
            "",
            "```python",
            result.call,
            "```",
            "",
            f"**Output:** `{result.output}`",
            "",
            "---",
            "",
        ]
