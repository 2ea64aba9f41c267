"""Report adapters."""

from practice_kit.adapters.report.markdown_generator import MarkdownReportGenerator

__all__ = ["MarkdownReportGenerator"]
