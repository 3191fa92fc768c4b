"""
Report generation for the component linter.
"""

from pathlib import Path
from typing import Dict, List, Union

from .issue import Issue, Severity
from .main_checker import split_issues


class ReportGenerator:
    """Generate reports from issues."""

    @staticmethod
    def generate_text_report(issues: List[Issue], file_path: Union[str, Path]) -> str:
        """Generate a text report: file-level summary first, then inline issues by line."""
        if not issues:
            return f"\n✓ No issues found in {file_path}\n"

        report = [f"\n{'='*80}"]
        report.append(f"Component Lint Report: {file_path}")
        report.append(f"{'='*80}\n")

        summary, inline = split_issues(issues)

        if summary:
            report.append(f"SUMMARY ({len(summary)}):")
            report.append("-" * 80)
            for issue in summary:
                report.append(f"  [{issue.severity.value}] {issue.category}")
                report.extend(f"    {text}" for text in issue.message.split("\n"))
                report.append("")

        if inline:
            report.append(f"INLINE ({len(inline)}):")
            report.append("-" * 80)
            for issue in sorted(inline, key=lambda i: i.line):
                report.append(f"  Line {issue.line} [{issue.severity.value}] {issue.category}")
                report.extend(f"    {text}" for text in issue.message.split("\n"))
                report.append("")

        errors = sum(1 for i in issues if i.severity == Severity.ERROR)
        warnings = sum(1 for i in issues if i.severity == Severity.WARN)
        report.append(f"\nTotal: {errors} errors, {warnings} warnings")
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def generate_summary(issues: List[Issue]) -> Dict[str, int]:
        """Generate a summary count by category."""
        summary: Dict[str, int] = {}
        for issue in issues:
            summary[issue.category] = summary.get(issue.category, 0) + 1
        return summary
