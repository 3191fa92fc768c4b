"""Format lint results as Markdown for a code-review summary comment."""

from datetime import datetime
from typing import List

from .schemas import IssueOut


def _title_case(s: str) -> str:
    """e.g. unused-import -> Unused Import."""
    if not s:
        return s
    return s.replace("-", " ").replace("_", " ").strip().lower().title()


def _issue_block_md(i: IssueOut, with_line: bool = True) -> List[str]:
    """One issue as Markdown: Line N · Category · Severity, then the message."""
    cat = _title_case(i.category)
    sev = _title_case(i.severity)
    lines = []
    if with_line:
        lines.append(f"**Line {i.line} · {cat} · {sev}**")
    else:
        lines.append(f"**{cat} · {sev}**")
    lines.append("")
    lines.append(i.message)
    lines.append("")
    return lines


def format_text_report(file_path: str, issues: List[IssueOut]) -> str:
    """Single-file results: file-level issues in a summary, the rest listed by line."""
    lines = []
    lines.append(f"# Results: {file_path}")
    lines.append("")
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    error_count = sum(1 for i in issues if i.severity == "error")
    warning_count = sum(1 for i in issues if i.severity == "warn")
    lines.append(f"**{len(issues)}** issue(s) found ({error_count} error(s), {warning_count} warning(s)).")
    lines.append("")

    if not issues:
        lines.append("No issues found.")
        lines.append("")
        return "\n".join(lines)

    summary = [i for i in issues if i.file_level]
    inline = [i for i in issues if not i.file_level]

    if summary:
        lines.append("## Summary")
        lines.append("")
        for i in summary:
            lines.extend(_issue_block_md(i, with_line=False))

    if inline:
        lines.append("## Issues")
        lines.append("")
        for i in sorted(inline, key=lambda issue: issue.line):
            lines.extend(_issue_block_md(i))

    return "\n".join(lines)
