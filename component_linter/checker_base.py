"""
Shared input and helpers for classifiers.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .config import LintConfig
from .issue import Finding, Issue, Severity


@dataclass(frozen=True)
class SourceFile:
    """One file's text, split into lines once and shared by every classifier."""
    path: str
    content: str
    lines: Tuple[str, ...]

    @classmethod
    def from_text(cls, path: str, content: str) -> "SourceFile":
        return cls(path=path, content=content, lines=tuple(content.split("\n")))

    @property
    def line_count(self) -> int:
        return len(self.lines)


Classifier = Callable[[SourceFile, LintConfig], List[Issue]]


def consolidate(
    findings: Sequence[Finding],
    category: str,
    message: str,
    severity: Severity = Severity.WARN,
    file_level: bool = False,
) -> List[Issue]:
    """Fold the findings of one category into a single issue anchored at the earliest line."""
    if not findings:
        return []
    anchor = 1 if file_level else min(f.line for f in findings)
    return [Issue(anchor, message, severity, category, file_level)]


def file_issue(category: str, message: str, severity: Severity = Severity.WARN) -> List[Issue]:
    """A file-level issue; these go in the per-file summary rather than inline."""
    return [Issue(1, message, severity, category, True)]
