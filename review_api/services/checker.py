"""Checker service: wraps component_linter and maps to API models."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from component_linter.config import LintConfig
from component_linter.issue import Issue
from component_linter.main_checker import ComponentLinter
from component_linter.reporter import ReportGenerator

from ..config import get_lint_config
from ..schemas import FileIssues, IssueOut, SourceIn, Thresholds

logger = logging.getLogger(__name__)


def _issue_to_out(i: Issue, file_path: Optional[str] = None) -> IssueOut:
    return IssueOut(
        line=i.line,
        message=i.message,
        severity=i.severity.value,
        category=i.category,
        file_level=i.file_level,
        file_path=file_path,
    )


def resolve_config(thresholds: Optional[Thresholds] = None) -> LintConfig:
    """Environment thresholds with any per-request overrides applied."""
    base = get_lint_config()
    if thresholds is None:
        return base
    overrides = thresholds.model_dump(exclude_none=True)
    if not overrides:
        return base
    return LintConfig.from_mapping({**base.as_dict(), **overrides})


class CheckerService:
    """Wraps ComponentLinter for use by the API."""

    def analyze_code(
        self, code: str, filename: str, thresholds: Optional[Thresholds] = None
    ) -> List[IssueOut]:
        """Run rule-based checks on raw code. The filename only drives routing."""
        issues = ComponentLinter(resolve_config(thresholds)).check_source(filename, code)
        logger.info("%s: %d issue(s)", filename, len(issues))
        return [_issue_to_out(i, filename) for i in issues]

    def analyze_file(self, file_path: Path, thresholds: Optional[Thresholds] = None) -> List[IssueOut]:
        """Run rule-based checks on a file path."""
        issues = ComponentLinter(resolve_config(thresholds)).check_file(file_path)
        logger.info("%s: %d issue(s)", file_path, len(issues))
        return [_issue_to_out(i, str(file_path)) for i in issues]

    def analyze_sources(
        self, sources: Sequence[SourceIn], thresholds: Optional[Thresholds] = None
    ) -> List[FileIssues]:
        """Run rule-based checks on several in-memory files with one config."""
        linter = ComponentLinter(resolve_config(thresholds))
        results: List[FileIssues] = []
        for source in sources:
            issues = linter.check_source(source.filename, source.code)
            results.append(
                FileIssues(
                    file_path=source.filename,
                    issues=[_issue_to_out(i, source.filename) for i in issues],
                )
            )
        return results

    @staticmethod
    def summarize(issues: List[IssueOut]) -> dict:
        """Issue count per category."""
        return ReportGenerator.generate_summary(issues)
