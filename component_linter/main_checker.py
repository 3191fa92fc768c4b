"""
Main checker class that runs every classifier over a file.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .checker_base import Classifier, SourceFile
from .checkers import CLASSIFIERS
from .config import DEFAULT_CONFIG, LintConfig
from .issue import Issue, Severity

logger = logging.getLogger(__name__)


class ComponentLinter:
    """Runs the classifier registry over one file at a time.

    Holds only the immutable config and the classifier list, so one instance
    can check any number of files in any order.
    """

    def __init__(
        self,
        config: Optional[LintConfig] = None,
        classifiers: Optional[Sequence[Classifier]] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.classifiers: Tuple[Classifier, ...] = tuple(
            CLASSIFIERS if classifiers is None else classifiers
        )

    def check_source(self, file_path: str, content: str) -> List[Issue]:
        """Check already-read text. The path is only used for routing decisions."""
        source = SourceFile.from_text(str(file_path), content)
        issues: List[Issue] = []
        for classifier in self.classifiers:
            found = classifier(source, self.config)
            if found:
                logger.debug("%s: %s found %d issue(s)", file_path, classifier.__name__, len(found))
            issues.extend(found)
        return issues

    def check_file(self, file_path: Path) -> List[Issue]:
        """Read a file and check it."""
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            return [Issue(1, f"Could not read file: {e}", Severity.ERROR, "file-read", True)]
        return self.check_source(str(file_path), content)

    def check_files(self, file_paths: Iterable[Path]) -> Dict[Path, List[Issue]]:
        """Check multiple files.

        Args:
            file_paths: Paths to analyze

        Returns:
            Dictionary mapping file path to list of issues found in that file
        """
        results: Dict[Path, List[Issue]] = {}
        for file_path in file_paths:
            results[file_path] = self.check_file(file_path)
        return results


def split_issues(issues: Iterable[Issue]) -> Tuple[List[Issue], List[Issue]]:
    """(file-level summary issues, inline issues), each in original order."""
    summary: List[Issue] = []
    inline: List[Issue] = []
    for issue in issues:
        (summary if issue.file_level else inline).append(issue)
    return summary, inline


def lint_source(file_path: str, content: str, config: Optional[LintConfig] = None) -> List[Issue]:
    """Check one file's text with the default classifier registry."""
    return ComponentLinter(config).check_source(file_path, content)
