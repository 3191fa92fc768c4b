"""
Text-heuristic linter for React/Next.js component files.
"""

from .checker_base import SourceFile
from .config import DEFAULT_CONFIG, LintConfig
from .issue import ConfigError, Finding, Issue, LinterError, Severity
from .main_checker import ComponentLinter, lint_source, split_issues
from .utils import find_block_end

__all__ = [
    'ComponentLinter',
    'ConfigError',
    'DEFAULT_CONFIG',
    'Finding',
    'Issue',
    'LintConfig',
    'LinterError',
    'Severity',
    'SourceFile',
    'find_block_end',
    'lint_source',
    'split_issues',
]
