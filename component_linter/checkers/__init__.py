"""
Checkers package: one pure function per category of violation.
"""

from typing import Tuple

from ..checker_base import Classifier
from .architecture_checker import check_direct_fetch, check_supabase_queries
from .code_quality_checker import check_console_logs, check_file_size, check_unused_imports
from .comment_checker import check_comments
from .function_checker import check_duplicate_patterns, check_functions
from .hook_checker import check_hooks_placement, check_state_count
from .organization_checker import (
    check_atomic_design,
    check_inline_types,
    check_jsx_size,
    check_large_constants,
    check_multiple_components,
)

CLASSIFIERS: Tuple[Classifier, ...] = (
    check_file_size,
    check_unused_imports,
    check_console_logs,
    check_comments,
    check_functions,
    check_duplicate_patterns,
    check_hooks_placement,
    check_state_count,
    check_large_constants,
    check_multiple_components,
    check_inline_types,
    check_jsx_size,
    check_atomic_design,
    check_supabase_queries,
    check_direct_fetch,
)

__all__ = [
    'CLASSIFIERS',
    'check_file_size',
    'check_unused_imports',
    'check_console_logs',
    'check_comments',
    'check_functions',
    'check_duplicate_patterns',
    'check_hooks_placement',
    'check_state_count',
    'check_large_constants',
    'check_multiple_components',
    'check_inline_types',
    'check_jsx_size',
    'check_atomic_design',
    'check_supabase_queries',
    'check_direct_fetch',
]
