"""
Architecture checks: data access that belongs in lib/ or a hook rather than a component.
"""

import re
from typing import List

from ..checker_base import SourceFile, consolidate
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import format_line_refs, is_comment, is_in_folder, normalize_path

_SUPABASE_QUERY = re.compile(r"supabase\s*\.\s*from\(\s*['\"]\w+['\"]\s*\)")
_DIRECT_FETCH = re.compile(r"\bfetch\(")


def _applies(path: str) -> bool:
    return normalize_path(path).endswith(".tsx") and not is_in_folder(path, "lib")


def _matching_lines(source: SourceFile, pattern) -> List[Finding]:
    return [
        Finding(i + 1, pattern.pattern)
        for i, line in enumerate(source.lines)
        if not is_comment(line) and pattern.search(line)
    ]


def check_supabase_queries(source: SourceFile, config: LintConfig) -> List[Issue]:
    if not _applies(source.path):
        return []
    found = _matching_lines(source, _SUPABASE_QUERY)
    return consolidate(
        found,
        "supabase-query",
        f"🗄️ **Supabase query in a component** — {format_line_refs(f.line for f in found)}\n\n"
        f"Move queries to functions in `@/lib/supabase` or to a custom hook. "
        f"Components should not hold database logic.",
    )


def check_direct_fetch(source: SourceFile, config: LintConfig) -> List[Issue]:
    if not _applies(source.path):
        return []
    found = _matching_lines(source, _DIRECT_FETCH)
    return consolidate(
        found,
        "direct-fetch",
        f"🌐 **Direct fetch in a component** — {format_line_refs(f.line for f in found)}\n\n"
        f"Centralize API calls in `@/lib/api` or a custom hook in `@/hooks`. "
        f"Consider React Query/SWR for caching.",
    )
