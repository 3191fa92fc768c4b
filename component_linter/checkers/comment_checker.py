"""
Comment checks: explanatory comments, commented-out code, TODO markers.

At most one issue per kind, each listing every affected line.
"""

import re
from typing import List, Optional

from ..checker_base import SourceFile, consolidate
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import format_line_refs, looks_like_commented_code, position_inside_string_literal

_TOOL_DIRECTIVE = re.compile(r"^\s*/[/*]\s*(eslint|@ts-|prettier|istanbul|c8|vitest|jest)")
_USE_DIRECTIVE = re.compile(r"^['\"]use (client|server)['\"]")
_TODO_MARKER = re.compile(r"^\s*//\s*(todo|fixme|hack|xxx|bug|note)\b", re.IGNORECASE)


def _inline_comment_start(line: str) -> Optional[int]:
    """Position of a trailing `//` comment after code, ignoring URLs and strings."""
    for match in re.finditer(r"//", line):
        pos = match.start()
        before = line[:pos]
        if not before.strip() or before.endswith(":"):
            continue
        if position_inside_string_literal(line, pos):
            continue
        if line[pos + 2:].strip():
            return pos
    return None


def check_comments(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Plain, code-like and TODO comments, one consolidated issue per kind."""
    lines = source.lines
    comments: List[Finding] = []
    commented_code: List[Finding] = []
    todos: List[Finding] = []

    in_multiline = False
    i = 0
    while i < len(lines):
        line = lines[i]
        trimmed = line.strip()

        if _TOOL_DIRECTIVE.match(line) or _USE_DIRECTIVE.match(trimmed):
            i += 1
            continue

        if in_multiline:
            if "*/" in trimmed:
                in_multiline = False
            i += 1
            continue

        # JSDoc is allowed
        if trimmed.startswith("/**"):
            while i < len(lines) and "*/" not in lines[i]:
                i += 1
            i += 1
            continue

        if "/*" in trimmed and "/**" not in trimmed:
            comments.append(Finding(i + 1, "block"))
            in_multiline = "*/" not in trimmed[trimmed.index("/*") + 2:]
            i += 1
            continue

        if trimmed.startswith("//"):
            if looks_like_commented_code(line):
                commented_code.append(Finding(i + 1, "code"))
            elif _TODO_MARKER.match(trimmed):
                todos.append(Finding(i + 1, "todo"))
            else:
                comments.append(Finding(i + 1, "line"))
            i += 1
            continue

        start = _inline_comment_start(line)
        if start is not None:
            if _TODO_MARKER.match(line[start:]):
                todos.append(Finding(i + 1, "todo"))
            else:
                comments.append(Finding(i + 1, "inline"))
        i += 1

    issues: List[Issue] = []
    issues += consolidate(
        comments,
        "comment",
        f"💬 **{len(comments)} comment(s) in the code** — Lines: "
        f"{format_line_refs(f.line for f in comments)}\n\n"
        f"Prefer self-documenting code. Remove unnecessary comments before merging.",
    )
    issues += consolidate(
        commented_code,
        "commented-code",
        f"🗑️ **Commented-out code** — Lines: {format_line_refs(f.line for f in commented_code)}\n\n"
        f"Delete commented-out code before merging. Git keeps the history if you need it back.",
    )
    issues += consolidate(
        todos,
        "todo-comment",
        f"🏷️ **TODO/FIXME found** — Lines: {format_line_refs(f.line for f in todos)}\n\n"
        f"Resolve it before merging, or open an issue so it is not lost.",
    )
    return issues
