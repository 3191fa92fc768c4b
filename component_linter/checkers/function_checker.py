"""
Function checks: long functions, repetitive handlers, parameter count, try/catch repetition.
"""

import re
from typing import List, NamedTuple, Sequence

from ..checker_base import SourceFile, consolidate, file_issue
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import find_block_end, format_line_refs

_ARROW_DECL = re.compile(r"^(?:export\s+)?(?:const|let)\s+([\w$]+)\s*=\s*(?:async\s*)?\(")
_ARROW_TAIL = re.compile(r"=>\s*\{?\s*$")
_FUNCTION_DECL = re.compile(r"^(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s+([\w$]+)\s*\(")
_HANDLER_NAME = re.compile(r"^(?:handle|on)[A-Z]")
_SETTER_CALL = re.compile(r"set\w+\(")
_REMOTE_CALL = re.compile(r"fetch|supabase|axios|api", re.IGNORECASE)
_PARAM_LIST = re.compile(r"\(([^)]*)\)")
_TRY_OPEN = re.compile(r"\btry\s*\{")

MIN_REPETITIVE_HANDLERS = 3
MIN_TRY_BLOCKS = 3


class FunctionSpan(NamedTuple):
    name: str
    start: int
    end: int

    @property
    def line(self) -> int:
        return self.start + 1

    @property
    def length(self) -> int:
        return self.end - self.start + 1


def find_functions(lines: Sequence[str]) -> List[FunctionSpan]:
    """Arrow functions and function declarations with their line spans."""
    functions: List[FunctionSpan] = []
    for i, line in enumerate(lines):
        trimmed = line.strip()
        arrow = _ARROW_DECL.match(trimmed)
        if arrow and _ARROW_TAIL.search(trimmed):
            functions.append(FunctionSpan(arrow.group(1), i, find_block_end(lines, i)))
            continue
        declaration = _FUNCTION_DECL.match(trimmed)
        if declaration:
            functions.append(FunctionSpan(declaration.group(1), i, find_block_end(lines, i)))
    return functions


def count_params(declaration_line: str) -> int:
    """Comma-separated entries in the first parameter list on the line."""
    match = _PARAM_LIST.search(declaration_line)
    if not match:
        return 0
    return len([p for p in match.group(1).split(",") if p.strip()])


def check_functions(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Long functions, repetitive event handlers and long parameter lists."""
    lines = source.lines
    functions = find_functions(lines)
    issues: List[Issue] = []

    long_funcs = [f for f in functions if f.length > config.max_function_lines]
    issues += consolidate(
        [Finding(f.line, f.name, str(f.length)) for f in long_funcs],
        "long-function",
        "📐 **Long function(s)**: "
        + ", ".join(f"`{f.name}` ({f.length} lines, L{f.line})" for f in long_funcs)
        + "\n\nSplit them into smaller functions. Extract validation, transformations and API calls.",
    )

    handlers = [f for f in functions if _HANDLER_NAME.match(f.name)]
    if len(handlers) >= MIN_REPETITIVE_HANDLERS:
        bodies = ["\n".join(lines[h.start:h.end + 1]) for h in handlers]
        similar = [b for b in bodies if _SETTER_CALL.search(b) and _REMOTE_CALL.search(b)]
        if len(similar) >= 2:
            issues += consolidate(
                [Finding(h.line, h.name) for h in handlers],
                "repetitive-pattern",
                "🔄 **Repetitive pattern**: "
                + ", ".join(f"`{h.name}` (L{h.line})" for h in handlers)
                + " share similar logic. Abstract it into a custom hook or a generic function.",
            )

    too_many = []
    for func in functions:
        count = count_params(lines[func.start])
        if count > config.max_params:
            too_many.append(Finding(func.line, func.name, str(count)))
    issues += consolidate(
        too_many,
        "too-many-params",
        "📐 **Too many parameters**: "
        + ", ".join(f"`{f.name}` ({f.detail} params, L{f.line})" for f in too_many)
        + "\n\nPass a single options object instead of several parameters.",
    )
    return issues


def check_duplicate_patterns(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Repeated top-level try/catch blocks; nested ones are skipped."""
    lines = source.lines
    try_lines: List[int] = []
    i = 0
    while i < len(lines):
        if _TRY_OPEN.search(lines[i]):
            try_lines.append(i + 1)
            i = find_block_end(lines, i, "{")
        i += 1

    if len(try_lines) < MIN_TRY_BLOCKS:
        return []
    return file_issue(
        "duplicate-pattern",
        f"🔄 **{len(try_lines)} try/catch blocks** ({format_line_refs(try_lines)}) — "
        f"Consider a `safeExecute()` helper that wraps error handling and toast feedback.",
    )
