"""
Code quality checks: file size, unused imports, console calls.
"""

import re
from typing import List, NamedTuple

from ..checker_base import SourceFile, consolidate, file_issue
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import format_line_refs, is_comment, is_inside_catch_block

_IMPORT_START = re.compile(r"^import\s")
_SIDE_EFFECT_IMPORT = re.compile(r"^import\s+['\"]")
_NAMED_IMPORTS = re.compile(r"\{([^}]+)\}")
_DEFAULT_IMPORT = re.compile(r"^import\s+(?:type\s+)?([\w$]+)\s*(?:,|\s+from)")
_NAMESPACE_IMPORT = re.compile(r"\*\s+as\s+([\w$]+)")
_CONSOLE_CALL = re.compile(r"\bconsole\.(log|warn|info|debug|error|trace)\b")


class ImportStatement(NamedTuple):
    text: str
    line: int
    end_index: int


def check_file_size(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Whole-file length against max_file_lines."""
    if source.line_count <= config.max_file_lines:
        return []
    return file_issue(
        "file-size",
        f"📏 **File has {source.line_count} lines** — the limit is "
        f"{config.max_file_lines}. Split it into smaller components, hooks and utilities.",
    )


def collect_imports(lines) -> List[ImportStatement]:
    """Join each import statement, continuing multi-line ones until a ` from ` clause."""
    imports: List[ImportStatement] = []
    i = 0
    while i < len(lines):
        trimmed = lines[i].strip()
        if not _IMPORT_START.match(trimmed) or _SIDE_EFFECT_IMPORT.match(trimmed):
            i += 1
            continue
        full_import = trimmed
        end = i
        while " from " not in full_import and end < len(lines) - 1:
            end += 1
            full_import += " " + lines[end].strip()
        imports.append(ImportStatement(full_import, i + 1, end))
        i = end + 1
    return imports


def imported_names(statement: str) -> List[str]:
    """Named, default and namespace bindings introduced by one import statement."""
    names: List[str] = []
    named = _NAMED_IMPORTS.search(statement)
    if named:
        for part in named.group(1).split(","):
            name = re.split(r"\s+as\s+", part.strip())[-1].strip()
            if name.startswith("type "):
                name = name[len("type "):].strip()
            if name and name != "type":
                names.append(name)
    default = _DEFAULT_IMPORT.match(statement)
    if default and default.group(1) != "type":
        names.append(default.group(1))
    namespace = _NAMESPACE_IMPORT.search(statement)
    if namespace:
        names.append(namespace.group(1))
    return names


def _is_used(name: str, text: str) -> bool:
    pattern = r"(?<![\w$])" + re.escape(name) + r"(?![\w$])"
    return re.search(pattern, text) is not None


def check_unused_imports(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Imported bindings that never appear after their import statement."""
    findings: List[Finding] = []
    for statement in collect_imports(source.lines):
        rest_of_file = "\n".join(source.lines[statement.end_index + 1:])
        for name in imported_names(statement.text):
            if not _is_used(name, rest_of_file):
                findings.append(Finding(statement.line, name))

    if not findings:
        return []
    first, last = findings[0].line, findings[-1].line
    line_range = f"L{first}" if first == last else f"L{first}–L{last}"
    listed = ", ".join(f"`{f.name}` (L{f.line})" for f in findings)
    return consolidate(
        findings,
        "unused-import",
        f"🧹 **Unused imports ({line_range})**: {listed}\n\n"
        f"Remove them before merging. In VS Code: `Ctrl+Shift+P → Organize Imports`.",
    )


def check_console_logs(source: SourceFile, config: LintConfig) -> List[Issue]:
    """console.* calls, with a different tip when one sits in a catch block."""
    findings: List[Finding] = []
    in_catch = False
    for i, line in enumerate(source.lines):
        if is_comment(line):
            continue
        match = _CONSOLE_CALL.search(line)
        if not match:
            continue
        findings.append(Finding(i + 1, match.group(1)))
        if is_inside_catch_block(source.lines, i, match.start()):
            in_catch = True

    if not findings:
        return []
    tip = "Remove `console.*` calls before merging."
    if in_catch:
        tip += " In `catch` blocks, use **toast.error()** to give the user feedback."
    return consolidate(
        findings,
        "console-log",
        f"🧹 **{len(findings)} console call(s) detected** — "
        f"{format_line_refs(f.line for f in findings)}\n\n{tip}",
    )
