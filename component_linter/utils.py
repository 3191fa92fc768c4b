"""
Text scanning helpers for the component linter.

Everything here works on raw lines. There is no tokenizer: delimiters inside
string literals are counted like any other character, and only lines that
are entirely comments are skipped when balancing braces.
"""

import re
from pathlib import PurePosixPath
from typing import Iterable, Optional, Sequence

COMPONENT_EXTENSIONS = (".tsx", ".jsx")

# Files that look like components but are test or story fixtures.
_NON_COMPONENT_MARKERS = (".test.", ".spec.", ".stories.")

# opener -> (opening characters, closing characters)
_DELIMITERS = {
    None: ("{(", "})"),
    "{": ("{", "}"),
    "(": ("(", ")"),
    "[": ("[", "]"),
}

_CATCH_KEYWORD = re.compile(r"\bcatch\b")

# Shapes of a `//` comment body that are probably disabled code rather than prose.
_CODE_LIKE_PATTERNS = (
    re.compile(r"^(?:const|let|var)\s+[\w$\[\]{},:<>\s]+="),
    re.compile(r"^(?:if|for|while|switch|catch)\s*\("),
    re.compile(r"^(?:import|export)\s+.*(?:\bfrom\s+['\"]|[{=;])"),
    re.compile(r"^return\b.*[;({]\s*$"),
    re.compile(r"^(?:await|throw|new)\s+[\w$.]+\s*\("),
    re.compile(r"^(?:async\s+)?function\s*\w*\s*\("),
    re.compile(r"^[\w$.]+\s*\(.*\)\s*;?$"),
    re.compile(r"^[\w$.\[\]]+\s*[+\-*/]?=\s*[^=\s]"),
    re.compile(r"[;{}]\s*$"),
    re.compile(r"^</?[A-Za-z][\w.]*(?:\s[^>]*)?/?>"),
)


def is_comment(line: str) -> bool:
    """Check if line is a comment."""
    stripped = line.strip()
    comment_prefixes = ['//', '/*', '*']
    return any(stripped.startswith(prefix) for prefix in comment_prefixes)


def position_inside_string_literal(line: str, pos: int) -> bool:
    """True if position pos in line is inside a quoted string literal (not code)."""
    if pos < 0 or pos >= len(line):
        return False
    in_string = False
    quote_char = None
    i = 0
    while i <= pos and i < len(line):
        ch = line[i]
        if ch in ('"', "'", "`") and (i == 0 or line[i - 1] != "\\"):
            if not in_string:
                in_string = True
                quote_char = ch
            elif ch == quote_char:
                in_string = False
                quote_char = None
        i += 1
    return in_string


def delimiter_balance(line: str, opener: Optional[str] = None) -> int:
    """Openers minus closers on one line. Comment-only lines count as zero."""
    if is_comment(line):
        return 0
    opens, closes = _DELIMITERS.get(opener, _DELIMITERS[None])
    balance = 0
    for ch in line:
        if ch in opens:
            balance += 1
        elif ch in closes:
            balance -= 1
    return balance


def _start_depth(line: str, opener: Optional[str]) -> int:
    # Leading closers (`} else {`, `} catch (e) {`) must not drive the count below zero.
    if is_comment(line):
        return 0
    opens, closes = _DELIMITERS.get(opener, _DELIMITERS[None])
    depth = 0
    for ch in line:
        if ch in opens:
            depth += 1
        elif ch in closes and depth > 0:
            depth -= 1
    return depth


def opening_delimiter(line: str) -> Optional[str]:
    """The first of `{`, `(` or `[` on the line, or None."""
    for ch in line:
        if ch in "{([":
            return ch
    return None


def find_block_end(lines: Sequence[str], start: int, opener: Optional[str] = None) -> int:
    """Return the index of the line where the block opened on ``lines[start]`` closes.

    The nesting counter starts from the start line's balance (leading closers
    ignored) and then adds each following line's net balance; the first line
    that brings it to zero or below ends the block. A start line with no open
    delimiter is a single-line construct and its own end.

    Unbalanced input returns the last index. Never raises: callers get a span
    that may be too wide or too narrow, never an error.
    """
    if not lines:
        return 0
    start = min(max(start, 0), len(lines) - 1)
    depth = _start_depth(lines[start], opener)
    if depth == 0:
        return start
    for i in range(start + 1, len(lines)):
        depth += delimiter_balance(lines[i], opener)
        if depth <= 0:
            return i
    return len(lines) - 1


def is_inside_catch_block(lines: Sequence[str], index: int, column: int = 0) -> bool:
    """True if ``lines[index]`` (from ``column`` on) sits inside a ``catch { }`` body.

    Walks backward through every enclosing ``{`` and confirms, scanning
    forward from a ``catch`` opener, that its block reaches the line.
    """
    if index < 0 or index >= len(lines):
        return False
    depth = 0
    for i in range(index, -1, -1):
        text = lines[i][:column] if i == index else lines[i]
        if is_comment(text):
            continue
        for pos in range(len(text) - 1, -1, -1):
            ch = text[pos]
            if ch == "}":
                depth += 1
            elif ch == "{":
                if depth > 0:
                    depth -= 1
                    continue
                if _CATCH_KEYWORD.search(text[:pos]):
                    if i == index or find_block_end(lines, i, "{") >= index:
                        return True
    return False


def looks_like_commented_code(line: str) -> bool:
    """True if a `//` comment's body reads like a disabled statement."""
    match = re.match(r"^\s*//\s?(.*)$", line)
    if not match:
        return False
    body = match.group(1).strip()
    if not body:
        return False
    return any(p.search(body) for p in _CODE_LIKE_PATTERNS)


def normalize_path(file_path: str) -> str:
    return str(file_path).replace("\\", "/")


def is_in_folder(file_path: str, folder: str) -> bool:
    """True if any directory component of the path is exactly ``folder``."""
    parts = PurePosixPath(normalize_path(file_path)).parts
    return folder in parts[:-1]


def is_component(file_path: str) -> bool:
    """React component files: .tsx/.jsx outside hooks/, excluding tests and stories."""
    normalized = normalize_path(file_path)
    name = PurePosixPath(normalized).name
    if not name.endswith(COMPONENT_EXTENSIONS):
        return False
    if any(marker in name for marker in _NON_COMPONENT_MARKERS):
        return False
    return not is_in_folder(normalized, "hooks")


def format_line_refs(line_numbers: Iterable[int]) -> str:
    """e.g. [3, 9] -> 'L3, L9'."""
    return ", ".join(f"L{n}" for n in line_numbers)
