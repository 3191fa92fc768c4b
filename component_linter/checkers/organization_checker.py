"""
Organization checks: constants, components per file, inline types, JSX size, atomic design folders.
"""

import re
from pathlib import PurePosixPath
from typing import List

from ..checker_base import SourceFile, consolidate, file_issue
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import find_block_end, is_component, is_in_folder, normalize_path, opening_delimiter

_CONSTANT_DECL = re.compile(r"^(?:export\s+)?const\s+([A-Z_][A-Z0-9_]*)\s*[=:]")
_UPPER_CONSTANT = re.compile(r"^(?:export\s+)?const\s+([A-Z_]{2,})\s*=")
_FUNCTION_COMPONENT = re.compile(r"^(?:export\s+)?(?:default\s+)?function\s+([A-Z]\w+)\s*\(")
_ARROW_COMPONENT = re.compile(
    r"^(?:export\s+)?const\s+([A-Z]\w+)\s*[=:]\s*"
    r"(?:\([^)]*\)\s*=>|React\.FC|React\.memo|(?:React\.)?forwardRef|memo\()"
)
_TYPE_DECL = re.compile(r"^(?:export\s+)?(?:declare\s+)?(?:type|interface)\s+(\w+)")
_RETURN_JSX = re.compile(r"^\s*return\s*\(")
_DIRECT_COMPONENT = re.compile(r"(?:^|/)components/[^/]+\.(?:tsx|jsx)$")
_STATE_CALL = re.compile(r"\buseState\b(?=\s*[<(])")
_EFFECT_CALL = re.compile(r"\buseEffect\s*\(")
_JSX_COMPONENT_TAG = re.compile(r"<[A-Z]")

MIN_SCATTERED_CONSTANTS = 3
MAX_INLINE_TYPE_LINES = 5
MIN_COMPONENT_TYPES = 3


def check_large_constants(source: SourceFile, config: LintConfig) -> List[Issue]:
    """UPPER_CASE constants that are too long, or too many of them scattered in one file."""
    if is_in_folder(source.path, "consts") or is_in_folder(source.path, "constants"):
        return []
    lines = source.lines

    large: List[Finding] = []
    for i, line in enumerate(lines):
        match = _CONSTANT_DECL.match(line.strip())
        if not match:
            continue
        length = find_block_end(lines, i, opening_delimiter(line)) - i + 1
        if length > config.max_constant_lines:
            large.append(Finding(i + 1, match.group(1), str(length)))

    if large:
        listed = ", ".join(f"`{c.name}` ({c.detail} lines, L{c.line})" for c in large)
        return consolidate(
            large,
            "large-constant",
            f"📦 **Large constant(s)**: {listed}\n\n"
            f"Move them to their own file in `/consts`. Constants longer than "
            f"{config.max_constant_lines} lines deserve a dedicated file.",
        )

    upper = []
    for i, line in enumerate(lines):
        match = _UPPER_CONSTANT.match(line.strip())
        if match:
            upper.append(Finding(i + 1, match.group(1)))
    if len(upper) < MIN_SCATTERED_CONSTANTS:
        return []
    listed = ", ".join(f"`{c.name}` (L{c.line})" for c in upper)
    return file_issue(
        "scattered-constants",
        f"📦 **{len(upper)} scattered constants**: {listed}. Centralize them in `/consts`.",
    )


def find_components(lines) -> List[Finding]:
    components: List[Finding] = []
    for i, line in enumerate(lines):
        trimmed = line.strip()
        match = _FUNCTION_COMPONENT.match(trimmed) or _ARROW_COMPONENT.match(trimmed)
        if match:
            components.append(Finding(i + 1, match.group(1)))
    return components


def check_multiple_components(source: SourceFile, config: LintConfig) -> List[Issue]:
    """More than one component declared in a component file."""
    if not is_component(source.path):
        return []
    components = find_components(source.lines)
    if len(components) <= 1:
        return []
    listed = ", ".join(f"`{c.name}` (L{c.line})" for c in components)
    # anchored on the first extra component
    return consolidate(
        components[1:],
        "multiple-components",
        f"🧩 **{len(components)} components in the same file**: {listed}\n\n"
        f"Give each component its own file. In Atomic Design: 1 file = 1 component.",
    )


def check_inline_types(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Long type/interface declarations, or several of them inside a component."""
    path = normalize_path(source.path)
    if is_in_folder(path, "types") or is_in_folder(path, "interfaces"):
        return []
    if path.endswith(".types.ts") or path.endswith(".d.ts"):
        return []
    lines = source.lines

    declarations: List[Finding] = []
    for i, line in enumerate(lines):
        match = _TYPE_DECL.match(line.strip())
        if match:
            length = find_block_end(lines, i) - i + 1
            declarations.append(Finding(i + 1, match.group(1), str(length)))

    long_types = [t for t in declarations if int(t.detail) > MAX_INLINE_TYPE_LINES]
    if long_types:
        listed = ", ".join(f"`{t.name}` (L{t.line})" for t in long_types)
        return consolidate(
            long_types,
            "inline-type",
            f"📐 **Inline types/interfaces**: {listed}\n\n"
            f"Move them to `/interfaces` or `/types`. That makes them reusable and avoids circular imports.",
        )
    if len(declarations) >= MIN_COMPONENT_TYPES and is_component(path):
        listed = ", ".join(f"`{t.name}` (L{t.line})" for t in declarations)
        return consolidate(
            declarations,
            "inline-type",
            f"📐 **{len(declarations)} types/interfaces in the component**: {listed}. "
            f"Move them to `/interfaces`.",
        )
    return []


def check_jsx_size(source: SourceFile, config: LintConfig) -> List[Issue]:
    """`return (` markup blocks longer than max_jsx_lines."""
    if not is_component(source.path):
        return []
    lines = source.lines
    large: List[Finding] = []
    i = 0
    while i < len(lines):
        if _RETURN_JSX.match(lines[i]):
            end = find_block_end(lines, i, "(")
            length = end - i + 1
            if length > config.max_jsx_lines:
                large.append(Finding(i + 1, "return", str(length)))
            i = end
        i += 1

    if not large:
        return []
    listed = ", ".join(f"L{j.line} ({j.detail} lines)" for j in large)
    return consolidate(
        large,
        "large-jsx",
        f"🧩 **Large JSX block(s)**: {listed} — Extract sections into subcomponents "
        f"(atoms, molecules). Each subcomponent should fit on one screen.",
    )


def suggest_atomic_level(content: str) -> str:
    """atoms, molecules or organisms from state, effect and child-component counts."""
    state_count = len(_STATE_CALL.findall(content))
    effect_count = len(_EFFECT_CALL.findall(content))
    jsx_complexity = len(_JSX_COMPONENT_TAG.findall(content))
    if state_count == 0 and effect_count == 0 and jsx_complexity <= 3:
        return "atoms"
    if state_count <= 2 and jsx_complexity <= 8:
        return "molecules"
    return "organisms"


def check_atomic_design(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Components sitting directly in components/ instead of an atomic level folder."""
    if not is_component(source.path):
        return []
    path = normalize_path(source.path)
    if not _DIRECT_COMPONENT.search(path) or is_in_folder(path, "ui"):
        return []
    name = PurePosixPath(path).name
    level = suggest_atomic_level(source.content)
    return file_issue(
        "atomic-design",
        f"🏗️ **Atomic Design** — This component belongs in `components/{level}/{name}`.",
    )
