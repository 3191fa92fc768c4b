"""
Hook checks: hooks declared outside hooks/, effect-heavy components, too many useState.
"""

import re
from typing import List

from ..checker_base import SourceFile, consolidate, file_issue
from ..config import LintConfig
from ..issue import Finding, Issue
from ..utils import find_block_end, format_line_refs, is_component, is_in_folder

_TOP_LEVEL_DECL = re.compile(r"^(?:export\s+)?(?:default\s+)?(?:async\s+)?(?:const|function)\s+([\w$]+)")
_HOOK_NAME = re.compile(r"^use[A-Z]")
_HOOK_CALL = re.compile(r"\buse[A-Z]\w*\s*\(")
_EFFECT_HOOK_CALL = re.compile(r"\b(?:useEffect|useCallback|useMemo)\s*\(")
_STATE_CALL = re.compile(r"\buseState\b(?=\s*[<(])")
_STATE_NAME = re.compile(r"const\s*\[\s*([\w$]+)")

MAX_EFFECT_HOOKS = 3


def hook_name_for(name: str) -> str:
    """e.g. fetchUser -> useFetchUser."""
    return "use" + name[:1].upper() + name[1:]


def check_hooks_placement(source: SourceFile, config: LintConfig) -> List[Issue]:
    """Hooks declared outside hooks/, and plain functions that call hooks."""
    if is_in_folder(source.path, "hooks"):
        return []
    lines = source.lines
    issues: List[Issue] = []

    misplaced: List[Finding] = []
    for i, line in enumerate(lines):
        match = _TOP_LEVEL_DECL.match(line)
        if not match:
            continue
        name = match.group(1)
        if _HOOK_NAME.match(name):
            misplaced.append(Finding(i + 1, name))
            continue
        if name[:1].isupper():
            continue
        body = "\n".join(lines[i:find_block_end(lines, i) + 1])
        if _HOOK_CALL.search(body):
            misplaced.append(Finding(i + 1, name, hook_name_for(name)))

    listed = ", ".join(
        f"`{h.name}` (L{h.line}) → rename to `{h.detail}`" if h.detail else f"`{h.name}` (L{h.line})"
        for h in misplaced
    )
    issues += consolidate(
        misplaced,
        "hook-placement",
        f"🪝 **Hook(s) outside /hooks**: {listed}\n\n"
        f"Move them to the `/hooks` folder so they are easy to find and reuse.",
    )

    if is_component(source.path):
        effect_lines = [i + 1 for i, line in enumerate(lines) for _ in _EFFECT_HOOK_CALL.finditer(line)]
        if len(effect_lines) > MAX_EFFECT_HOOKS:
            issues += file_issue(
                "hook-extraction",
                f"🪝 **{len(effect_lines)} effect/memo hooks** ({format_line_refs(effect_lines)}) — "
                f"Extract the logic into custom hooks. E.g. `const {{ data, loading }} = useMyFeature()`",
            )
    return issues


def check_state_count(source: SourceFile, config: LintConfig) -> List[Issue]:
    """useState invocations in a component against max_state_hooks."""
    if not is_component(source.path):
        return []
    states: List[Finding] = []
    for i, line in enumerate(source.lines):
        for _ in _STATE_CALL.finditer(line):
            name_match = _STATE_NAME.search(line)
            states.append(Finding(i + 1, name_match.group(1) if name_match else "state"))

    if len(states) <= config.max_state_hooks:
        return []
    listed = ", ".join(f"`{s.name}` (L{s.line})" for s in states)
    return consolidate(
        states,
        "too-many-states",
        f"🧠 **{len(states)} useState**: {listed}\n\n"
        f"Extract them into a custom hook or use `useReducer`. "
        f"Recommended maximum: {config.max_state_hooks}.",
    )
