"""Tests for comment classification."""

from component_linter.checkers.comment_checker import check_comments


def _by_category(issues):
    return {issue.category: issue for issue in issues}


class TestAllowedComments:
    """Directives and JSDoc are never reported."""

    def test_directives_and_jsdoc(self, config, make_source):
        source = make_source(
            "src/components/Card.tsx",
            "'use client';",
            "// eslint-disable-next-line no-console",
            "// @ts-expect-error legacy typing",
            "/**",
            " * Renders a card.",
            " */",
            "export function Card() {",
            "  return null;",
            "}",
        )
        assert check_comments(source, config) == []

    def test_url_is_not_an_inline_comment(self, config, make_source):
        source = make_source("src/a.ts", "const url = 'https://example.com';", "fetchIt(url);")
        assert check_comments(source, config) == []

    def test_code_without_comments(self, config, make_source):
        source = make_source("src/a.ts", "const a = 1;", "export default a;")
        assert check_comments(source, config) == []


class TestCommentKinds:
    """Plain comments, commented-out code and TODO markers."""

    def test_three_kinds(self, config, make_source):
        source = make_source(
            "src/components/Card.tsx",
            "// explains the card layout",
            "// const legacy = computeLegacy();",
            "// TODO: handle the empty state",
            "const a = 1; // the answer",
            "/* old block",
            "   still old */",
            "export default a;",
        )
        issues = check_comments(source, config)
        by_category = _by_category(issues)
        assert [i.category for i in issues] == ["comment", "commented-code", "todo-comment"]

        comment = by_category["comment"]
        assert comment.line == 1
        assert "3 comment(s)" in comment.message
        assert "L1, L4, L5" in comment.message

        assert by_category["commented-code"].line == 2
        assert "L2" in by_category["commented-code"].message

        assert by_category["todo-comment"].line == 3

    def test_marker_words_in_prose_are_plain_comments(self, config, make_source):
        source = make_source(
            "src/a.ts",
            "// keeps the list sorted to avoid a bug in the pager",
            "sortItems(list); // see the note in the README",
        )
        issues = check_comments(source, config)
        assert [i.category for i in issues] == ["comment"]
        assert "L1, L2" in issues[0].message

    def test_block_comment_recorded_at_opening_line(self, config, make_source):
        source = make_source(
            "src/a.ts",
            "const a = 1;",
            "/*",
            "   disabled for now",
            "*/",
            "export default a;",
        )
        issues = check_comments(source, config)
        assert [i.category for i in issues] == ["comment"]
        assert issues[0].line == 2
        assert "L2\n" in issues[0].message

    def test_inline_todo(self, config, make_source):
        source = make_source("src/a.ts", "retry(); // FIXME: flaky on CI")
        issues = check_comments(source, config)
        assert [i.category for i in issues] == ["todo-comment"]

    def test_many_comments_consolidate(self, config, make_source):
        lines = []
        for n in range(20):
            lines.append(f"// remark number {n} about layout")
            lines.append("render();")
        source = make_source("src/a.ts", *lines)
        issues = check_comments(source, config)
        assert len(issues) == 1
        assert issues[0].category == "comment"
        assert issues[0].line == 1
        for n in range(20):
            assert f"L{2 * n + 1}" in issues[0].message
