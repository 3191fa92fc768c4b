"""Tests for constants, components per file, inline types, JSX size and atomic design."""

from component_linter import LintConfig
from component_linter.checkers.organization_checker import (
    check_atomic_design,
    check_inline_types,
    check_jsx_size,
    check_large_constants,
    check_multiple_components,
    find_components,
    suggest_atomic_level,
)


# ============================================================================
# Constants
# ============================================================================


class TestLargeConstants:
    """Tests for check_large_constants()."""

    MENU = [
        "export const MENU_ITEMS = [",
        "  { label: 'Home', href: '/' },",
        "  { label: 'About', href: '/about' },",
        "  { label: 'Blog', href: '/blog' },",
        "];",
        "export function Menu() {",
        "  return null;",
        "}",
    ]

    def test_array_constant_spans_its_brackets(self, make_source):
        source = make_source("src/components/Menu.tsx", *self.MENU)
        issues = check_large_constants(source, LintConfig(max_constant_lines=3))
        assert len(issues) == 1
        assert issues[0].category == "large-constant"
        assert issues[0].line == 1
        assert "`MENU_ITEMS` (5 lines, L1)" in issues[0].message

    def test_within_limit(self, config, make_source):
        source = make_source("src/components/Menu.tsx", *self.MENU)
        assert check_large_constants(source, config) == []

    def test_scattered_constants(self, config, make_source):
        source = make_source(
            "src/components/Form.tsx",
            "const MAX_LEN = 10;",
            "const MIN_LEN = 2;",
            "const API_URL = '/api';",
        )
        issues = check_large_constants(source, config)
        assert len(issues) == 1
        assert issues[0].category == "scattered-constants"
        assert issues[0].file_level is True
        assert "3 scattered constants" in issues[0].message

    def test_constants_folder_is_exempt(self, make_source):
        source = make_source("src/constants/menu.ts", *self.MENU)
        assert check_large_constants(source, LintConfig(max_constant_lines=1)) == []


# ============================================================================
# Components per file
# ============================================================================


class TestMultipleComponents:
    """Tests for check_multiple_components()."""

    def test_anchored_at_second_component(self, config, make_source):
        source = make_source(
            "src/components/Cards.tsx",
            "export function Card() {",
            "  return null;",
            "}",
            "const CardHeader = ({ title }) => <h2>{title}</h2>;",
            "const CardBody: React.FC = () => null;",
        )
        issues = check_multiple_components(source, config)
        assert len(issues) == 1
        assert issues[0].category == "multiple-components"
        assert issues[0].line == 4
        assert "3 components in the same file" in issues[0].message

    def test_single_component(self, config, make_source):
        source = make_source("src/components/Card.tsx", "export default function Card() {", "}")
        assert check_multiple_components(source, config) == []

    def test_memo_and_forward_ref(self):
        names = [c.name for c in find_components([
            "const Row = memo(RowImpl);",
            "export const Input = forwardRef((props, ref) => null);",
            "const helper = () => null;",
        ])]
        assert names == ["Row", "Input"]


# ============================================================================
# Inline types
# ============================================================================


class TestInlineTypes:
    """Tests for check_inline_types()."""

    def test_long_interface(self, config, make_source):
        source = make_source(
            "src/components/Form.tsx",
            "interface FormProps {",
            "  name: string;",
            "  email: string;",
            "  age: number;",
            "  phone: string;",
            "  onSubmit: () => void;",
            "}",
        )
        issues = check_inline_types(source, config)
        assert len(issues) == 1
        assert issues[0].category == "inline-type"
        assert "`FormProps` (L1)" in issues[0].message

    def test_several_short_types_in_component(self, config, make_source):
        source = make_source(
            "src/components/Form.tsx",
            "type Size = 'sm' | 'lg';",
            "type Tone = 'dark' | 'light';",
            "export type Variant = 'solid' | 'ghost';",
        )
        issues = check_inline_types(source, config)
        assert len(issues) == 1
        assert "3 types/interfaces" in issues[0].message

    def test_two_short_types(self, config, make_source):
        source = make_source("src/components/Form.tsx", "type A = 1;", "type B = 2;")
        assert check_inline_types(source, config) == []

    def test_declaration_files_exempt(self, config, make_source):
        lines = ["interface Env {", *["  KEY: string;"] * 6, "}"]
        assert check_inline_types(make_source("src/env.d.ts", *lines), config) == []
        assert check_inline_types(make_source("src/types/env.ts", *lines), config) == []


# ============================================================================
# JSX size
# ============================================================================


class TestJsxSize:
    """Tests for check_jsx_size()."""

    LINES = [
        "export function Page() {",
        "  return (",
        "    <main>",
        "      <Header onClick={() => go()} />",
        "      <Body />",
        "    </main>",
        "  );",
        "}",
    ]

    def test_large_return_block(self, make_source):
        source = make_source("src/components/Page.tsx", *self.LINES)
        issues = check_jsx_size(source, LintConfig(max_jsx_lines=4))
        assert len(issues) == 1
        assert issues[0].category == "large-jsx"
        assert issues[0].line == 2
        assert "L2 (6 lines)" in issues[0].message

    def test_within_limit(self, config, make_source):
        source = make_source("src/components/Page.tsx", *self.LINES)
        assert check_jsx_size(source, config) == []

    def test_non_component_skipped(self, make_source):
        source = make_source("src/lib/page.ts", *self.LINES)
        assert check_jsx_size(source, LintConfig(max_jsx_lines=1)) == []


# ============================================================================
# Atomic design
# ============================================================================


class TestAtomicDesign:
    """Tests for check_atomic_design() and suggest_atomic_level()."""

    def test_stateless_component_is_an_atom(self, config, make_source):
        source = make_source("src/components/Badge.tsx", "export const Badge = () => <span />;")
        issues = check_atomic_design(source, config)
        assert len(issues) == 1
        assert issues[0].category == "atomic-design"
        assert issues[0].file_level is True
        assert "`components/atoms/Badge.tsx`" in issues[0].message

    def test_levels(self):
        assert suggest_atomic_level("const [a] = useState(0); <Card />") == "molecules"
        assert suggest_atomic_level(
            "useState(); useState(); useState(); useEffect(() => {});"
        ) == "organisms"

    def test_nested_folder_is_fine(self, config, make_source):
        source = make_source("src/components/atoms/Badge.tsx", "export const Badge = () => <span />;")
        assert check_atomic_design(source, config) == []

    def test_ui_folder_is_fine(self, config, make_source):
        source = make_source("src/components/ui/Badge.tsx", "export const Badge = () => <span />;")
        assert check_atomic_design(source, config) == []
