"""Pytest configuration and shared fixtures for component linter tests."""

from pathlib import Path

import pytest

from component_linter import LintConfig, SourceFile

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def config():
    """Default thresholds."""
    return LintConfig()


@pytest.fixture
def make_source():
    """Build a SourceFile from a path and individual lines."""
    def _make(path, *lines):
        return SourceFile.from_text(path, "\n".join(lines))
    return _make


@pytest.fixture
def bot_review_file():
    """Path to the sample component with intentional problems."""
    return FIXTURES_DIR / "test-bot-review.tsx"
