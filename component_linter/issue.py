"""
Issue data models for the component linter.
"""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Issue severity levels."""
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Issue:
    """Represents one reported finding, consolidated per category."""
    line: int
    message: str
    severity: Severity
    category: str
    file_level: bool = False


@dataclass(frozen=True)
class Finding:
    """A raw match collected by a classifier before it is folded into an Issue."""
    line: int
    name: str
    detail: str = ""


class LinterError(Exception):
    """Base class for linter errors."""


class ConfigError(LinterError, ValueError):
    """Raised when a threshold option is unknown or invalid."""
