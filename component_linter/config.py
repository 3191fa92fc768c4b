"""
Threshold configuration shared read-only by all classifiers.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from .issue import ConfigError


@dataclass(frozen=True)
class LintConfig:
    """Named numeric limits. Built once and passed explicitly to every classifier."""
    max_file_lines: int = 150
    max_function_lines: int = 50
    max_params: int = 3
    max_constant_lines: int = 20
    max_jsx_lines: int = 60
    max_state_hooks: int = 5

    @classmethod
    def option_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "LintConfig":
        """Build a config from option names, keeping defaults for missing ones."""
        known = set(cls.option_names())
        values = {}
        for name, raw in options.items():
            if name not in known:
                raise ConfigError(f"Unknown option: {name}")
            if isinstance(raw, bool):
                raise ConfigError(f"{name} must be an integer, got {raw!r}")
            try:
                value = int(raw)
            except (TypeError, ValueError):
                raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
            values[name] = value
        return cls(**values)

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.option_names()}


DEFAULT_CONFIG = LintConfig()
