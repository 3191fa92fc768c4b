"""Startup validation and configuration checks."""

from pathlib import Path

from .config import get_lint_config


def validate_config() -> None:
    """Warn if .env is missing and print the thresholds in effect."""
    env_file = Path(".env")
    if not env_file.exists():
        print("⚠️  WARNING: .env file not found. Using default lint thresholds.")
        print("   Create .env from .env.example and set LINT_* variables to override them.")
    config = get_lint_config()
    limits = ", ".join(f"{name}={value}" for name, value in config.as_dict().items())
    print(f"Lint thresholds: {limits}")
