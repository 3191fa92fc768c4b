"""Services wrapping the linter for the API."""

from .checker import CheckerService

__all__ = ["CheckerService"]
