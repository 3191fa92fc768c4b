"""Configuration from environment."""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv

from component_linter.config import LintConfig

logger = logging.getLogger(__name__)

load_dotenv()

# env var -> LintConfig option
THRESHOLD_ENV_VARS = {
    "LINT_MAX_FILE_LINES": "max_file_lines",
    "LINT_MAX_FUNCTION_LINES": "max_function_lines",
    "LINT_MAX_PARAMS": "max_params",
    "LINT_MAX_CONSTANT_LINES": "max_constant_lines",
    "LINT_MAX_JSX_LINES": "max_jsx_lines",
    "LINT_MAX_STATE_HOOKS": "max_state_hooks",
}


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def _threshold_from_env(env_var: str, option: str, default: int) -> int:
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s=%d", env_var, raw, option, default)
        return default
    if value <= 0:
        logger.warning("%s=%d must be positive; using %s=%d", env_var, value, option, default)
        return default
    return value


@lru_cache(maxsize=1)
def get_lint_config() -> LintConfig:
    """Thresholds from LINT_* variables, loaded once per process."""
    defaults = LintConfig()
    options = {
        option: _threshold_from_env(env_var, option, getattr(defaults, option))
        for env_var, option in THRESHOLD_ENV_VARS.items()
    }
    return LintConfig(**options)
