"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Processor settings
DEFAULT_MAX_INPUT_LENGTH = 10_000
DEFAULT_DEBOUNCE_MS = 300
DEFAULT_SYNTAX_HIGHLIGHTING = True

# Conversion cache
DEFAULT_CACHE_CAPACITY = 50

# Style resolution
DEFAULT_RESOLVER = "auto"
DEFAULT_BROWSER = "chromium"
DEFAULT_STYLES_FILE = None
DEFAULT_STYLESHEET = None
DEFAULT_LAUNCH_TIMEOUT_MS = 30_000

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "max_input_length": DEFAULT_MAX_INPUT_LENGTH,
        "debounce_ms": DEFAULT_DEBOUNCE_MS,
        "enable_syntax_highlighting": DEFAULT_SYNTAX_HIGHLIGHTING,
        "cache_capacity": DEFAULT_CACHE_CAPACITY,
        "resolver": DEFAULT_RESOLVER,
        "browser": DEFAULT_BROWSER,
        "styles_file": DEFAULT_STYLES_FILE,
        "stylesheet": DEFAULT_STYLESHEET,
        "launch_timeout_ms": DEFAULT_LAUNCH_TIMEOUT_MS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
