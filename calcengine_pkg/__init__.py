"""calcengine package: display-buffer calculator engine, key driver, and CLI."""

__all__ = [
    "config",
    "types",
    "formatting",
    "machine",
    "engine",
    "keymap",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

from .api import evaluate_keys, execute, validate_keys
from .engine import CalculatorEngine
from .formatting import format_result

__api_exports__ = [
    "CalculatorEngine",
    "execute",
    "evaluate_keys",
    "validate_keys",
    "format_result",
]
