"""Centralized configuration for calcengine.

This module defines:
- Display formatting thresholds (scientific notation bounds, precision)
- Operator and key tables used by the state machine and the key driver
- Regex patterns for operand parsing and exponent cleanup
- Input limits for key sequences and the undo stack

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with CALCENGINE_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("calcengine")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Display formatting (can be overridden via environment variables)
SCIENTIFIC_UPPER_BOUND = float(
    os.getenv("CALCENGINE_SCIENTIFIC_UPPER_BOUND", "1e10")
)  # |result| above this switches to scientific notation
SCIENTIFIC_LOWER_BOUND = float(
    os.getenv("CALCENGINE_SCIENTIFIC_LOWER_BOUND", "1e-6")
)  # non-zero |result| below this switches to scientific notation
SCIENTIFIC_DIGITS = int(
    os.getenv("CALCENGINE_SCIENTIFIC_DIGITS", "6")
)  # fractional mantissa digits before trailing-zero stripping
DISPLAY_PRECISION = int(
    os.getenv("CALCENGINE_DISPLAY_PRECISION", "12")
)  # significant digits for positional results

# Session limits
MAX_UNDO_DEPTH = int(os.getenv("CALCENGINE_MAX_UNDO_DEPTH", "100"))
MAX_KEYS_LENGTH = int(
    os.getenv("CALCENGINE_MAX_KEYS_LENGTH", "10000")
)  # characters per key sequence

OPERATORS = ("+", "-", "*", "/")

DIGIT_KEYS = frozenset("0123456789.")

# Key sequence character -> engine command
KEY_BINDINGS = {
    "+": "set_operator",
    "-": "set_operator",
    "*": "set_operator",
    "/": "set_operator",
    "=": "calculate",
    "%": "percentage",
    "C": "clear",
    "<": "delete_last",
    "~": "toggle_sign",
    "±": "toggle_sign",
    "r": "square_root",
    "√": "square_root",
    "s": "square",
    "²": "square",
    "u": "undo",
}

REPL_COMMANDS = {"help", "history", "clearhistory", "quit", "exit"}

# Optional dot and zero run right before the exponent marker: 1.500000e-7 -> 1.5e-7
EXPONENT_TRAILING_ZEROS_REGEX = re.compile(r"\.?0+e")
# Leading number of a display string, including the "Infinity" the display can show
NUMERIC_PREFIX_REGEX = re.compile(
    r"\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
