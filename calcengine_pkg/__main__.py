"""Main entry point for running calcengine_pkg as a module.

This allows running calcengine with:
    python -m calcengine_pkg
    python -m calcengine_pkg --health-check
    python -m calcengine_pkg -e "2+3*4="

This is equivalent to running:
    python -m calcengine_pkg.cli
    python calcengine.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
