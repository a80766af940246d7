#!/usr/bin/env python3
"""
calcengine - key-driven calculator

Main entry point for the calcengine application.
This file serves as a thin wrapper that delegates all functionality
to the calcengine_pkg package.

Usage:
    python calcengine.py                    # Interactive REPL
    python calcengine.py -e "2+3*4="        # Run one key sequence
    python calcengine.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for calcengine.

    Delegates all functionality to the calcengine_pkg.cli module,
    which handles argument parsing, key evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from calcengine_pkg.cli import main_entry
    except ImportError as e:
        print(f"Error: Failed to import calcengine_pkg: {e}")
        print("Please ensure the package is installed: pip install -e .")
        return 1

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
