from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from .api import evaluate_keys
from .config import REPL_COMMANDS, VERSION
from .engine import CalculatorEngine
from .formatting import format_result
from .types import CalculationRecord, StepResult

logger = logging.getLogger(__name__)


def _health_check() -> int:
    """Run health check to verify basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running calcengine health check...")
    print("-" * 50)

    checks = [
        ("Addition", "2+3=", "5"),
        ("Left-to-right chaining", "2+3*4=", "20"),
        ("Floating point rounding", ".1+.2=", "0.3"),
        ("Scientific notation", "999999999*999999999=", "1e+18"),
        ("Square root", "16r", "4"),
        ("Percentage", "50%", "0.5"),
    ]
    for name, keys, expected in checks:
        try:
            result = evaluate_keys(keys)
            if result.ok and result.display == expected:
                print(f"[OK] {name} works")
                checks_passed += 1
            else:
                print(f"[FAIL] {name}: expected {expected}, got {result}")
                checks_failed += 1
        except Exception as e:
            print(f"[FAIL] {name} check failed: {e}")
            checks_failed += 1

    result = evaluate_keys("5/0=")
    if not result.ok and result.code == "DIVIDE_BY_ZERO":
        print("[OK] Division by zero is reported")
        checks_passed += 1
    else:
        print(f"[FAIL] Division by zero not reported: {result}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_history(history: tuple[CalculationRecord, ...] | list[dict[str, Any]]) -> None:
    """Print calculation history, oldest first."""
    if not history:
        print("(no history)")
        return
    for index, record in enumerate(history, start=1):
        if isinstance(record, dict):
            expression, result = record["expression"], record["result"]
        else:
            expression, result = record.expression, record.result
        print(f"{index:>3}. {expression} = {format_result(result)}")


def print_result_pretty(
    res: StepResult, output_format: str = "human", show_history: bool = False
) -> None:
    """Print result in specified format.

    Args:
        res: Result of a key sequence
        output_format: "json" for JSON output, "human" for human-readable
        show_history: Also print the history in human format
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    print(res.display)
    if show_history:
        print_history(res.history or [])


def print_help_text() -> None:
    help_text = """
calcengine - key-driven calculator

Each line is a sequence of keys applied to the running calculator:

  0-9 .      enter digits
  + - * /    select an operator (a pending one is applied first)
  =          calculate
  %          percentage
  ~  or ±    toggle sign
  r  or √    square root
  s  or ²    square
  <          delete last character
  C          clear entry and pending operator
  u          undo last step

Commands:
  help          show this text
  history       show completed calculations
  clearhistory  forget completed calculations
  quit, exit    leave

Examples:
  >>> 2+3*4=
  20
  >>> .1+.2=
  0.3
  >>> 16r
  4
"""
    print(help_text)


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL loop with graceful interrupt handling."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    engine = CalculatorEngine()
    print("calcengine - type 'help' for keys, 'quit' to exit.")

    while True:
        try:
            raw = input(f"[{engine.get_current_input()}] >>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue

        command = raw.lower()
        if command in REPL_COMMANDS:
            if command in ("quit", "exit"):
                print("Goodbye.")
                break
            if command == "help":
                print_help_text()
            elif command == "history":
                print_history(engine.get_history())
            elif command == "clearhistory":
                engine.clear_history()
                print("History cleared.")
            continue

        result = evaluate_keys(raw, engine)
        if output_format == "json":
            print_result_pretty(result, output_format)
        elif not result.ok:
            print("Error:", result.error)
        else:
            print(result.display)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the calcengine CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="calcengine")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Run one key sequence and exit (non-interactive)",
        dest="eval_keys",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="With --eval, also print the calculation history",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check on the calculator core",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_keys is not None:
        keys = args.eval_keys.strip()
        # Remove ">>>" prompt if present
        if keys.startswith(">>>"):
            keys = keys[3:].strip()
        logger.debug("Evaluating key sequence %r", keys)
        result = evaluate_keys(keys)
        print_result_pretty(result, output_format=args.format, show_history=args.history)
        return 0 if result.ok else 1

    repl_loop(output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m calcengine_pkg.cli"""
    import sys

    sys.exit(main_entry())
