"""Terminal front end for the calculator engine.

Run with key labels to evaluate them in one go::

    $ calcengine 5 + 3 + 2 =
    10

or without arguments for a line-oriented session. Each line holds
whitespace-separated keys; the display is printed after every line. The
session also understands ``history``, ``memory``, ``undo`` and ``quit``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from calcengine.core import Calculator
from calcengine.exceptions import UnknownKeyError
from calcengine.keys import event_for_key, events_for_keys

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calcengine",
        description="Keypad calculator with memory and history.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument("keys", nargs="*", help="key labels, e.g. 5 + 3 =")
    return parser


def _print_history(calc: Calculator, out: TextIO) -> None:
    if not calc.history:
        print("(no history)", file=out)
        return
    for entry in reversed(calc.history):
        print(entry, file=out)


def _run_line(calc: Calculator, line: str, out: TextIO) -> bool:
    """Process one session line. Returns False when the session should end."""
    for token in line.split():
        command = token.lower()
        if command in QUIT_COMMANDS:
            return False
        if command == "history":
            _print_history(calc, out)
        elif command == "memory":
            print(f"M = {calc.memory!r}", file=out)
        elif command == "undo":
            calc.undo()
        else:
            try:
                calc.handle_input(event_for_key(token))
            except UnknownKeyError as e:
                print(f"error: {e}", file=out)
                break
    print(calc.display, file=out)
    return True


def run_session(calc: Calculator, stdin: TextIO, out: TextIO) -> None:
    for line in stdin:
        if not line.strip():
            continue
        if not _run_line(calc, line, out):
            break


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    calc = Calculator()
    if args.keys:
        try:
            events = events_for_keys(args.keys)
        except UnknownKeyError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        for event in events:
            calc.handle_input(event)
        print(calc.display)
        return 0

    logger.debug("Starting interactive session")
    run_session(calc, sys.stdin, sys.stdout)
    return 0
