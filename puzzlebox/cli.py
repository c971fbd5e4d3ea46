"""Command-line entry point for the batch puzzles that read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

from puzzlebox.text import convert_unit, greet


class InputError(Exception):
    """Raised when standard input does not hold what a command expects."""


class _Tokens:
    """Whitespace-separated tokens read from a text stream."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError(f"missing {what}") from None

    def integer(self, what: str) -> int:
        token = self.word(what)
        try:
            return int(token)
        except ValueError:
            raise InputError(f"{what} must be an integer, got {token!r}") from None

    def number(self, what: str) -> float:
        token = self.word(what)
        try:
            return float(token)
        except ValueError:
            raise InputError(f"{what} must be a number, got {token!r}") from None

    def count(self) -> int:
        cases = self.integer("case count")
        if cases < 0:
            raise InputError("case count must not be negative")
        return cases


def _run_hello(tokens: _Tokens) -> list[str]:
    return [greet(tokens.word("name")) for _ in range(tokens.count())]


def _run_convert(tokens: _Tokens) -> list[str]:
    lines = []
    for case in range(1, tokens.count() + 1):
        value = tokens.number("value")
        unit = tokens.word("unit")
        try:
            converted, target = convert_unit(value, unit)
        except ValueError:
            lines.append(f"{case} error")
        else:
            lines.append(f"{case} {converted:.4f} {target}")
    return lines


_COMMANDS = {
    "hello": (_run_hello, "greet each name read from standard input"),
    "convert": (_run_convert, "convert kg/lb and l/g values read from standard input"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="puzzlebox",
        description="Solve batch puzzles; the first token of input is the case count.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        commands.add_parser(name, help=summary, description=summary)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a puzzle command on standard input; returns the exit status."""
    args = _parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    try:
        lines = run(_Tokens(sys.stdin.read()))
    except InputError as error:
        print(f"puzzlebox {args.command}: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())