"""String puzzles: anagrams, bracket matching, ciphers, decoders and lookups."""

from __future__ import annotations

import re
from itertools import groupby
from operator import add, mul, sub

NUMBER_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
)

_CLOSERS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSERS.values())

_URI_ESCAPES = {
    "0": " ",
    "1": "!",
    "4": "$",
    "5": "%",
    "8": "(",
    "9": ")",
    "a": "*",
}
_URI_ESCAPE = re.compile(r"%(.{0,2})", re.DOTALL)

_DECUAL_PIECES = (
    r"\((?P<group>[^()]*)\).(?P<count>\d+)",
    r"(?P<letters>[A-Z]+)",
    r"(?P<digits>\d+)",
    r"(?P<bad>.)",
)
_DECUAL_PATTERN = re.compile("|".join(_DECUAL_PIECES), re.DOTALL)

_OPERATORS = {"+": add, "-": sub, "*": mul}

_CONVERSIONS = {
    "kg": (2.2046, "lb"),
    "l": (0.2642, "g"),
    "lb": (0.4536, "kg"),
    "g": (3.7854, "l"),
}


def is_anagram(first: str, second: str) -> bool:
    """True if the words are distinct rearrangements of the same letters."""
    if len(first) != len(second) or first == second:
        return False
    return sorted(first) == sorted(second)


def brackets_balanced(text: str) -> bool:
    """True if every (), {} and [] in ``text`` is properly nested and closed."""
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[char]:
                return False
    return not stack


def encrypt(text: str) -> str:
    """Characters at even positions followed by those at odd positions."""
    return text[::2] + text[1::2]


def greet(name: str) -> str:
    """The greeting line for ``name``."""
    return f"Hello, {name}!"


def drop_char(word: str, position: int) -> str:
    """Remove the character at 1-based ``position``; out-of-range leaves ``word`` as is."""
    if 1 <= position <= len(word):
        return word[: position - 1] + word[position:]
    return word


def decode_uri(text: str) -> str:
    """Decode the reserved-character escapes %20 %21 %24 %25 %28 %29 %2a."""

    def replace(match: re.Match[str]) -> str:
        code = match.group(1)
        if len(code) < 2 or code[1] not in _URI_ESCAPES:
            raise ValueError(f"unsupported escape sequence: %{code}")
        return _URI_ESCAPES[code[1]]

    return _URI_ESCAPE.sub(replace, text)


def sort_lecture(text: str) -> str:
    """Sort the two-character codes of ``text``; a trailing odd character stays last."""
    cut = len(text) - len(text) % 2
    pairs = sorted(text[start : start + 2] for start in range(0, cut, 2))
    return "".join(pairs) + text[cut:]


def expand_decual(text: str) -> str:
    """Expand a compressed string.

    Runs of capital letters are copied as they are.  A group ``(XY)`` is
    followed by one separator character and a repeat count, as in ``(XY)^3``.
    Digits that follow no group expand to nothing.
    """
    parts: list[str] = []
    for match in _DECUAL_PATTERN.finditer(text):
        if match.group("bad") is not None:
            raise ValueError(
                f"unexpected character {match.group('bad')!r} at {match.start()}"
            )
        if match.group("letters") is not None:
            parts.append(match.group("letters"))
        elif match.group("group") is not None:
            parts.append(match.group("group") * int(match.group("count")))
    return "".join(parts)


def decual_equal(first: str, second: str) -> bool:
    """True if both compressed strings expand to the same text."""
    return expand_decual(first) == expand_decual(second)


def word_value(word: str) -> int:
    """The number named by an English word from zero to ten."""
    try:
        return NUMBER_WORDS.index(word)
    except ValueError:
        raise ValueError(f"unknown number word: {word!r}") from None


def check_equation(left: str, operator: str, right: str, result: str) -> bool:
    """True if ``left operator right`` equals a number whose name is an anagram of ``result``."""
    try:
        apply = _OPERATORS[operator]
    except KeyError:
        raise ValueError(f"unknown operator: {operator!r}") from None
    value = apply(word_value(left), word_value(right))
    if not 0 <= value <= 10:
        return False
    return sorted(result) == sorted(NUMBER_WORDS[value])


def convert_unit(value: float, unit: str) -> tuple[float, str]:
    """Convert between kg/lb and l/g (gallons); returns the value and its new unit."""
    try:
        factor, target = _CONVERSIONS[unit]
    except KeyError:
        raise ValueError(f"unknown unit: {unit!r}") from None
    return value * factor, target


class ZeroOneQuery:
    """Answers whether two positions of a string lie in one run of equal characters."""

    def __init__(self, text: str) -> None:
        self._runs = [
            run for run, (_, chars) in enumerate(groupby(text)) for _ in chars
        ]

    def same(self, first: int, second: int) -> bool:
        """True if every character between the two 0-based positions is the same."""
        for position in (first, second):
            if not 0 <= position < len(self._runs):
                raise IndexError(f"position {position} out of range")
        return self._runs[first] == self._runs[second]