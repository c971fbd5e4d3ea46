"""Counting and optimisation puzzles solved by search and dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import pairwise

MOD = 1_000_000_007

# Cells covered by an L-shaped piece, as (row, column) offsets from its
# first cell in row-major order.
_L_SHAPES = (
    ((0, 0), (1, 0), (0, 1)),
    ((0, 0), (0, 1), (1, 1)),
    ((0, 0), (1, 0), (1, 1)),
    ((0, 0), (1, 0), (1, -1)),
)

_DIGITS = frozenset("0123456789")


def count_board_covers(board: Sequence[str]) -> int:
    """Count the ways to cover every '.' cell of ``board`` with L-shaped triominoes.

    Cells marked '#' are already filled.  A board with no free cells has
    exactly one (empty) cover.
    """
    rows = list(board)
    width = len(rows[0]) if rows else 0
    for row in rows:
        if len(row) != width:
            raise ValueError("board rows must all have the same length")
        bad = set(row) - {".", "#"}
        if bad:
            raise ValueError(f"unexpected board characters: {''.join(sorted(bad))!r}")
    height = len(rows)
    free = [[cell == "." for cell in row] for row in rows]

    def first_free() -> tuple[int, int] | None:
        for y, row in enumerate(free):
            for x, empty in enumerate(row):
                if empty:
                    return y, x
        return None

    def fits(cells: list[tuple[int, int]]) -> bool:
        return all(0 <= y < height and 0 <= x < width and free[y][x] for y, x in cells)

    def cover() -> int:
        start = first_free()
        if start is None:
            return 1
        y0, x0 = start
        total = 0
        for shape in _L_SHAPES:
            cells = [(y0 + dy, x0 + dx) for dy, dx in shape]
            if fits(cells):
                for y, x in cells:
                    free[y][x] = False
                total += cover()
                for y, x in cells:
                    free[y][x] = True
        return total

    return cover()


def count_pairings(count: int, pairs: Iterable[tuple[int, int]]) -> int:
    """Count the ways to split ``count`` students into pairs of friends."""
    if count < 0:
        raise ValueError("count must not be negative")
    friends = [[False] * count for _ in range(count)]
    for first, second in pairs:
        for student in (first, second):
            if not 0 <= student < count:
                raise ValueError(f"student {student} out of range")
        friends[first][second] = friends[second][first] = True
    taken = [False] * count

    def pairings() -> int:
        child = next((c for c in range(count) if not taken[c]), None)
        if child is None:
            return 1
        taken[child] = True
        total = 0
        for other in range(count):
            if not taken[other] and friends[child][other]:
                taken[other] = True
                total += pairings()
                taken[other] = False
        taken[child] = False
        return total

    return pairings()


def count_queens(size: int) -> int:
    """Count the placements of ``size`` non-attacking queens on a size x size board."""
    if size < 0:
        raise ValueError("size must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == size:
            return 1
        total = 0
        for col in range(size):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            total += place(row + 1)
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        return total

    return place(0)


def tilings(width: int) -> int:
    """Ways to tile a 2 x ``width`` strip with 2 x 1 dominoes, modulo 1000000007."""
    if width < 0:
        raise ValueError("width must not be negative")
    previous, current = 1, 1
    for _ in range(width - 1):
        previous, current = current, (previous + current) % MOD
    return current


def asymmetric_tilings(width: int) -> int:
    """Domino tilings of a 2 x ``width`` strip that are not mirror-symmetric, mod 1000000007."""
    if width < 1:
        raise ValueError("width must be at least 1")
    half = width // 2
    if width % 2 == 0:
        return (tilings(width) - tilings(half) - tilings(half - 1)) % MOD
    return (tilings(width) - tilings(half)) % MOD


def _segment_score(segment: Sequence[int]) -> int:
    steps = [b - a for a, b in pairwise(segment)]
    if all(step == 0 for step in steps):
        return 1
    constant_step = len(set(steps)) == 1
    if constant_step and steps[0] in (1, -1):
        return 2
    if all(a == b for a, b in zip(segment, segment[2:])):
        return 4
    if constant_step:
        return 5
    return 10


def pi_difficulty(digits: str) -> int:
    """Least total difficulty of splitting ``digits`` into pieces of 3 to 5 digits."""
    if not set(digits) <= _DIGITS:
        raise ValueError("digits must contain only 0-9")
    values = [int(d) for d in digits]
    length = len(values)
    best: list[int | None] = [None] * (length + 1)
    best[length] = 0
    for start in reversed(range(length)):
        options = [
            _segment_score(values[start : start + size]) + rest
            for size in (3, 4, 5)
            if start + size <= length and (rest := best[start + size]) is not None
        ]
        best[start] = min(options) if options else None
    result = best[0]
    if result is None:
        raise ValueError("digits cannot be split into pieces of 3 to 5")
    return result


def triangle_max_path(rows: Sequence[Sequence[int]]) -> int:
    """Largest sum along a path from the apex to the base of a number triangle."""
    if not rows:
        raise ValueError("triangle must have at least one row")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} numbers")
    sums = list(rows[-1])
    for row in reversed(rows[:-1]):
        sums = [value + max(left, right) for value, left, right in zip(row, sums, sums[1:])]
    return sums[0]


def lis_length(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        slot = bisect_left(tails, value)
        if slot == len(tails):
            tails.append(value)
        else:
            tails[slot] = value
    return len(tails)