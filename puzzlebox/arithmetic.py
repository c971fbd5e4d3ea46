"""Arithmetic puzzles: counting, averages, bisection and small geometry."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, count
from math import factorial, isqrt

_BISECTION_STEPS = 100

# How many positive integers have no repeated decimal digit.
_REPEATLESS_TOTAL = sum(
    9 * factorial(9) // factorial(10 - length) for length in range(1, 11)
)


def baseball_wins_needed(ours: int, theirs: int) -> int:
    """Wins our side still needs to be sure of the pennant.

    Returns 0 when we are already ahead.
    """
    if ours > theirs:
        return 0
    return 4 + (theirs - ours)


def _odd_one_out(values: Sequence[int], axis: str) -> int:
    tally = Counter(values)
    if sorted(tally.values()) != [1, 2]:
        raise ValueError(f"{axis} coordinates must hold one value twice and one once")
    return next(value for value, seen in tally.items() if seen == 1)


def fourth_vertex(points: Sequence[tuple[int, int]]) -> tuple[int, int]:
    """The missing corner of an axis-aligned rectangle given its other three."""
    if len(points) != 3:
        raise ValueError("exactly three points are required")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return _odd_one_out(xs, "x"), _odd_one_out(ys, "y")


def swap_endian(number: int) -> int:
    """Reverse the byte order of a 32-bit integer; negatives wrap to unsigned."""
    if not -(1 << 31) <= number < (1 << 32):
        raise ValueError(f"{number} does not fit in 32 bits")
    unsigned = number & 0xFFFFFFFF
    return int.from_bytes(unsigned.to_bytes(4, "big"), "little")


def count_fixed(values: Iterable[int]) -> int:
    """How many values sit at their own 1-based position."""
    return sum(1 for position, value in enumerate(values, start=1) if value == position)


def within_budget(limit: int, usages: Iterable[int]) -> bool:
    """True if the total of ``usages`` does not exceed ``limit``."""
    return sum(usages) <= limit


def monthly_payment(amount: float, months: int, rate: float) -> float:
    """Smallest fixed monthly payment that repays ``amount`` within ``months``.

    ``rate`` is the yearly interest rate in percent, charged monthly.
    """
    if months < 1:
        raise ValueError("months must be at least 1")
    growth = 1.0 + (rate / 12 * 0.01)

    def clears(payment: float) -> bool:
        balance = amount
        for _ in range(months):
            balance = balance * growth - payment
            if balance <= 0.0:
                return True
        return False

    low, high = 0.0, amount + (amount * (rate / 12) * 0.01)
    for _ in range(_BISECTION_STEPS):
        middle = (high + low) / 2
        if clears(middle):
            high = middle
        else:
            low = middle
    return high


def _circle_segment(radius: int, other: int, distance: int) -> float:
    x = (radius * radius + distance * distance - other * other) / 2.0 / distance
    ratio = x / radius
    if not -1.0 <= ratio <= 1.0:
        raise ValueError("the circles do not intersect")
    y = math.sqrt(abs(radius * radius - x * x))
    angle = 2.0 * math.acos(ratio)
    sector = math.pi * radius * radius * angle / 2 / math.pi
    return sector - x * y


def moon_area(first: int, second: int, distance: int) -> float:
    """Area of the first circle left uncovered by the second.

    ``distance`` separates the centres; the circles must intersect.
    """
    if first <= 0 or second <= 0:
        raise ValueError("radii must be positive")
    if distance <= 0:
        raise ValueError("distance must be positive")
    lens = _circle_segment(first, second, distance) + _circle_segment(
        second, first, distance
    )
    return math.pi * first * first - lens


def _divisor_count(value: int) -> int:
    if value == 1:
        return 1
    root = isqrt(value)
    total = 2 + sum(2 for d in range(2, root + 1) if value % d == 0)
    if root * root == value:
        total -= 1
    return total


def count_with_divisors(divisors: int, low: int, high: int) -> int:
    """How many integers in ``low..high`` have exactly ``divisors`` divisors."""
    if low < 1:
        raise ValueError("low must be at least 1")
    return sum(1 for value in range(low, high + 1) if _divisor_count(value) == divisors)


def _has_unique_digits(value: int) -> bool:
    text = str(value)
    return len(set(text)) == len(text)


def repeatless(index: int) -> int:
    """The ``index``-th (1-based) positive integer with no repeated digit."""
    if not 1 <= index <= _REPEATLESS_TOTAL:
        raise ValueError(f"index must be between 1 and {_REPEATLESS_TOTAL}")
    found = 0
    for value in count(1):
        if _has_unique_digits(value):
            found += 1
            if found == index:
                return value
    raise AssertionError("unreachable")


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run of ``values``; 0 if none is positive."""
    best = 0
    running = 0
    for value in values:
        running = running + value if running > 0 else value
        best = max(best, running)
    return best


def min_average(costs: Sequence[int], min_length: int) -> float:
    """Least average over contiguous runs of at least ``min_length`` costs."""
    size = len(costs)
    if not 1 <= min_length <= size:
        raise ValueError("min_length must be between 1 and the number of costs")
    prefix = [0, *accumulate(costs)]
    return min(
        (prefix[end] - prefix[start]) / (end - start)
        for start in range(size - min_length + 1)
        for end in range(start + min_length, size + 1)
    )


def max_pair_average(values: Iterable[int]) -> float:
    """Largest average after pairing smallest with largest; a middle value stands alone."""
    ordered = sorted(values)
    half = len(ordered) // 2
    candidates = [
        (low + high) / 2 for low, high in zip(ordered[:half], reversed(ordered))
    ]
    if len(ordered) % 2 == 1:
        candidates.append(float(ordered[half]))
    return max([0.0, *candidates])


def bookstore_min_cost(offers: Sequence[Sequence[tuple[int, int]]]) -> int:
    """Cheapest total price for all books when buying everything at one store.

    ``offers[book][store]`` is ``(cost, points)``: buying the book earns the
    points, and points already held are spent on later books.  Books are
    bought in order of the points they earn, most first.
    """
    if not offers:
        raise ValueError("at least one book is required")
    stores = len(offers[0])
    if stores == 0 or any(len(book) != stores for book in offers):
        raise ValueError("every book needs an offer from every store")

    def store_cost(store: int) -> int:
        books = sorted((book[store] for book in offers), key=lambda offer: -offer[1])
        paid = 0
        points = 0
        for cost, earned in books:
            if points < cost:
                paid += cost - points
                points = 0
            else:
                points -= cost
            points += earned
        return paid

    return min(store_cost(store) for store in range(stores))