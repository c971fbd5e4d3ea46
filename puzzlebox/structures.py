"""Puzzles built on heaps, queues, ordered sets and simulations."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice

_ITES_SEED = 1983
_ITES_MULTIPLIER = 214013
_ITES_INCREMENT = 2531011

_MEDIAN_SEED = 1983
_MEDIAN_MOD = 20090711


def min_baking_time(times: Iterable[int]) -> int:
    """Least time to bake every cake using three ovens at once.

    Each cake goes whole into one oven; the answer is the smallest possible
    load of the busiest oven.
    """
    cakes = list(times)
    if not cakes:
        raise ValueError("at least one cake is required")
    if any(t < 0 for t in cakes):
        raise ValueError("baking times must not be negative")
    total = sum(cakes)
    loads: set[tuple[int, int]] = {(0, 0)}
    for t in cakes:
        grown = set(loads)
        for first, second in loads:
            grown.add(tuple(sorted((first + t, second))))
            grown.add(tuple(sorted((first, second + t))))
        loads = grown
    return min(max(first, second, total - first - second) for first, second in loads)


def greedy_baking_time(times: Iterable[int]) -> int:
    """Baking time when the longest waiting cake always takes the next free oven."""
    cakes = list(times)
    if not cakes:
        raise ValueError("at least one cake is required")
    if len(cakes) <= 2:
        return max(cakes)
    heap = [-t for t in cakes]
    heapq.heapify(heap)
    slots = [1, 1, 1]
    rounds = 0 if len(cakes) == 3 else 1

    def fill() -> bool:
        for oven, remaining in enumerate(slots):
            if not heap:
                return False
            if remaining <= 1:
                slots[oven] = -heapq.heappop(heap)
                if not heap:
                    return False
        return True

    while fill():
        slots = [remaining - 1 for remaining in slots]
        rounds += 1
    return rounds + max(slots)


def insertion_order(shifts: Sequence[int]) -> list[int]:
    """Recover the original values 1..n from the left shifts insertion sort made.

    ``shifts[i]`` is how far the i-th element moved left while being sorted.
    """
    order: list[int] = []
    for index, shift in enumerate(shifts):
        if not 0 <= shift <= index:
            raise ValueError(f"shift {shift} at position {index} is impossible")
        order.insert(index - shift, index)
    result = [0] * len(order)
    for rank, index in enumerate(order, start=1):
        result[index] = rank
    return result


def _signal_stream() -> Iterator[int]:
    seed = _ITES_SEED
    while True:
        yield seed % 10000 + 1
        seed = (seed * _ITES_MULTIPLIER + _ITES_INCREMENT) & 0xFFFFFFFF


def ites_signals(count: int) -> list[int]:
    """The first ``count`` values of the pseudo-random signal sequence."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(islice(_signal_stream(), count))


def count_ites(target: int, count: int) -> int:
    """How many contiguous runs of the first ``count`` signals sum to ``target``."""
    if count < 0:
        raise ValueError("count must not be negative")
    window: deque[int] = deque()
    total = 0
    found = 0
    for signal in islice(_signal_stream(), count):
        window.append(signal)
        total += signal
        while window and total > target:
            total -= window.popleft()
        if window and total == target:
            found += 1
    return found


def josephus_survivors(count: int, step: int) -> tuple[int, int]:
    """The two people left when every ``step``-th person is removed, starting with person 1."""
    if count < 2:
        raise ValueError("count must be at least 2")
    if step < 1:
        raise ValueError("step must be at least 1")
    people = list(range(1, count + 1))
    index = 0
    while len(people) > 2:
        people.pop(index)
        index = (index + step - 1) % len(people)
    first, second = people
    return first, second


def magic_power(powers: Iterable[int], uses: int) -> int:
    """Total power gathered by drawing ``uses`` times from the strongest source.

    Each draw yields the source's power and weakens it by one; spent sources
    yield nothing more.
    """
    if uses < 0:
        raise ValueError("uses must not be negative")
    heap = [-power for power in powers]
    heapq.heapify(heap)
    total = 0
    for _ in range(uses):
        if not heap:
            break
        power = -heapq.heappop(heap)
        total += power
        if power > 0:
            heapq.heappush(heap, -(power - 1))
    return total


def nerd_count_sum(people: Iterable[tuple[int, int]]) -> int:
    """Sum, after each arrival, of how many people are not outclassed.

    A person ``(p, q)`` is outclassed by anyone with both a larger ``p`` and a
    larger ``q``.
    """
    keys: list[int] = []
    values: list[int] = []
    total = 0
    for p, q in people:
        above = bisect_right(keys, p)
        if above == len(keys) or values[above] <= q:
            end = bisect_left(keys, p)
            start = end
            while start > 0 and values[start - 1] < q:
                start -= 1
            del keys[start:end]
            del values[start:end]
            if start == len(keys) or keys[start] != p:
                keys.insert(start, p)
                values.insert(start, q)
        total += len(keys)
    return total


def _partition(items: list[int], left: int, right: int) -> int:
    pivot = items[left]
    while left < right:
        while items[right] >= pivot and left < right:
            right -= 1
        if left != right:
            items[left] = items[right]
        while items[left] <= pivot and left < right:
            left += 1
        if left != right:
            items[right] = items[left]
            right -= 1
    items[left] = pivot
    return left


def quicksort_steps(values: Iterable[int]) -> Iterator[list[int]]:
    """Sort with quicksort, yielding a copy of the list after every partition."""
    items = list(values)
    if not items:
        return
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        pivot = _partition(items, left, right)
        yield list(items)
        if pivot < right:
            pending.append((pivot + 1, right))
        if left < pivot:
            pending.append((left, pivot - 1))


def quicksort(values: Iterable[int]) -> list[int]:
    """A sorted copy of ``values``."""
    result = list(values)
    for step in quicksort_steps(result):
        result = step
    return result


def running_median_sum(count: int, multiplier: int, increment: int) -> int:
    """Sum of the running medians of a generated sequence, modulo 20090711.

    The sequence starts at 1983 and continues with
    ``next = (previous * multiplier + increment) % 20090711``.  For an even
    number of values the lower median is taken.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    lower: list[int] = []  # negated, max-heap
    upper: list[int] = []
    median = _MEDIAN_SEED
    value = _MEDIAN_SEED
    total = _MEDIAN_SEED
    for _ in range(count - 1):
        value = (value * multiplier + increment) % _MEDIAN_MOD
        if value > median:
            heapq.heappush(upper, value)
        else:
            heapq.heappush(lower, -value)
        while (balance := len(lower) - len(upper)) not in (0, -1):
            if balance > 0:
                heapq.heappush(upper, median)
                median = -heapq.heappop(lower)
            else:
                heapq.heappush(lower, -median)
                median = heapq.heappop(upper)
        total = (total + median) % _MEDIAN_MOD
    return total