"""The 0/1 knapsack problem solved four ways."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from functools import cache


def _validate(values: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")


def knapsack_recursive(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value by plain recursion over include/exclude choices."""
    _validate(values, weights, capacity)

    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        value, weight = values[count - 1], weights[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(without, value + best(count - 1, room - weight))

    return best(len(values), capacity)


def knapsack_memo(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value by memoised recursion."""
    _validate(values, weights, capacity)

    @cache
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        value, weight = values[count - 1], weights[count - 1]
        without = best(count - 1, room)
        if weight > room:
            return without
        return max(without, value + best(count - 1, room - weight))

    return best(len(values), capacity)


def knapsack_table(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value from a full items-by-capacity table."""
    _validate(values, weights, capacity)
    table = [[0] * (capacity + 1)]
    for value, weight in zip(values, weights):
        previous = table[-1]
        table.append(
            [
                max(previous[room], value + previous[room - weight])
                if room >= weight
                else previous[room]
                for room in range(capacity + 1)
            ]
        )
    return table[-1][capacity]


def knapsack_compact(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value using a single row of capacity + 1 cells."""
    _validate(values, weights, capacity)
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read items and a capacity from standard input and print the best profit."""
    parser = argparse.ArgumentParser(
        prog="knapsack",
        description="Read n, then n value/weight pairs, then a capacity, from standard input.",
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter n")
        count = int(next(tokens))
        print("Enter value and weight for n items")
        values: list[int] = []
        weights: list[int] = []
        for _ in range(count):
            values.append(int(next(tokens)))
            weights.append(int(next(tokens)))
        print("Enter capacity")
        capacity = int(next(tokens))
        profit = knapsack_compact(values, weights, capacity)
    except StopIteration:
        parser.error("unexpected end of input")
    except ValueError as exc:
        parser.error(str(exc))
    print(f"maximum profit {profit}")
    return 0