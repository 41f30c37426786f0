"""Answers to small contest problems over lists of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def review_verdicts(ratings: Iterable[int]) -> list[bool]:
    """Whether each rating is above four."""
    return [rating > 4 for rating in ratings]


def approval_cost(scores: Sequence[int]) -> int:
    """Coins (100 per judge) spent raising the lowest of five scores to ten until they total 35."""
    if len(scores) != 5:
        raise ValueError(f"expected 5 scores, got {len(scores)}")
    total = sum(scores)
    coins = 0
    for score in sorted(scores):
        if total >= 35:
            break
        coins += 100
        total += 10 - score
    return coins


def balanced_lighting(colors: Iterable[int]) -> bool:
    """Whether unpainted lamps can balance red (1) and blue (2) ones."""
    red = blue = unpainted = 0
    for color in colors:
        if color == 1:
            red += 1
        elif color == 2:
            blue += 1
        else:
            unpainted += 1
    gap = abs(red - blue)
    if unpainted >= gap:
        unpainted -= gap
    return unpainted % 2 == 0


def bar_queue_entries(queue: Iterable[str]) -> int:
    """How many people enter before boys outnumber twice the girls."""
    boys = girls = 0
    count = 0
    for count, person in enumerate(queue, start=1):
        if person == "B":
            boys += 1
        elif person == "G":
            girls += 1
        if boys > 2 * girls:
            return count
    return count


def best_movie(movies: Iterable[tuple[int, int]]) -> int | None:
    """Lowest price among movies rated seven or more, or None when none qualifies."""
    prices = [price for rating, price in movies if rating >= 7]
    return min(prices) if prices else None


def total_breaks(sticks: Iterable[int]) -> int:
    """Breaks needed to cut every stick into unit pieces."""
    return sum(length - 1 for length in sticks)


def shortest_two_distinct(values: Sequence[int]) -> int | None:
    """Length of the shortest run holding exactly two distinct values, or None."""
    if any(left != right for left, right in zip(values, values[1:])):
        return 2
    return None


def people_ahead(heights: Sequence[int]) -> int:
    """People the last person must pass to stand behind the first one at least as tall."""
    if not heights:
        raise ValueError("no heights given")
    last = heights[-1]
    first = next(i for i, height in enumerate(heights) if height >= last)
    return len(heights) - first - 1


def min_max_deletion(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer each point update with the distance between the running sum of changes and the maximum.

    The running sum starts at zero and follows each update's change; the maximum
    starts as the largest value and never falls.
    """
    current = list(values)
    running = 0
    highest = max(current) if current else None
    answers = []
    for index, value in queries:
        if not 0 <= index < len(current):
            raise IndexError(f"index {index} out of range")
        running += value - current[index]
        if highest is None or value >= highest:
            highest = value
        current[index] = value
        answers.append(abs(running - highest))
    return answers


def no_odd_sum_operations(values: Iterable[int]) -> int:
    """Fewest operations so that no pair of ones and twos sums to an odd number."""
    ones = twos = 0
    for value in values:
        if value == 1:
            ones += 1
        else:
            twos += 1
    best = twos
    if ones % 2 == 0:
        best = min(best, ones // 2)
    return best


def minimum_security_time(queue_sizes: Sequence[int]) -> int:
    """Earliest time to clear security starting in queue zero."""
    if not queue_sizes:
        raise ValueError("no queues given")

    def finish(position: int, size: int) -> int:
        if position == 0:
            return size
        return position + max(0, size - position + 1)

    return min(finish(position, size) for position, size in enumerate(queue_sizes))


def subset_sum_divisible_by_three(values: Iterable[int]) -> bool:
    """Whether some small subset sums to a multiple of three."""
    zero = one = two = 0
    for value in values:
        if value % 3 == 0:
            zero += 1
        elif value > 0 and value % 3 == 1:
            one += 1
        else:
            two += 1
    return zero > 0 or (one >= 1 and two >= 1) or one >= 3 or two >= 3


def sum_to_zero(n: int) -> list[int] | None:
    """``n`` non-zero integers summing to zero, or None when ``n`` is one."""
    if n < 0:
        raise ValueError("length must not be negative")
    if n == 1:
        return None
    if n % 2 == 0:
        return [1, -1] * (n // 2)
    return [2, -1, -1] + [1, -1] * ((n - 3) // 2)


def max_alternate_sum(values: Sequence[int]) -> int:
    """The larger of the sums at even and at odd positions."""
    return max(sum(values[::2]), sum(values[1::2]))


def can_unlock(current: Sequence[int], target: Sequence[int], k: int) -> bool:
    """Whether the safe can reach ``target`` from ``current`` in exactly ``k`` moves."""
    if len(current) != len(target):
        raise ValueError("current and target differ in length")
    moves = 0
    min_detour = math.inf
    for a, b in zip(current, target):
        gap = abs(a - b)
        short, long = min(gap, 9 - gap), max(gap, 9 - gap)
        moves += short
        min_detour = min(min_detour, long - short)
    remain = k - moves
    if remain < 0:
        return False
    return remain % 2 == 0 or min_detour <= remain


def min_monster_time(health: Sequence[int]) -> int:
    """Shortest time to defeat every monster."""
    if not health:
        raise ValueError("no monsters given")
    ordered = sorted(health)
    last = len(ordered) - 1
    return min(value + last - i for i, value in enumerate(ordered))