"""Number-theoretic and counting answers to small contest problems."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def gcd_additions(x: int, y: int) -> int:
    """Fewest increments of ``x`` or ``y`` that make their gcd exceed one."""
    if math.gcd(x, y) > 1:
        return 0
    if math.gcd(x + 1, y) > 1 or math.gcd(x, y + 1) > 1:
        return 1
    return 2


def extra_aircraft(aircraft: int, passengers: int) -> int:
    """Aircraft of 100 seats to buy so that ``passengers`` all fly."""
    full = _trunc_div(passengers, 100)
    if full > aircraft:
        return full - aircraft + (0 if passengers % 100 == 0 else 1)
    return 0


def lucky_difference(total: int, boys: int, k: int) -> int:
    """Difference between the leftover boys and girls after groups of ``k``."""
    girls = total - boys
    return abs(_trunc_rem(boys, k) - _trunc_rem(girls, k))


def is_hattrick(balls: Sequence[int]) -> bool:
    """Whether the first three of six balls score exactly six runs."""
    if len(balls) != 6:
        raise ValueError(f"expected 6 balls, got {len(balls)}")
    return sum(balls[:3]) == 6


def incremental_game_winner(x: int, y: int, k: int) -> str:
    """Name of the winner, ``Alice`` or ``Bob``."""
    alice = (x - k <= k and y <= k) or (y - k <= k and x <= k)
    return "Alice" if alice else "Bob"


def can_jump(n: int, m: int, a: int, b: int) -> bool:
    """Whether the jump succeeds; only ``n`` and ``m`` decide it."""
    return n < m


def max_triangle(n: int) -> int | None:
    """Largest triangle count for ``n`` points, or None when there is none."""
    if n <= 3:
        return None
    return 3 * (n - 1)


def nearest_square(n: int) -> int:
    """Largest positive perfect square not above ``n``, or 0."""
    if n < 1:
        return 0
    return math.isqrt(n) ** 2


def reduce_number(x: int) -> int:
    """Halve even numbers and subtract three from odd ones above three until stuck."""
    if x == 0:
        raise ValueError("zero never reduces")
    while True:
        if x > 3 and x % 2 != 0:
            x -= 3
        elif x % 2 == 0:
            x //= 2
        else:
            return x


def max_binary_string_coins(n: int, a: int, b: int, c: int, d: int) -> int:
    """Best profit over every split of ``n`` characters into zeros and ones."""
    return max(
        0,
        max(zeros * a + (n - zeros) * b + zeros * (n - zeros) * (c + d) for zeros in range(n + 1))
        if n >= 0
        else 0,
    )


def chococut(n: int, m: int, k: int) -> int:
    """Most chocolate Alice keeps with one straight cut while Bob gets at least ``k``."""
    total = n * m
    if k == 0:
        return total
    pieces = [i * m for i in range(1, n)] + [j * n for j in range(1, m)]
    best = 0
    for piece in pieces:
        rest = total - piece
        if piece >= k:
            best = max(best, rest)
        if rest >= k:
            best = max(best, piece)
    return best