"""One-line answers to small contest problems."""

from __future__ import annotations

_THALA_THRESHOLD = 7


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def chess_win(a: int, b: int) -> int:
    """Number of games from game ``a`` to game ``b`` inclusive."""
    return b - a + 1


def exercise_and_rest(n: int) -> int:
    """Total minutes for ``n`` rounds of exercise and rest."""
    return n * 3


def ipl_verdict(x: int) -> str:
    """``THALA`` for seven or more, ``BOOM`` otherwise."""
    if x >= _THALA_THRESHOLD:
        verdict = "THALA"
    else:
        verdict = "BOOM"
    return verdict


def max_sixers(x: int) -> int:
    """How many sixes fit into ``x`` runs."""
    return _trunc_div(x, 6)


def maximum_slams(x: int) -> int:
    """Years of four slams each needed to reach 25 titles from ``x``."""
    if x >= 25:
        return 0
    return _trunc_div(25 - x + 3, 4)


def missing_shoes(left: int, right: int) -> int:
    """Shoes needed to pair every left shoe with a right one."""
    return abs(left - right)


def nearest_multiple_of_three(n: int) -> int:
    """The multiple of three closest to ``n``; the lower one on a tie."""
    low = _trunc_div(n, 3) * 3
    up = low + 3
    return low if abs(n - low) <= abs(n - up) else up


def pizzas_needed(boys: int, girls: int) -> int:
    """Eight-slice pizzas for the host plus ``boys`` (4 slices) and ``girls`` (3 slices)."""
    slices = (boys + 1) * 4 + girls * 3
    return _trunc_div(slices + 7, 8)


def pizza_split(n: int) -> int:
    """One pizza for an even group, two for an odd one."""
    remainder = n % 2
    if remainder == 0:
        pizzas = 1
    else:
        pizzas = 2
    return pizzas


def best_gems(red: int, blue: int, red_price: int, blue_price: int) -> int:
    """The better of selling all red gems or all blue gems."""
    return max(red * red_price, blue * blue_price)


def water_park(weight: int, height: int) -> bool:
    """Whether a visitor of ``weight`` and ``height`` may ride."""
    return weight >= 60 and height <= 130