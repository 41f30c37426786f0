"""Answers to small contest problems over binary strings."""

from __future__ import annotations


def can_light_all(pattern: str) -> bool:
    """Whether every lamp ends lit when each ``1`` lights itself and one dark neighbour."""
    lit = [False] * len(pattern)
    last = len(pattern) - 1
    for i, char in enumerate(pattern):
        if char != "1":
            continue
        lit[i] = True
        if i > 0 and not lit[i - 1]:
            lit[i - 1] = True
        elif i < last and not lit[i + 1]:
            lit[i + 1] = True
    return all(lit)


def one_down(source: str, target: str) -> bool:
    """Whether ``source`` can become ``target`` by switching off ones in pairs."""
    source_ones = source.count("1")
    target_ones = target.count("1")
    return source_ones >= target_ones and (source_ones - target_ones) % 2 == 0