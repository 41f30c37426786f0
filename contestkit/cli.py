"""Command-line front end that answers contest problems from their plain-text input."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator, Sequence

from contestkit.arrays import bar_queue_entries, min_max_deletion
from contestkit.simple import ipl_verdict

_INT = re.compile(r"[+-]?\d+")
_SPACE = re.compile(r"\s*")


class _Reader:
    """Whitespace-separated reader over contest input."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip(self) -> None:
        match = _SPACE.match(self._text, self._pos)
        if match:
            self._pos = match.end()
        if self._pos >= len(self._text):
            raise ValueError("unexpected end of input")

    def integer(self) -> int:
        self._skip()
        match = _INT.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected an integer at offset {self._pos}")
        self._pos = match.end()
        return int(match.group())

    def char(self) -> str:
        self._skip()
        char = self._text[self._pos]
        self._pos += 1
        return char

    def cases(self) -> range:
        count = self.integer()
        if count < 0:
            raise ValueError("negative number of test cases")
        return range(count)


def _ipl(reader: _Reader) -> Iterator[str]:
    yield ipl_verdict(reader.integer())


def _bar_queue(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        n = reader.integer()
        queue = [reader.char() for _ in range(n)]
        yield str(bar_queue_entries(queue))


def _min_max_deletion(reader: _Reader) -> Iterator[str]:
    for _ in reader.cases():
        n = reader.integer()
        q = reader.integer()
        values = [reader.integer() for _ in range(n)]
        queries = [(reader.integer(), reader.integer()) for _ in range(q)]
        for answer in min_max_deletion(values, queries):
            yield str(answer)


PROBLEMS: dict[str, Callable[[_Reader], Iterator[str]]] = {
    "ipl": _ipl,
    "bar-queue": _bar_queue,
    "min-max-deletion": _min_max_deletion,
}


def solve_text(problem: str, text: str) -> str:
    """Answer ``problem`` for the contest input ``text``, one line per answer."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    lines = list(handler(_Reader(text)))
    return "".join(f"{line}\n" for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answers."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Answer a contest problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = solve_text(args.problem, sys.stdin.read())
    except (ValueError, IndexError) as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0