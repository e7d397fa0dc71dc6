"""Short contest problems and a command that answers them from standard input."""

from __future__ import annotations

import argparse
import sys
from itertools import accumulate
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from algodrills.combinations import find_ways

__all__ = [
    "binary_string_winner",
    "blackboard_winner",
    "mex_counts",
    "extreme_marks",
    "tournament_verdict",
    "main",
]


def binary_string_winner(k: int, s: str) -> str:
    """Return "Alice" if s holds at most k ones, otherwise "Bob"."""
    ones = sum(1 for char in s if char == "1")
    if ones <= k:
        return "Alice"
    return "Bob"


def blackboard_winner(n: int) -> str:
    """Return "Bob" when n is a multiple of four, otherwise "Alice"."""
    remainder = n % 4
    if remainder == 0:
        return "Bob"
    return "Alice"


def mex_counts(values: Sequence[int]) -> list[int]:
    """For each k from 0 to n, count the MEX values reachable by removing k elements."""
    n = len(values)
    freq = [0] * (n + 2)
    for value in values:
        if not 0 <= value <= n:
            raise ValueError(f"value {value} lies outside 0..{n}")
        freq[value] += 1
    possible = [0] * (n + 1)
    need = 0
    for mex in range(n + 1):
        if mex > 0 and freq[mex - 1] == 0:
            break
        removals = freq[mex]
        if removals + need <= n:
            possible[removals] += 1
        need += freq[mex]
    return list(accumulate(possible))


def extreme_marks(values: Sequence[int]) -> str:
    """Mark with '1' each value that is a prefix minimum or a suffix maximum."""
    if not values:
        raise ValueError("extreme_marks() needs a non-empty sequence")
    prefix_min = accumulate(values, min)
    suffix_max = list(accumulate(reversed(values), max))[::-1]
    return "".join(
        "1" if value in (low, high) else "0"
        for value, low, high in zip(values, prefix_min, suffix_max)
    )


def tournament_verdict(strengths: Sequence[int], j: int, k: int) -> str:
    """Tell whether player j (1-based) can be among the last k players standing."""
    if k != 1:
        return "YES"
    if not 1 <= j <= len(strengths):
        raise IndexError(f"player {j} is not among {len(strengths)} players")
    return "YES" if strengths[j - 1] == max(strengths) else "NO"


class _Tokens:
    """Whitespace-separated words read lazily from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._words: Iterator[str] = (word for line in stream for word in line.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        return int(self.word())

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _cases(tokens: _Tokens) -> range:
    return range(tokens.int())


def _run_binary_string_battle(tokens: _Tokens, out: TextIO) -> None:
    for _ in _cases(tokens):
        tokens.int()
        k = tokens.int()
        out.write(binary_string_winner(k, tokens.word()) + "\n")


def _run_blackboard(tokens: _Tokens, out: TextIO) -> None:
    for _ in _cases(tokens):
        out.write(blackboard_winner(tokens.int()) + "\n")


def _run_mex_count(tokens: _Tokens, out: TextIO) -> None:
    for _ in _cases(tokens):
        values = tokens.ints(tokens.int())
        out.write("".join(f"{total} " for total in mex_counts(values)) + "\n")


def _run_prefix_suffix(tokens: _Tokens, out: TextIO) -> None:
    for _ in _cases(tokens):
        out.write(extreme_marks(tokens.ints(tokens.int())) + "\n")


def _run_tournament(tokens: _Tokens, out: TextIO) -> None:
    for _ in _cases(tokens):
        n, j, k = tokens.ints(3)
        out.write(tournament_verdict(tokens.ints(n), j, k) + "\n")


def _run_coin_distribution(tokens: _Tokens, out: TextIO) -> None:
    out.write("Enter number of elements (N): ")
    n = tokens.int()
    out.write("Enter the elements:\n")
    values = tokens.ints(n)
    out.write("Enter size of combinations (r): ")
    r = tokens.int()
    out.write(f"Combinations of size {r} are:\n")
    for combo in find_ways(values, r):
        out.write("".join(f"{value} " for value in combo) + "\n")


_COMMANDS: dict[str, Callable[[_Tokens, TextIO], None]] = {
    "binary-string-battle": _run_binary_string_battle,
    "blackboard": _run_blackboard,
    "mex-count": _run_mex_count,
    "prefix-suffix": _run_prefix_suffix,
    "tournament": _run_tournament,
    "coin-distribution": _run_coin_distribution,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Answer the chosen problem for the test cases read from standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills",
        description="Solve a contest problem from test cases on standard input.",
    )
    parser.add_argument("problem", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        _COMMANDS[args.problem](_Tokens(sys.stdin), sys.stdout)
    except (ValueError, IndexError) as exc:
        print(f"algodrills: {exc}", file=sys.stderr)
        return 1
    return 0