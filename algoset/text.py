"""Small string puzzles: stack reduction, digit ranks, runs and cell ranges."""

from __future__ import annotations

from itertools import groupby

_ASCII_DIGITS = "0123456789"


def remove_duplicates(s: str) -> str:
    """Repeatedly remove adjacent equal pairs of characters from ``s``."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def second_highest(s: str) -> int:
    """Return the second largest distinct decimal digit in ``s``, or -1."""
    present = set()
    for ch in s:
        if ch in _ASCII_DIGITS:
            present.add(int(ch))
        elif ch.isnumeric():
            raise ValueError(f"unsupported numeric character: {ch!r}")
    ranked = sorted(present, reverse=True)
    return ranked[1] if len(ranked) > 1 else -1


def check_zero_ones(s: str) -> bool:
    """Tell whether the longest run of '1' is longer than the longest run of '0'."""
    longest = {"0": 0, "1": 0}
    bits = (ch for ch in s if ch in longest)
    for bit, run in groupby(bits):
        longest[bit] = max(longest[bit], sum(1 for _ in run))
    return longest["1"] > longest["0"]


def cells_in_range(s: str) -> list[str]:
    """List the spreadsheet cells of a range such as ``"K1:L2"``, column by column."""
    if len(s) < 5:
        return []
    col1, row1, _, col2, row2 = s[:5]
    if col2 < col1 or row2 < row1:
        raise ValueError(f"range end precedes its start: {s!r}")
    return [
        chr(col) + chr(row)
        for col in range(ord(col1), ord(col2) + 1)
        for row in range(ord(row1), ord(row2) + 1)
    ]