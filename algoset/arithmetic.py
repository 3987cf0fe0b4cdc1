"""Number puzzles: tribonacci, powers of three, good bases, ORs and expressions."""

from __future__ import annotations

import math
from itertools import accumulate

_TRIBONACCI_LIMIT = 37
_U64_LIMIT = 2**64
_DECIMAL_DIGITS = frozenset("0123456789")

_POWERS_OF_THREE = tuple(3**exponent for exponent in range(15))
_FULL_SUMS_OF_THREE = tuple(accumulate(_POWERS_OF_THREE))


def _tribonacci_table(size: int) -> tuple[int, ...]:
    values = []
    a, b, c = 0, 1, 1
    for _ in range(size):
        values.append(a)
        a, b, c = b, c, a + b + c
    return tuple(values)


_TRIBONACCI = _tribonacci_table(_TRIBONACCI_LIMIT + 1)


def tribonacci(n: int) -> int:
    """Return the n-th tribonacci number for 0 <= n <= 37."""
    if not 0 <= n <= _TRIBONACCI_LIMIT:
        raise ValueError(f"n must be between 0 and {_TRIBONACCI_LIMIT}, got {n}")
    return _TRIBONACCI[n]


def _first_match(values: tuple[int, ...], n: int) -> bool:
    for value in values:
        if value >= n:
            return value == n
    return False


def _sum_of_distinct_powers(n: int, exclude: int) -> bool:
    if _first_match(_POWERS_OF_THREE, n) or _first_match(_FULL_SUMS_OF_THREE, n):
        return n != exclude
    if any(low < n < high for low, high in zip(_FULL_SUMS_OF_THREE, _POWERS_OF_THREE[1:])):
        return False
    return any(
        power < exclude and n - power > 0 and _sum_of_distinct_powers(n - power, power)
        for power in reversed(_POWERS_OF_THREE)
    )


def check_powers_of_three(n: int) -> bool:
    """Tell whether ``n`` is a sum of distinct powers of three."""
    return _sum_of_distinct_powers(n, _POWERS_OF_THREE[-1] + 1)


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or any(ch not in _DECIMAL_DIGITS for ch in digits):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(digits)
    if value >= _U64_LIMIT:
        raise ValueError(f"value out of range: {text!r}")
    return value


def smallest_good_base(n: str) -> str:
    """Return the smallest base in which ``n`` is written with only ones."""
    num = _parse_u64(n)
    if num == 0:
        raise ValueError("n must be positive")
    max_len_ones = int(math.log2(float(num)))
    for length in range(max_len_ones, 1, -1):
        base = int(float(num) ** (1.0 / length))
        if base < 2:
            continue
        total = 1
        term = 1
        for _ in range(length):
            term *= base
            total += term
            if total > num:
                break
        if total == num:
            return str(base)
    return str(num - 1)


def subarray_bitwise_ors(arr: list[int]) -> int:
    """Count the distinct bitwise ORs over all non-empty contiguous subarrays."""
    seen: set[int] = set()
    ending_here: set[int] = set()
    for value in arr:
        ending_here = {previous | value for previous in ending_here} | {value}
        seen |= ending_here
    return len(seen)


def add_operators(num: str, target: int) -> list[str]:
    """List the ways to put '+', '-' and '*' between the digits of ``num`` to reach ``target``."""
    if any(ch not in _DECIMAL_DIGITS for ch in num):
        raise ValueError(f"num must hold decimal digits only: {num!r}")
    results: list[str] = []

    def search(pos: int, expr: str, value: int, last: int) -> None:
        if pos == len(num):
            if value == target:
                results.append(expr)
            return
        for end in range(pos + 1, len(num) + 1):
            token = num[pos:end]
            if len(token) > 1 and token[0] == "0":
                break
            operand = int(token)
            if pos == 0:
                search(end, token, operand, operand)
                continue
            search(end, f"{expr}+{token}", value + operand, operand)
            search(end, f"{expr}-{token}", value - operand, -operand)
            product = last * operand
            search(end, f"{expr}*{token}", value - last + product, product)

    if num:
        search(0, "", 0, 0)
    return results