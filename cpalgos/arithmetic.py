"""Counting, number theory and small optimisation puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from math import isqrt

_T_PRIME_LIMIT = 1_000_000


def bitpp(statements: Iterable[str]) -> int:
    """Final value of ``x`` after running ``++X``/``X++``/``--X``/``X--`` statements from 0."""
    return sum(1 if statement in ("++X", "X++") else -1 for statement in statements)


def cheap_travel(n: int, m: int, a: int, b: int) -> int:
    """Cheapest cost of ``n`` rides with single tickets at ``a`` or ``m``-ride tickets at ``b``."""
    mixed = (n // m) * b + (n % m) * a
    only_multi = -(-n // m) * b
    only_single = n * a
    return min(mixed, only_multi, only_single)


def is_equilibrium(forces: Iterable[Sequence[int]]) -> bool:
    """Whether three-dimensional force vectors sum to zero."""
    return all(sum(axis) == 0 for axis in zip(*forces))


def cut_ribbon(n: int, a: int, b: int, c: int) -> int:
    """Most pieces of lengths ``a``, ``b`` or ``c`` that exactly make up ``n``; 0 if none."""
    return max(
        (
            x + y + (n - x * a - y * b) // c
            for x in range(n // a + 1)
            for y in range((n - x * a) // b + 1)
            if (n - x * a - y * b) % c == 0
        ),
        default=0,
    )


def max_expression(a: int, b: int, c: int) -> int:
    """Largest value from placing ``+``, ``*`` and brackets between ``a``, ``b`` and ``c``."""
    if a == 1 and c == 1:
        return a + b + c
    if a == 1:
        return (b + 1) * c
    if c == 1:
        return (b + 1) * a
    if a > 1 and b > 1 and c > 1:
        return a * b * c
    if a > 1 and b == 1 and c > 1:
        return (min(a, c) + 1) * max(a, c)
    return max(a, b, c) * 2


def three_decks(a: int, b: int, c: int) -> bool:
    """Whether cards moved from deck ``c`` can even out decks ``a <= b <= c``."""
    spare = c - b
    needed = b - a
    if needed > spare:
        return False
    return (spare - needed) % 3 == 0


def sieve(n: int) -> list[bool]:
    """Primality flags for 0..``n`` by the sieve of Eratosthenes."""
    is_prime = [True] * (n + 1)
    is_prime[: min(2, n + 1)] = [False] * min(2, n + 1)
    for i in range(2, isqrt(n) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return is_prime


@lru_cache(maxsize=1)
def _prime_flags() -> list[bool]:
    return sieve(_T_PRIME_LIMIT)


def is_t_prime(x: int) -> bool:
    """Whether ``x`` has exactly three divisors, i.e. is the square of a prime up to 10**6."""
    if x < 0:
        return False
    root = isqrt(x)
    return root * root == x and root <= _T_PRIME_LIMIT and _prime_flags()[root]


def lantern_radius(length: int, positions: Iterable[int]) -> float:
    """Least light radius for lanterns at ``positions`` to light a street of ``length``.

    Raises ``ValueError`` if there are no lanterns.
    """
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("at least one lantern is required")
    gaps = ((right - left) / 2 for left, right in zip(ordered, ordered[1:]))
    return float(max(max(gaps, default=0.0), ordered[0], length - ordered[-1]))