"""Bit manipulation puzzles: XOR sums, prefix XOR, popcounts and AND/XOR pairs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_BITS = 30


def max_xor_sum(values: Sequence[int]) -> int:
    """Largest value of ``sum(x ^ y for y in values)`` over ``x`` in ``values``.

    Only the lowest 30 bits of each value are taken into account.
    Raises ``ValueError`` for an empty sequence.
    """
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    set_counts = [sum(1 for value in values if value >> bit & 1) for bit in range(_BITS)]

    def total(value: int) -> int:
        return sum(
            (1 << bit) * (n - count if value >> bit & 1 else count)
            for bit, count in enumerate(set_counts)
        )

    return max(total(value) for value in values)


def xor_upto(n: int) -> int:
    """XOR of all integers from 0 to ``n`` inclusive."""
    remainder = n % 4
    if remainder == 0:
        return n
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    return 0


def mexor_mixup(a: int, b: int) -> int:
    """Shortest length of an array with MEX ``a`` and XOR ``b``."""
    x = xor_upto(a - 1)
    if x == b:
        return a
    if x ^ b != a:
        return a + 1
    return a + 2


def bacteria_count(n: int) -> int:
    """Fewest bacteria to add so that exactly ``n`` are seen; the number of set bits."""
    return bin(n).count("1")


def rock_and_lever_pairs(values: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``values[i] & values[j] >= values[i] ^ values[j]``.

    For non-negative integers this holds exactly when both share their highest set bit.
    """
    groups = Counter(value.bit_length() for value in values)
    return sum(count * (count - 1) // 2 for count in groups.values())