"""Greedy decision puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def can_defeat_dragons(strength: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Whether a hero of ``strength`` can beat every ``(strength, bonus)`` dragon.

    Dragons are fought weakest first; a fight is lost unless the hero is
    strictly stronger, and each win adds the dragon's bonus.
    """
    for dragon_strength, bonus in sorted(dragons, key=lambda d: (d[0], -d[1])):
        if strength <= dragon_strength:
            return False
        strength += bonus
    return True


def can_pass_all_levels(
    n: int, x_levels: Iterable[int], y_levels: Iterable[int]
) -> bool:
    """Whether the two players together can pass all ``n`` levels."""
    return len(set(x_levels) | set(y_levels)) == n


def move_to_end(values: Sequence[int]) -> list[int]:
    """For each k from 1 to n, the best sum of the last k elements after one move.

    One element may be moved to the end before the last k are summed.
    """
    prefix_max = list(accumulate(values, max))
    answers: list[int] = []
    suffix_sum = 0
    for value, best in zip(reversed(values), reversed(prefix_max)):
        answers.append(suffix_sum + best)
        suffix_sum += value
    return answers


def taxi_count(groups: Iterable[int]) -> int:
    """Fewest four-seat taxis carrying every group, each group riding together.

    Raises ``ValueError`` if a group size is not between 1 and 4.
    """
    counts = [0] * 5
    for size in groups:
        if not 1 <= size <= 4:
            raise ValueError(f"group size must be between 1 and 4, got {size}")
        counts[size] += 1
    taxis = counts[4] + counts[3] + counts[2] // 2
    ones = max(0, counts[1] - counts[3])
    if counts[2] % 2:
        taxis += 1
        ones = max(0, ones - 2)
    taxis += -(-ones // 4)
    return taxis