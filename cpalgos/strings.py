"""String puzzles: caps-lock fixing, match winners and username registration."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator


def fix_caps_lock(word: str) -> str:
    """Undo an accidental caps lock.

    A word that is all upper case, or lower case only in its first letter,
    has the case of every letter flipped; any other word is left alone.
    """
    if all(ch.isupper() for ch in word):
        return word.lower()
    if word[0].islower() and all(ch.isupper() for ch in word[1:]):
        return word[0].upper() + word[1:].lower()
    return word


def football_winner(goals: Iterable[str]) -> str:
    """Team that scored more goals, given the scorer of each goal.

    Raises ``ValueError`` if there were no goals.
    """
    scores = Counter(goals)
    if not scores:
        raise ValueError("at least one goal is required")
    teams = sorted(scores)
    first, last = teams[0], teams[-1]
    return first if scores[first] > scores[last] else last


def register_names(names: Iterable[str]) -> Iterator[str]:
    """Yield the registration response for each requested name.

    A new name answers ``OK``; a repeated one gets the next free numeric suffix.
    """
    seen: Counter[str] = Counter()
    for name in names:
        count = seen[name]
        yield "OK" if count == 0 else f"{name}{count}"
        seen[name] += 1