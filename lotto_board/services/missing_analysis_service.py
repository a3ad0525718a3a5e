"""Missing-number aggregations over already fetched draws.

Input draws are expected most-recent-first.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lotto_board.models.draw import DrawRecord

ALL_NUMBERS = range(1, 46)


@dataclass(frozen=True)
class MissingStreak:
    number: int
    streak: int


def find_missing(draws: Sequence[DrawRecord], weeks: int) -> list[int]:
    """Numbers in 1..45 that did not appear in the first `weeks` draws."""

    recent = draws[: max(0, int(weeks))]
    appeared: set[int] = set()
    for draw in recent:
        appeared.update(int(n) for n in draw.numbers)

    return [n for n in ALL_NUMBERS if n not in appeared]


def find_consecutive_missing(draws: Sequence[DrawRecord], min_streak: int = 10) -> list[MissingStreak]:
    """Numbers absent from at least `min_streak` of the given draws.

    The count covers every draw in the input and is not reset when the
    number appears. Sorted by count (highest first), then by number.
    """

    streaks: dict[int, int] = {n: 0 for n in ALL_NUMBERS}
    for draw in draws:
        appeared = set(draw.numbers)
        for n in ALL_NUMBERS:
            if n not in appeared:
                streaks[n] += 1

    result = [MissingStreak(number=n, streak=s) for n, s in streaks.items() if s >= min_streak]
    return sorted(result, key=lambda item: (-item.streak, item.number))
