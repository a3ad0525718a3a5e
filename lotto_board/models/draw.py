"""Draw record: one official lotto draw result.

Fields:
- round (unique, weekly cadence)
- date (YYYY-MM-DD)
- numbers (6 main numbers, origin order)
- bonus
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DrawRecord:
    """One draw with 6 numbers + bonus. Immutable once built."""

    round: int
    date: str
    numbers: tuple[int, int, int, int, int, int]
    bonus: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "round": self.round,
            "date": self.date,
            "numbers": list(self.numbers),
            "bonus": self.bonus,
        }
