from __future__ import annotations
from typing import NamedTuple


class YMD(NamedTuple):
    """Plain (year, month, day) triple. The calendar is implied by the producer."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"
