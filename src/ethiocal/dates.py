"""
ethiocal.dates
--------------
Immutable, validated date objects for both calendars.

Both classes share one absolute ordering through the JDN, so an Ethiopian
and a Gregorian date compare (and hash) equal when they name the same day.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import Optional

from .core.checks import require_int, require_ymd
from .core.epochs import Era
from .core.errors import InvalidEthiopicDateError, InvalidGregorianDateError
from .core.types import YMD
from .engines import convert, era as _era, ethiopic, gregorian, rules

_YMD_RE = re.compile(r"^\s*(-?\d+)[-/](\d{1,2})[-/](\d{1,2})\s*$")
_ERA_SUFFIX_RE = re.compile(r"^(.*?)\s+(AA|AM)\s*$")
_ERA_SUFFIXES = {"AA": Era.AMETE_ALEM, "AM": Era.AMETE_MIHRET}


def parse_ymd(s: str) -> YMD:
    """Parse 'YYYY-MM-DD' or 'YYYY/M/D' into integers. Calendar validity is not checked."""
    m = _YMD_RE.match(s)
    if m is None:
        raise ValueError(f"Expected YYYY-MM-DD or YYYY/MM/DD, got {s!r}")
    y, mo, d = map(int, m.groups())
    return YMD(y, mo, d)


@total_ordering
class _JdnOrdered(ABC):
    @property
    @abstractmethod
    def jdn(self) -> int:
        """Absolute day number shared by both calendars."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _JdnOrdered):
            return NotImplemented
        return self.jdn == other.jdn

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _JdnOrdered):
            return NotImplemented
        return self.jdn < other.jdn

    def __hash__(self) -> int:
        return hash(self.jdn)

    def day_of_week(self) -> int:
        """0 = Monday .. 6 = Sunday."""
        return convert.day_of_week(self.jdn)


@dataclass(frozen=True, eq=False)
class EthiopicDate(_JdnOrdered):
    year: int
    month: int
    day: int
    era: Optional[int] = None

    def __post_init__(self) -> None:
        y, m, d = require_ymd(self.year, self.month, self.day)
        if self.era is not None:
            offset = require_int("era", self.era)
            if offset not in _ERA_SUFFIXES.values():
                raise ValueError(f"Unknown Ethiopian era offset: {offset}")
        if not rules.is_valid_ethiopic_date(y, m, d):
            raise InvalidEthiopicDateError(y, m, d)
        # Same rule as ethiocal.ethiopic_to_gregorian when the era is omitted.
        era = _era.resolve_era(y, m, d) if self.era is None else Era(offset)
        object.__setattr__(self, "era", era)

    @property
    def jdn(self) -> int:
        return ethiopic.ethiopic_to_jdn(self.year, self.month, self.day, self.era)

    @property
    def ymd(self) -> YMD:
        return YMD(self.year, self.month, self.day)

    def is_leap_year(self) -> bool:
        return rules.ethiopic_is_leap(self.year)

    def days_in_month(self) -> int:
        return rules.ethiopic_days_in_month(self.year, self.month)

    def to_gregorian(self) -> "GregorianDate":
        return GregorianDate.from_jdn(self.jdn)

    @classmethod
    def from_jdn(cls, jdn: int, era: Optional[int] = None) -> "EthiopicDate":
        """Era defaults to the one guessed from the JDN."""
        offset = _era.guess_era(jdn) if era is None else era
        y, m, d = ethiopic.jdn_to_ethiopic(jdn, offset)
        return cls(y, m, d, offset)

    @classmethod
    def parse(cls, s: str, era: Optional[int] = None) -> "EthiopicDate":
        """
        Parse 'YYYY-MM-DD', optionally followed by an era marker 'AA' or 'AM'
        (the form __str__ writes when the era is not the detected one).
        Without a marker or an explicit era, the era is auto-detected.
        """
        m = _ERA_SUFFIX_RE.match(s)
        if m is not None:
            s, marker = m.groups()
            if era is not None and era != _ERA_SUFFIXES[marker]:
                raise ValueError(f"Era marker {marker!r} contradicts era={era}")
            era = _ERA_SUFFIXES[marker]
        return cls(*parse_ymd(s), era=era)

    @classmethod
    def today(cls) -> "EthiopicDate":
        return GregorianDate.today().to_ethiopic()

    def __str__(self) -> str:
        if self.era == _era.resolve_era(self.year, self.month, self.day):
            return str(self.ymd)
        return f"{self.ymd} {'AA' if self.era == Era.AMETE_ALEM else 'AM'}"


@dataclass(frozen=True, eq=False)
class GregorianDate(_JdnOrdered):
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        y, m, d = require_ymd(self.year, self.month, self.day)
        if not rules.is_valid_gregorian_date(y, m, d):
            raise InvalidGregorianDateError(y, m, d)

    @property
    def jdn(self) -> int:
        return gregorian.gregorian_to_jdn(self.year, self.month, self.day)

    @property
    def ymd(self) -> YMD:
        return YMD(self.year, self.month, self.day)

    def is_leap_year(self) -> bool:
        return rules.is_gregorian_leap(self.year)

    def days_in_month(self) -> int:
        return rules.gregorian_days_in_month(self.year, self.month)

    def to_ethiopic(self) -> EthiopicDate:
        return EthiopicDate.from_jdn(self.jdn)

    def to_date(self) -> date:
        """datetime.date only covers years 1..9999; outside that this raises ValueError."""
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "GregorianDate":
        return cls(*gregorian.jdn_to_gregorian(jdn))

    @classmethod
    def parse(cls, s: str) -> "GregorianDate":
        return cls(*parse_ymd(s))

    @classmethod
    def today(cls) -> "GregorianDate":
        return cls.from_date(date.today())

    def __str__(self) -> str:
        return str(self.ymd)
