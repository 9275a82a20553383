"""
ethiocal.engines.ethiopic
-------------------------
Ethiopian calendar <-> Julian Day Number for a given era offset.

The Ethiopian year is twelve 30-day months followed by Pagume, which has
5 days, or 6 when the year is leap (year % 4 == 3). A 4-year cycle is
therefore exactly 1461 days, and the JDN is affine in (year, month, day)
up to the leap-day count year // 4.
"""

from __future__ import annotations

from ethiocal.core.epochs import JD_EPOCH_OFFSET_AMETE_MIHRET
from ethiocal.core.types import YMD

YEAR_DAYS = 365
MONTH_DAYS = 30
CYCLE_DAYS = 4 * YEAR_DAYS + 1


def ethiopic_to_jdn(year: int, month: int, day: int, epoch_offset: int = JD_EPOCH_OFFSET_AMETE_MIHRET) -> int:
    """Ethiopian date in the era anchored at epoch_offset -> JDN."""
    return (
        epoch_offset
        + YEAR_DAYS * year
        + year // 4
        + MONTH_DAYS * (month - 1)
        + day - 1
    )


def jdn_to_ethiopic(jdn: int, epoch_offset: int = JD_EPOCH_OFFSET_AMETE_MIHRET) -> YMD:
    """JDN -> Ethiopian date counted from epoch_offset."""
    cycles, r = divmod(jdn - epoch_offset, CYCLE_DAYS)
    # The last day of a cycle is Pagume 6 of the leap year,
    # not the first day of a fifth year.
    leap_day = r // (CYCLE_DAYS - 1)
    n = r % YEAR_DAYS + YEAR_DAYS * leap_day

    year = 4 * cycles + r // YEAR_DAYS - leap_day
    month = n // MONTH_DAYS + 1
    day = n % MONTH_DAYS + 1
    return YMD(year, month, day)
