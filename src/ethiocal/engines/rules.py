"""
ethiocal.engines.rules
----------------------
Leap-year rules, month lengths and date predicates for both calendars.

The predicates never raise for integer input; an impossible date is an
ordinary False. The month-length helpers do raise on an out-of-range month,
since there is no sensible length to return.
"""

from __future__ import annotations

from typing import Tuple

_GREGORIAN_MONTH_DAYS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

PAGUME = 13


# ============================================================
# Gregorian
# ============================================================

def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def gregorian_days_in_year(year: int) -> int:
    return 366 if is_gregorian_leap(year) else 365


def is_valid_gregorian_date(year: int, month: int, day: int) -> bool:
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= gregorian_days_in_month(year, month)


# ============================================================
# Ethiopian
# ============================================================

def ethiopic_is_leap(year: int) -> bool:
    """Leap years end with a 6-day Pagume."""
    return year % 4 == 3


def ethiopic_days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= PAGUME:
        raise ValueError(f"Ethiopian month must be in 1..13, got {month}")
    if month < PAGUME:
        return 30
    return 6 if ethiopic_is_leap(year) else 5


def ethiopic_days_in_year(year: int) -> int:
    return 366 if ethiopic_is_leap(year) else 365


def is_valid_ethiopic_date(year: int, month: int, day: int) -> bool:
    if not 1 <= month <= PAGUME:
        return False
    return 1 <= day <= ethiopic_days_in_month(year, month)
