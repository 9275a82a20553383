"""
ethiocal.engines.gregorian
--------------------------
Proleptic Gregorian calendar <-> Julian Day Number (Fliegel-Van Flandern).

No validation: any integer triple maps to some JDN, and only triples that
are real Gregorian dates survive the round trip unchanged.
"""

from __future__ import annotations

from ethiocal.core.types import YMD


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Gregorian date -> JDN (proleptic Gregorian)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> YMD:
    """JDN -> Gregorian date. Exact inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return YMD(year, month, day)
