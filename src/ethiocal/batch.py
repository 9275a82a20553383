"""
ethiocal.batch
--------------
Vectorised JDN conversions over numpy arrays.

Element-wise identical to the scalar functions in ethiocal.engines and,
like them, non-validating. Needs the optional numpy extra:
  pip install "ethiocal[batch]"
"""

from __future__ import annotations

from typing import Any, Tuple

from .core.epochs import AMETE_MIHRET_START_JDN, Era
from .engines.ethiopic import CYCLE_DAYS, MONTH_DAYS, YEAR_DAYS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Batch conversion needs numpy. Install: pip install "ethiocal[batch]"') from e


def _as_int64(np, x: Any):
    return np.asarray(x, dtype=np.int64)


def gregorian_to_jdn_array(years, months, days):
    np = _need_numpy()
    y, m, d = (_as_int64(np, v) for v in (years, months, days))
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return d + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian_array(jdn) -> Tuple[Any, Any, Any]:
    np = _need_numpy()
    a = _as_int64(np, jdn) + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def ethiopic_to_jdn_array(years, months, days, era=Era.AMETE_MIHRET):
    np = _need_numpy()
    y, m, d = (_as_int64(np, v) for v in (years, months, days))
    return _as_int64(np, era) + YEAR_DAYS * y + y // 4 + MONTH_DAYS * (m - 1) + d - 1


def jdn_to_ethiopic_array(jdn, era=Era.AMETE_MIHRET) -> Tuple[Any, Any, Any]:
    """era may be a single offset or an array of per-element offsets."""
    np = _need_numpy()
    k = _as_int64(np, jdn) - _as_int64(np, era)
    cycles = k // CYCLE_DAYS
    r = k % CYCLE_DAYS
    leap_day = r // (CYCLE_DAYS - 1)
    n = r % YEAR_DAYS + YEAR_DAYS * leap_day

    year = 4 * cycles + r // YEAR_DAYS - leap_day
    month = n // MONTH_DAYS + 1
    day = n % MONTH_DAYS + 1
    return year, month, day


def guess_era_array(jdn):
    """Per-element epoch offsets (plain int64, not Era members)."""
    np = _need_numpy()
    j = _as_int64(np, jdn)
    return np.where(j >= AMETE_MIHRET_START_JDN, int(Era.AMETE_MIHRET), int(Era.AMETE_ALEM)).astype(np.int64)


def day_of_week_array(jdn):
    np = _need_numpy()
    return _as_int64(np, jdn) % 7


def gregorian_to_ethiopic_array(years, months, days) -> Tuple[Any, Any, Any]:
    """Gregorian -> Ethiopian with per-element era detection."""
    jdn = gregorian_to_jdn_array(years, months, days)
    return jdn_to_ethiopic_array(jdn, guess_era_array(jdn))


def ethiopic_to_gregorian_array(years, months, days, era=Era.AMETE_MIHRET) -> Tuple[Any, Any, Any]:
    return jdn_to_gregorian_array(ethiopic_to_jdn_array(years, months, days, era))
