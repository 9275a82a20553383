from __future__ import annotations

import logging
from typing import Optional

from .core.epochs import Era
from .core.checks import require_int as _require_int, require_ymd as _require_ymd
from .core.errors import InvalidEthiopicDateError, InvalidGregorianDateError
from .core.types import YMD
from .engines import convert as _convert
from .engines import era as _era
from .engines import ethiopic as _ethiopic
from .engines import gregorian as _gregorian
from .engines import rules as _rules

logger = logging.getLogger(__name__)


def _era_or_default(era: Optional[int]) -> int:
    if era is None:
        return Era.AMETE_MIHRET
    return _require_int("era", era)


# ============================================================
# Validating conversions
# ============================================================

def ethiopic_to_gregorian(year: int, month: int, day: int, era: Optional[int] = None) -> YMD:
    """
    Ethiopian -> Gregorian.

    era may be an Era member or a raw epoch offset. When omitted, the era is
    inferred from a tentative Amete Mihret JDN (see engines.era).
    """
    y, m, d = _require_ymd(year, month, day)
    offset = None if era is None else _require_int("era", era)
    if not _rules.is_valid_ethiopic_date(y, m, d):
        logger.debug("Rejected invalid Ethiopian date %d-%d-%d", y, m, d)
        raise InvalidEthiopicDateError(y, m, d)
    if offset is None:
        offset = _era.resolve_era(y, m, d)
        logger.debug("Ethiopian %d-%d-%d: auto-detected era %s", y, m, d, offset.name)
    return _convert.ethiopic_to_gregorian(y, m, d, offset)


def gregorian_to_ethiopic(year: int, month: int, day: int) -> YMD:
    """Gregorian -> Ethiopian. The era is always auto-detected."""
    y, m, d = _require_ymd(year, month, day)
    if not _rules.is_valid_gregorian_date(y, m, d):
        logger.debug("Rejected invalid Gregorian date %d-%d-%d", y, m, d)
        raise InvalidGregorianDateError(y, m, d)
    return _convert.gregorian_to_ethiopic(y, m, d)


# ============================================================
# Predicates
# ============================================================

def is_valid_ethiopic_date(year: int, month: int, day: int) -> bool:
    return _rules.is_valid_ethiopic_date(*_require_ymd(year, month, day))


def is_valid_gregorian_date(year: int, month: int, day: int) -> bool:
    return _rules.is_valid_gregorian_date(*_require_ymd(year, month, day))


def is_gregorian_leap(year: int) -> bool:
    return _rules.is_gregorian_leap(_require_int("year", year))


def is_ethiopic_leap(year: int) -> bool:
    return _rules.ethiopic_is_leap(_require_int("year", year))


# ============================================================
# JDN utilities (type-checked, not validated)
# ============================================================

def ethiopic_to_jdn(year: int, month: int, day: int, era: Optional[int] = None) -> int:
    y, m, d = _require_ymd(year, month, day)
    return _ethiopic.ethiopic_to_jdn(y, m, d, _era_or_default(era))


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    return _gregorian.gregorian_to_jdn(*_require_ymd(year, month, day))


def jdn_to_ethiopic(jdn: int, era: Optional[int] = None) -> YMD:
    return _ethiopic.jdn_to_ethiopic(_require_int("jdn", jdn), _era_or_default(era))


def jdn_to_gregorian(jdn: int) -> YMD:
    return _gregorian.jdn_to_gregorian(_require_int("jdn", jdn))


def get_day_of_week(jdn: int) -> int:
    """0 = Monday .. 6 = Sunday."""
    return _convert.day_of_week(_require_int("jdn", jdn))


def guess_era(jdn: int) -> Era:
    return _era.guess_era(_require_int("jdn", jdn))
