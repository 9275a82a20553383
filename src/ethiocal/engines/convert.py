"""
ethiocal.engines.convert
------------------------
Cross-calendar conversion composed through the JDN timeline.

Unchecked fast path: nothing here validates its input, so an impossible
date yields a well-formed but meaningless result. Use ethiocal.api for the
validating entry points.
"""

from __future__ import annotations

from ethiocal.core.types import YMD
from .era import guess_era
from .ethiopic import ethiopic_to_jdn, jdn_to_ethiopic
from .gregorian import gregorian_to_jdn, jdn_to_gregorian


def ethiopic_to_gregorian(year: int, month: int, day: int, epoch_offset: int) -> YMD:
    return jdn_to_gregorian(ethiopic_to_jdn(year, month, day, epoch_offset))


def gregorian_to_ethiopic(year: int, month: int, day: int) -> YMD:
    """Gregorian -> Ethiopian; the era always follows from the JDN."""
    jdn = gregorian_to_jdn(year, month, day)
    return jdn_to_ethiopic(jdn, guess_era(jdn))


def day_of_week(jdn: int) -> int:
    """Weekday index, 0 = Monday .. 6 = Sunday (JDN 0 is a Monday)."""
    return jdn % 7
