"""
ethiocal.engines.era
--------------------
Era auto-detection.

Small year numerals are ambiguous between Amete Alem antiquity and Amete
Mihret. The rule is a single threshold: anything on or after Amete Mihret
1-1-1 belongs to Amete Mihret, everything earlier to Amete Alem.
"""

from __future__ import annotations

from ethiocal.core.epochs import AMETE_MIHRET_START_JDN, Era
from .ethiopic import ethiopic_to_jdn


def guess_era(jdn: int) -> Era:
    if jdn >= AMETE_MIHRET_START_JDN:
        return Era.AMETE_MIHRET
    return Era.AMETE_ALEM


def resolve_era(year: int, month: int, day: int) -> Era:
    """Era for an Ethiopian date given without one: tentative Amete Mihret JDN, then threshold."""
    return guess_era(ethiopic_to_jdn(year, month, day, Era.AMETE_MIHRET))
