"""
ethiocal.core.epochs
--------------------
Julian Day Numbers of the calendar reference points.

Ethiopian year numbers only make sense relative to an era, and an era is
nothing more than the JDN offset its year count is anchored to. The values
are part of the public contract.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Mapping
from types import MappingProxyType

JD_EPOCH_OFFSET_AMETE_ALEM = -285019
JD_EPOCH_OFFSET_AMETE_MIHRET = 1723856
JD_EPOCH_OFFSET_GREGORIAN = 1721426


class Era(IntEnum):
    """Ethiopian era. Members compare equal to their raw JDN offsets."""
    AMETE_ALEM = JD_EPOCH_OFFSET_AMETE_ALEM
    AMETE_MIHRET = JD_EPOCH_OFFSET_AMETE_MIHRET


# JDN of Amete Mihret 1 Meskerem 1 (proleptic Gregorian 8-08-27).
AMETE_MIHRET_START_JDN = JD_EPOCH_OFFSET_AMETE_MIHRET + 365

EPOCHS: Mapping[str, int] = MappingProxyType({
    "AMETE_ALEM": JD_EPOCH_OFFSET_AMETE_ALEM,
    "AMETE_MIHRET": JD_EPOCH_OFFSET_AMETE_MIHRET,
    "GREGORIAN": JD_EPOCH_OFFSET_GREGORIAN,
})
