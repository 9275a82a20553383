"""ethiocal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
The unchecked arithmetic lives in ethiocal.engines.
"""

from .api import (
    ethiopic_to_gregorian,
    gregorian_to_ethiopic,
    is_valid_ethiopic_date,
    is_valid_gregorian_date,
    is_gregorian_leap,
    is_ethiopic_leap,
    ethiopic_to_jdn,
    gregorian_to_jdn,
    jdn_to_ethiopic,
    jdn_to_gregorian,
    get_day_of_week,
    guess_era,
)
from .core.epochs import (
    EPOCHS,
    JD_EPOCH_OFFSET_AMETE_ALEM,
    JD_EPOCH_OFFSET_AMETE_MIHRET,
    JD_EPOCH_OFFSET_GREGORIAN,
    Era,
)
from .core.errors import (
    EthiocalError,
    InputShapeError,
    InvalidDateError,
    InvalidEthiopicDateError,
    InvalidGregorianDateError,
)
from .core.types import YMD
from .dates import EthiopicDate, GregorianDate, parse_ymd

__all__ = [
    "ethiopic_to_gregorian",
    "gregorian_to_ethiopic",
    "is_valid_ethiopic_date",
    "is_valid_gregorian_date",
    "is_gregorian_leap",
    "is_ethiopic_leap",
    "ethiopic_to_jdn",
    "gregorian_to_jdn",
    "jdn_to_ethiopic",
    "jdn_to_gregorian",
    "get_day_of_week",
    "guess_era",
    "EPOCHS",
    "JD_EPOCH_OFFSET_AMETE_ALEM",
    "JD_EPOCH_OFFSET_AMETE_MIHRET",
    "JD_EPOCH_OFFSET_GREGORIAN",
    "Era",
    "EthiocalError",
    "InputShapeError",
    "InvalidDateError",
    "InvalidEthiopicDateError",
    "InvalidGregorianDateError",
    "YMD",
    "EthiopicDate",
    "GregorianDate",
    "parse_ymd",
]
