"""Non-validating calendar arithmetic.

Everything exported here is total over integers and performs no checks.
"""

from .convert import day_of_week, ethiopic_to_gregorian, gregorian_to_ethiopic
from .era import guess_era, resolve_era
from .ethiopic import ethiopic_to_jdn, jdn_to_ethiopic
from .gregorian import gregorian_to_jdn, jdn_to_gregorian
from .rules import (
    ethiopic_days_in_month,
    ethiopic_days_in_year,
    ethiopic_is_leap,
    gregorian_days_in_month,
    gregorian_days_in_year,
    is_gregorian_leap,
    is_valid_ethiopic_date,
    is_valid_gregorian_date,
)

__all__ = [
    "day_of_week",
    "ethiopic_to_gregorian",
    "gregorian_to_ethiopic",
    "guess_era",
    "resolve_era",
    "ethiopic_to_jdn",
    "jdn_to_ethiopic",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "ethiopic_days_in_month",
    "ethiopic_days_in_year",
    "ethiopic_is_leap",
    "gregorian_days_in_month",
    "gregorian_days_in_year",
    "is_gregorian_leap",
    "is_valid_ethiopic_date",
    "is_valid_gregorian_date",
]
