from __future__ import annotations


class EthiocalError(Exception):
    """Base error."""


class InputShapeError(EthiocalError, TypeError):
    """Raised at the API boundary when an argument is not an integer."""


class InvalidDateError(EthiocalError, ValueError):
    """Raised when a well-typed date does not exist in its calendar."""

    calendar = "calendar"

    def __init__(self, year: int, month: int, day: int):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid {self.calendar} date: {year}-{month}-{day}")


class InvalidEthiopicDateError(InvalidDateError):
    calendar = "Ethiopian"


class InvalidGregorianDateError(InvalidDateError):
    calendar = "Gregorian"
