from __future__ import annotations

from .errors import InputShapeError
from .types import YMD


def require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful year/month/day
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputShapeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def require_ymd(year: object, month: object, day: object) -> YMD:
    return YMD(require_int("year", year), require_int("month", month), require_int("day", day))
