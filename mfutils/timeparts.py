"""Calendar helpers, time intervals and date errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

JANUARY, FEBRUARY, MARCH, APRIL, MAY, JUNE = range(6)
JULY, AUGUST, SEPTEMBER, OCTOBER, NOVEMBER, DECEMBER = range(6, 12)

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

DST_UNKNOWN = -1
DST_OFF = 0
DST_ON = 1

NBR_SECONDS_IN_DAY = 24 * 60 * 60

# Exclusive upper bound for microseconds.
MS_MAX = 1_000_000

# Separator value meaning "do not show microseconds".
NO_MS = "\x00"

_NANOS_IN_SECOND = 1_000_000_000
_TIME_T_MAX = 2**63 - 1
_INT_MAX = 2**31 - 1


def _max_year() -> int:
    seconds_in_year = int(NBR_SECONDS_IN_DAY * 365.2425)
    return min(_TIME_T_MAX // seconds_in_year, _INT_MAX)


MAX_YEAR = _max_year()


@dataclass(frozen=True)
class Interval:
    """An immutable distance between two time points."""

    seconds: int = 0
    nanos: int = 0

    def __float__(self) -> float:
        return float(self.seconds) + self.nanos / _NANOS_IN_SECOND

    def __int__(self) -> int:
        return self.seconds

    @property
    def microseconds_part(self) -> int:
        return self.nanos // 1_000

    @property
    def milliseconds_part(self) -> int:
        return self.nanos // 1_000_000

    @property
    def seconds_part(self) -> int:
        return self.seconds % 60

    @property
    def minutes_part(self) -> int:
        return (self.seconds // 60) % 60

    @property
    def hours_part(self) -> int:
        return (self.seconds // 3600) % 3600

    @property
    def days_part(self) -> int:
        return self.seconds // NBR_SECONDS_IN_DAY

    def __add__(self, other: "Interval") -> "Interval":
        if not isinstance(other, Interval):
            return NotImplemented
        nanos = self.nanos + other.nanos
        seconds = self.seconds + other.seconds
        if nanos >= _NANOS_IN_SECOND:
            nanos -= _NANOS_IN_SECOND
            seconds += 1
        return Interval(seconds, nanos)


class DateErrorKind(enum.Enum):
    """What went wrong in a date operation."""

    NO_PATTERN = enum.auto()
    WRONG_STRUCT_TM = enum.auto()
    WRONG_MS = enum.auto()
    WRONG_STRING = enum.auto()
    WRONG_TIME_T = enum.auto()
    WRONG_TIME_DATA = enum.auto()


class DateError(RuntimeError):
    """Raised by date operations; ``kind`` tells which error it is."""

    def __init__(self, kind: DateErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def is_leap_year(year: int) -> bool:
    """Whether ``year`` is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int = 0) -> int:
    """Number of days in ``month`` (0-11) of ``year``; 0 if the month is invalid."""
    if month in (JANUARY, MARCH, MAY, JULY, AUGUST, OCTOBER, DECEMBER):
        return 31
    if month in (APRIL, JUNE, SEPTEMBER, NOVEMBER):
        return 30
    if month == FEBRUARY:
        return 29 if is_leap_year(year) else 28
    return 0


def validate_microseconds(value: int) -> bool:
    return 0 <= value < MS_MAX


def validate_seconds(value: int) -> bool:
    return 0 <= value <= 60


def validate_minutes(value: int) -> bool:
    return 0 <= value < 60


def validate_hours(value: int) -> bool:
    return 0 <= value <= 24


def validate_months(value: int) -> bool:
    return JANUARY <= value <= DECEMBER


def validate_days(days: int, month: int) -> bool:
    """Whether ``days`` is a valid day of ``month``; any month allows up to 31 if invalid."""
    limit = days_in_month(month) if validate_months(month) else 31
    return 1 <= days <= limit