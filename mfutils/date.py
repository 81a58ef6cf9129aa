"""Local calendar dates with microsecond precision."""

from __future__ import annotations

import threading
import time
from typing import ClassVar, Optional

from .timeparts import (
    DST_OFF,
    DST_ON,
    DST_UNKNOWN,
    MAX_YEAR,
    MS_MAX,
    NO_MS,
    DateError,
    DateErrorKind,
    Interval,
    days_in_month,
    validate_microseconds,
)


class DateSettings:
    """Settings shared by every :class:`Date`: string pattern, equality tolerance
    and the separator written before microseconds.

    Access is guarded by a lock so that threads may change them safely.
    """

    def __init__(
        self,
        pattern: Optional[str] = None,
        tolerance: int = MS_MAX,
        ms_separator: str = NO_MS,
    ) -> None:
        self._lock = threading.Lock()
        self._pattern: Optional[str] = None
        self._tolerance = MS_MAX
        self._ms_separator = NO_MS
        self.pattern = pattern
        self.tolerance = tolerance
        self.ms_separator = ms_separator

    @property
    def pattern(self) -> Optional[str]:
        """The ``strftime`` pattern used to format and parse dates, or None."""
        with self._lock:
            return self._pattern

    @pattern.setter
    def pattern(self, value: Optional[str]) -> None:
        if value is not None and not value:
            raise ValueError("The date pattern must not be empty.")
        with self._lock:
            self._pattern = value

    @property
    def tolerance(self) -> int:
        """Largest difference, in microseconds, at which two dates are equal."""
        with self._lock:
            return self._tolerance

    @tolerance.setter
    def tolerance(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"The tolerance must not be negative: {value}")
        with self._lock:
            self._tolerance = value

    @property
    def ms_separator(self) -> str:
        """Character written before microseconds; ``NO_MS`` leaves them out."""
        with self._lock:
            return self._ms_separator

    @ms_separator.setter
    def ms_separator(self, value: str) -> None:
        if len(value) != 1:
            raise ValueError(f"The separator must be a single character: {value!r}")
        with self._lock:
            self._ms_separator = value


def _normalize(
    year: int, month: int, day: int, hour: int, minute: int, second: int, dst: int
) -> tuple[time.struct_time, int]:
    """Let the local time zone bring the fields into range, as ``mktime`` does."""
    try:
        timestamp = time.mktime((year + 1900, month + 1, day, hour, minute, second, 0, 0, dst))
        local = time.localtime(timestamp)
    except (OverflowError, ValueError, OSError) as exc:
        raise DateError(
            DateErrorKind.WRONG_TIME_DATA, "Something is wrong with the given inputs!"
        ) from exc
    return local, int(timestamp)


def _check_microseconds(value: int) -> None:
    if not validate_microseconds(value):
        raise DateError(DateErrorKind.WRONG_MS, f"Invalid number of microseconds: {value}")


def _check_range(value: int, low: int, high: int, what: str) -> None:
    if not low <= value <= high:
        raise DateError(
            DateErrorKind.WRONG_TIME_DATA, f"{what} must be between {low} and {high}: {value}"
        )


class Date:
    """A point in local time, held as calendar fields plus microseconds.

    Fields follow the C conventions: ``year`` counts from 1900, ``month`` is
    0-11, ``day_week`` is 0-6 from Sunday and ``day_year`` is 0-365. Setting a
    field re-normalizes the whole date in the local time zone.
    """

    settings: ClassVar[DateSettings] = DateSettings()

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        year: int,
        month: int,
        monthday: int,
        hour: int,
        minutes: int,
        seconds: int,
        dst_flag: int = DST_UNKNOWN,
        microseconds: int = 0,
    ) -> None:
        _check_microseconds(microseconds)
        self._tm, self._timestamp = _normalize(
            year, month, monthday, hour, minutes, seconds, dst_flag
        )
        self._micro = microseconds

    # ----- construction

    @classmethod
    def now(cls) -> "Date":
        """The current local time."""
        nanos = time.time_ns()
        return cls.from_timestamp(nanos // 1_000_000_000, (nanos // 1_000) % MS_MAX)

    @classmethod
    def from_timestamp(cls, timestamp: int, microseconds: int = 0) -> "Date":
        """The local date of a Unix timestamp."""
        try:
            local = time.localtime(timestamp)
        except (OverflowError, ValueError, OSError) as exc:
            raise DateError(
                DateErrorKind.WRONG_TIME_T, f"Cannot convert timestamp {timestamp}"
            ) from exc
        return cls.from_struct_time(local, microseconds)

    @classmethod
    def from_struct_time(cls, struct: time.struct_time, microseconds: int = 0) -> "Date":
        """A date from a :class:`time.struct_time` (full year, months 1-12)."""
        return cls(
            struct.tm_year - 1900,
            struct.tm_mon - 1,
            struct.tm_mday,
            struct.tm_hour,
            struct.tm_min,
            struct.tm_sec,
            struct.tm_isdst,
            microseconds,
        )

    @classmethod
    def parse(cls, text: str, pattern: Optional[str] = None) -> "Date":
        """Read ``text`` with ``pattern``, or with the shared pattern if none is given."""
        if pattern is None:
            pattern = cls.settings.pattern
            if pattern is None:
                raise DateError(
                    DateErrorKind.NO_PATTERN,
                    "Pattern string is missing and this is not recoverable.",
                )
        try:
            struct = time.strptime(text, pattern)
        except ValueError as exc:
            raise DateError(DateErrorKind.WRONG_STRING, f"Wrong pattern string: {text}") from exc
        try:
            return cls.from_struct_time(struct)
        except DateError as exc:
            raise DateError(DateErrorKind.WRONG_STRING, f"Wrong pattern string: {text}") from exc

    # ----- internals

    def _fields(self) -> dict[str, int]:
        return {
            "year": self._tm.tm_year - 1900,
            "month": self._tm.tm_mon - 1,
            "day": self._tm.tm_mday,
            "hour": self._tm.tm_hour,
            "minute": self._tm.tm_min,
            "second": self._tm.tm_sec,
            "dst": self._tm.tm_isdst,
        }

    def _replace(self, **changes: int) -> None:
        fields = self._fields()
        fields.update(changes)
        self._tm, self._timestamp = _normalize(**fields)

    def _total_microseconds(self) -> int:
        return self._timestamp * MS_MAX + self._micro

    # ----- comparison and differences

    def compare(self, other: "Date") -> int:
        """-1, 0 or +1 as this date is before, within tolerance of, or after ``other``."""
        diff = self._total_microseconds() - other._total_microseconds()
        if abs(diff) <= self.settings.tolerance:
            return 0
        return -1 if diff < 0 else 1

    def timedelta(self, other: "Date") -> Interval:
        """``self - other`` as an interval; ``nanos`` is always non-negative."""
        diff = self._total_microseconds() - other._total_microseconds()
        seconds, micros = divmod(diff, MS_MAX)
        return Interval(seconds, micros * 1_000)

    # ----- fields

    @property
    def microseconds(self) -> int:
        return self._micro

    @microseconds.setter
    def microseconds(self, value: int) -> None:
        _check_microseconds(value)
        self._micro = value

    @property
    def seconds(self) -> int:
        return self._tm.tm_sec

    @seconds.setter
    def seconds(self, value: int) -> None:
        _check_range(value, 0, 60, "Seconds")
        self._replace(second=value)

    @property
    def minutes(self) -> int:
        return self._tm.tm_min

    @minutes.setter
    def minutes(self, value: int) -> None:
        _check_range(value, 0, 59, "Minutes")
        self._replace(minute=value)

    @property
    def hours(self) -> int:
        return self._tm.tm_hour

    @hours.setter
    def hours(self, value: int) -> None:
        _check_range(value, 0, 23, "Hours")
        self._replace(hour=value)

    @property
    def day_month(self) -> int:
        return self._tm.tm_mday

    @day_month.setter
    def day_month(self, value: int) -> None:
        _check_range(value, 1, days_in_month(self.month, self._tm.tm_year), "Day of month")
        self._replace(day=value)

    @property
    def month(self) -> int:
        return self._tm.tm_mon - 1

    @month.setter
    def month(self, value: int) -> None:
        _check_range(value, 0, 11, "Month")
        self._replace(month=value)

    @property
    def year(self) -> int:
        """Years since 1900."""
        return self._tm.tm_year - 1900

    @year.setter
    def year(self, value: int) -> None:
        if not -MAX_YEAR - 1 < value < MAX_YEAR:
            raise DateError(
                DateErrorKind.WRONG_TIME_DATA, f"Year is not between -1 and {MAX_YEAR}."
            )
        self._replace(year=value)

    @property
    def dst(self) -> int:
        """Daylight saving time flag: -1, 0 or 1."""
        return self._tm.tm_isdst

    @dst.setter
    def dst(self, value: int) -> None:
        if value not in (DST_UNKNOWN, DST_OFF, DST_ON):
            raise DateError(
                DateErrorKind.WRONG_TIME_DATA,
                f"Error while setting the DST flag, value is invalid: {value}",
            )
        self._replace(dst=value)

    @property
    def day_week(self) -> int:
        """Day of the week, 0-6 from Sunday."""
        return (self._tm.tm_wday + 1) % 7

    @property
    def day_year(self) -> int:
        """Day of the year, 0-365 from January 1st."""
        return self._tm.tm_yday - 1

    def increment(self) -> "Date":
        """Move one second forward and return this date."""
        self.seconds = self.seconds + 1
        return self

    # ----- conversions

    def to_struct_time(self) -> time.struct_time:
        """The fields as a :class:`time.struct_time` (full year, months 1-12)."""
        return self._tm

    def __int__(self) -> int:
        return self._timestamp

    def __str__(self) -> str:
        pattern = self.settings.pattern
        if pattern is None:
            raise DateError(DateErrorKind.NO_PATTERN, "Pattern string is missing.")
        text = time.strftime(pattern, self._tm)
        separator = self.settings.ms_separator
        if separator != NO_MS:
            text += f"{separator}{self._micro}"
        return text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.year}, {self.month}, {self.day_month}, "
            f"{self.hours}, {self.minutes}, {self.seconds}, {self.dst}, {self._micro})"
        )

    # ----- operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        diff = self._total_microseconds() - other._total_microseconds()
        return abs(diff) <= self.settings.tolerance

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) == -1

    def __le__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) != 1

    def __gt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) == 1

    def __ge__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) != -1

    def __sub__(self, other: "Date") -> Interval:
        if not isinstance(other, Date):
            return NotImplemented
        return self.timedelta(other)

    def __mod__(self, other: "Date") -> Interval:
        if not isinstance(other, Date):
            return NotImplemented
        return self.timedelta(other)