"""Accumulators for the day, time-of-day and timezone parts of a date string.

Each composer collects values while the string is being read and only
validates them in `write`, which fills its slots of the output list or raises.
"""
from __future__ import annotations

from typing import MutableSequence, Optional

from .errors import IncompleteDateError, RangeViolationError
from .record import OutputField

# When both orders are valid ("03/04/2020") the first number is the month.
MONTH_FIRST = True


def between(x: int, lo: int, hi: int) -> bool:
    return lo <= x <= hi


def is_month(x: int) -> bool:
    return between(x, 1, 12)


def is_day(x: int) -> bool:
    return between(x, 1, 31)


def is_hour(x: int) -> bool:
    return between(x, 0, 23)


def is_hour12(x: int) -> bool:
    return between(x, 0, 12)


def is_minute(x: int) -> bool:
    return between(x, 0, 59)


def is_second(x: int) -> bool:
    return between(x, 0, 59)


def is_millisecond(x: int) -> bool:
    return between(x, 0, 999)


def expand_two_digit_year(year: int) -> int:
    if between(year, 0, 49):
        return year + 2000
    if between(year, 50, 99):
        return year + 1900
    return year


class TimeZoneComposer:
    def __init__(self) -> None:
        self._sign: Optional[int] = None
        self._hour: Optional[int] = None
        self._minute: Optional[int] = None

    def set(self, offset_in_hours: int) -> None:
        self._sign = -1 if offset_in_hours < 0 else 1
        self._hour = offset_in_hours * self._sign
        self._minute = 0

    def set_sign(self, sign: int) -> None:
        self._sign = -1 if sign < 0 else 1

    def set_absolute_hour(self, hour: int) -> None:
        self._hour = hour

    def set_absolute_minute(self, minute: Optional[int]) -> None:
        self._minute = minute

    def is_expecting(self, n: int) -> bool:
        return self._hour is not None and self._minute is None and is_minute(n)

    def is_utc(self) -> bool:
        return self._hour == 0 and self._minute == 0

    def is_empty(self) -> bool:
        return self._hour is None

    def write(self, output: MutableSequence) -> None:
        if self._hour is None:
            output[OutputField.UTC_OFFSET] = None
            return
        if not is_hour(self._hour):
            raise RangeViolationError("timezone hour", self._hour)
        minute = self._minute if self._minute is not None else 0
        if not is_minute(minute):
            raise RangeViolationError("timezone minute", minute)
        sign = self._sign if self._sign is not None else 1
        output[OutputField.UTC_OFFSET] = sign * (self._hour * 3600 + minute * 60)


class TimeComposer:
    SIZE = 4  # hour, minute, second, millisecond

    def __init__(self) -> None:
        self._slots: list[int] = []
        self._hour_offset: Optional[int] = None

    def is_empty(self) -> bool:
        return not self._slots

    def is_expecting(self, n: int) -> bool:
        index = len(self._slots)
        return (
            (index == 1 and is_minute(n))
            or (index == 2 and is_second(n))
            or (index == 3 and is_millisecond(n))
        )

    def add(self, n: int) -> bool:
        if len(self._slots) >= self.SIZE:
            return False
        self._slots.append(n)
        return True

    def add_final(self, n: int) -> bool:
        if not self.add(n):
            return False
        self.pad()
        return True

    def set_hour_offset(self, n: int) -> None:
        self._hour_offset = n

    def pad(self) -> None:
        """Zero-fill the fields that were not given."""
        while len(self._slots) < self.SIZE:
            self._slots.append(0)

    def write(self, output: MutableSequence) -> None:
        self.pad()
        hour, minute, second, millisecond = self._slots

        if self._hour_offset is not None:
            if not is_hour12(hour):
                raise RangeViolationError("12-hour clock hour", hour)
            hour = hour % 12 + self._hour_offset

        if not is_hour(hour):
            raise RangeViolationError("hour", hour)
        if not is_minute(minute):
            raise RangeViolationError("minute", minute)
        if not is_second(second):
            raise RangeViolationError("second", second)
        if not is_millisecond(millisecond):
            raise RangeViolationError("millisecond", millisecond)

        output[OutputField.HOUR] = hour
        output[OutputField.MINUTE] = minute
        output[OutputField.SECOND] = second
        output[OutputField.MILLISECOND] = millisecond


class DayComposer:
    """Collects up to three bare numbers plus an optional month name.

    Which number is the year is decided at write time:
      - ISO order (set by the strict format): year, month, day as written;
      - otherwise a number written with 3+ digits is the year, then the first
        number that cannot be a day, then the last number (the second one
        when a month name was given);
      - the remaining two numbers are month/day, month first when both fit.
    Years written with one or two digits expand around a 1950/2049 pivot.
    """

    SIZE = 3

    def __init__(self) -> None:
        self._values: list[int] = []
        self._digits: list[int] = []
        self._named_month: Optional[int] = None
        self._is_iso_date = False

    def is_empty(self) -> bool:
        return not self._values

    def add(self, n: int, digits: Optional[int] = None) -> bool:
        if len(self._values) >= self.SIZE:
            return False
        self._values.append(n)
        self._digits.append(digits if digits is not None else len(str(abs(n))))
        return True

    def set_named_month(self, n: int) -> None:
        self._named_month = n

    def set_iso_date(self) -> None:
        self._is_iso_date = True

    @property
    def is_iso_date(self) -> bool:
        return self._is_iso_date

    def __len__(self) -> int:
        return len(self._values)

    def _year_index(self, fallback: int) -> int:
        for i, digits in enumerate(self._digits):
            if digits >= 3:
                return i
        for i, value in enumerate(self._values):
            if not is_day(value):
                return i
        return fallback

    def write(self, output: MutableSequence) -> None:
        count = len(self._values)
        if count == 0:
            raise IncompleteDateError("no day, month or year found")

        if self._named_month is not None:
            if count != 2:
                raise IncompleteDateError(
                    f"expected day and year next to the month name, got {count} numbers"
                )
            y = self._year_index(fallback=1)
            year, day = self._values[y], self._values[1 - y]
            year_digits = self._digits[y]
            month = self._named_month + 1
        else:
            if count != 3:
                raise IncompleteDateError(f"expected day, month and year, got {count} numbers")
            if self._is_iso_date:
                y = 0
                year, month, day = self._values
            else:
                y = self._year_index(fallback=2)
                first, second = (v for i, v in enumerate(self._values) if i != y)
                year = self._values[y]
                month, day = self._order_month_day(first, second)
            year_digits = self._digits[y]

        if not self._is_iso_date and year_digits <= 2:
            year = expand_two_digit_year(year)

        if not is_month(month):
            raise RangeViolationError("month", month)
        if not is_day(day):
            raise RangeViolationError("day", day)

        output[OutputField.YEAR] = year
        output[OutputField.MONTH] = month - 1
        output[OutputField.DAY] = day

    @staticmethod
    def _order_month_day(first: int, second: int) -> tuple[int, int]:
        month_day = is_month(first) and is_day(second)
        day_month = is_month(second) and is_day(first)
        if MONTH_FIRST:
            if month_day or not day_month:
                return first, second
            return second, first
        if day_month or not month_day:
            return second, first
        return first, second
