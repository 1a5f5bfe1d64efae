"""The two ways a date string is read.

`parse_strict` recognizes the structured form

    yyyy[-MM[-DD]][THH:mm[:ss[.sss]][Z|(+|-)hh:mm|(+|-)hhmm]]
    (+|-)yyyyyy[-MM[-DD]]...

and `parse_lenient` reads anything else token by token. Both work on the
same tokenizer and composers: when the strict attempt recognizes a date
prefix but cannot finish, the lenient loop picks up at the first token the
strict attempt did not handle.

Lenient rules, applied per token:
  - a number followed by ':' is a time field; '::' adds a zero minute too;
  - a number followed by '.' is a time field when the time expects it, and
    the next number is its fraction of a second;
  - a number the timezone or time composer is waiting for goes there;
  - any other number is a day/month/year component;
  - '+' or '-' after a UTC zone name or a time starts a zone offset;
  - month names, zone names and am/pm (after a time) set their fields;
  - whitespace, other symbols and unknown words are skipped.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .composers import (
    DayComposer,
    TimeComposer,
    TimeZoneComposer,
    is_day,
    is_hour,
    is_minute,
    is_month,
    is_second,
)
from .errors import LexicalError, RangeViolationError, SlotOverflowError
from .keywords import KeywordType
from .scanner import MAX_SIGNIFICANT_DIGITS
from .tokenizer import DateToken, DateTokenizer


class StrictOutcome(Enum):
    COMPLETE = "complete"  # whole input consumed
    CONTINUE = "continue"  # date prefix read; lenient parsing resumes at `token`
    NOT_APPLICABLE = "not_applicable"  # input does not start with a strict year
    INVALID = "invalid"  # malformed strict time part


@dataclass(frozen=True)
class StrictResult:
    outcome: StrictOutcome
    token: DateToken

    @classmethod
    def complete(cls) -> "StrictResult":
        return cls(StrictOutcome.COMPLETE, DateToken.end_of_input())

    @classmethod
    def resume_at(cls, token: DateToken) -> "StrictResult":
        return cls(StrictOutcome.CONTINUE, token)

    @classmethod
    def not_applicable(cls) -> "StrictResult":
        return cls(StrictOutcome.NOT_APPLICABLE, DateToken.invalid())

    @classmethod
    def invalid(cls) -> "StrictResult":
        return cls(StrictOutcome.INVALID, DateToken.invalid())


def read_milliseconds(token: DateToken) -> int:
    """Keep the first three significant digits of a fraction ('5' -> 500, '1234' -> 123)."""
    number = token.value
    length = min(token.length, MAX_SIGNIFICANT_DIGITS)
    if length == 1:
        return number * 100
    if length == 2:
        return number * 10
    while length > 3:
        number //= 10
        length -= 1
    return number


def parse_strict(
    tokens: DateTokenizer,
    day: DayComposer,
    time: TimeComposer,
    tz: TimeZoneComposer,
) -> StrictResult:
    # Mandatory year: yyyy or (+|-)yyyyyy
    if tokens.peek().is_sign():
        sign = tokens.next().sign
        if not tokens.peek().is_fixed_length_number(6):
            return StrictResult.not_applicable()
        year = tokens.next().value
        if sign < 0 and year == 0:
            return StrictResult.not_applicable()
        day.add(sign * year, 6)
    elif tokens.peek().is_fixed_length_number(4):
        day.add(tokens.next().value, 4)
    else:
        return StrictResult.not_applicable()
    day.set_iso_date()

    if tokens.skip_symbol("-"):
        peek = tokens.peek()
        if not peek.is_fixed_length_number(2) or not is_month(peek.value):
            return StrictResult.resume_at(tokens.next())
        day.add(tokens.next().value, 2)
        if tokens.skip_symbol("-"):
            peek = tokens.peek()
            if not peek.is_fixed_length_number(2) or not is_day(peek.value):
                return StrictResult.resume_at(tokens.next())
            day.add(tokens.next().value, 2)

    if not tokens.peek().is_keyword(KeywordType.TIME_SEPARATOR):
        if not tokens.peek().is_end_of_input():
            return StrictResult.resume_at(tokens.next())
        _default_month_and_day(day)
        return StrictResult.complete()

    _default_month_and_day(day)
    tokens.next()
    outcome = _read_strict_time(tokens, time)
    if outcome is StrictOutcome.CONTINUE:
        return StrictResult.resume_at(tokens.next())
    if outcome is StrictOutcome.INVALID:
        return StrictResult.invalid()
    if not _read_strict_zone(tokens, tz):
        return StrictResult.invalid()

    if tokens.peek().is_end_of_input():
        return StrictResult.complete()
    if tokens.peek().is_whitespace():
        return StrictResult.resume_at(tokens.next())
    return StrictResult.invalid()


def _default_month_and_day(day: DayComposer) -> None:
    # yyyy and yyyy-MM stand for the first day of the year / month.
    while len(day) < DayComposer.SIZE:
        day.add(1, 2)


def _read_two_digits(tokens: DateTokenizer, valid) -> int | None:
    peek = tokens.peek()
    if not peek.is_fixed_length_number(2) or not valid(peek.value):
        return None
    return tokens.next().value


def _stop_in_time(tokens: DateTokenizer) -> StrictOutcome:
    # Whitespace inside HH:mm:ss leaves the rest of the time to the lenient rules.
    if tokens.peek().is_whitespace():
        return StrictOutcome.CONTINUE
    return StrictOutcome.INVALID


def _read_strict_time(tokens: DateTokenizer, time: TimeComposer) -> StrictOutcome:
    """Read HH:mm[:ss[.sss]] after the 'T'.

    COMPLETE when the time was read (zero-filled), CONTINUE when whitespace
    interrupts it, INVALID when it is malformed.
    """
    hour = _read_two_digits(tokens, is_hour)
    if hour is None:
        return _stop_in_time(tokens)
    time.add(hour)
    if not tokens.skip_symbol(":"):
        return _stop_in_time(tokens)
    minute = _read_two_digits(tokens, is_minute)
    if minute is None:
        return _stop_in_time(tokens)
    time.add(minute)
    if tokens.skip_symbol(":"):
        second = _read_two_digits(tokens, is_second)
        if second is None:
            return _stop_in_time(tokens)
        time.add(second)
        if tokens.skip_symbol("."):
            if not tokens.peek().is_number():
                return StrictOutcome.INVALID
            # Any number of fraction digits is accepted.
            time.add(read_milliseconds(tokens.next()))
    if tokens.peek().is_whitespace():
        # Unfilled fields stay open for a ":ss" after the gap.
        return StrictOutcome.CONTINUE
    time.pad()
    return StrictOutcome.COMPLETE


def _read_strict_zone(tokens: DateTokenizer, tz: TimeZoneComposer) -> bool:
    peek = tokens.peek()
    if peek.is_keyword_z():
        tokens.next()
        tz.set(0)
        return True
    if not peek.is_sign():
        return True
    tz.set_sign(tokens.next().sign)
    if tokens.peek().is_fixed_length_number(4):
        hourmin = tokens.next().value
        hour, minute = divmod(hourmin, 100)
        if not is_hour(hour) or not is_minute(minute):
            return False
        tz.set_absolute_hour(hour)
        tz.set_absolute_minute(minute)
        return True
    hour = _read_two_digits(tokens, is_hour)
    if hour is None:
        return False
    tz.set_absolute_hour(hour)
    if not tokens.skip_symbol(":"):
        return False
    minute = _read_two_digits(tokens, is_minute)
    if minute is None:
        return False
    tz.set_absolute_minute(minute)
    return True


def parse_lenient(
    tokens: DateTokenizer,
    token: DateToken,
    day: DayComposer,
    time: TimeComposer,
    tz: TimeZoneComposer,
) -> None:
    while not token.is_end_of_input():
        if token.is_invalid():
            raise LexicalError("malformed date-time string")

        if token.is_number():
            _lenient_number(tokens, token, day, time, tz)
        elif token.is_keyword():
            _lenient_keyword(tokens, token, day, time, tz)
        elif token.is_sign() and (tz.is_utc() or not time.is_empty()):
            _lenient_zone_offset(tokens, token, tz)
        # whitespace, other symbols and unknown words are skipped

        token = tokens.next()


def _lenient_number(tokens, token, day, time, tz) -> None:
    n = token.value
    if tokens.skip_symbol(":"):
        if tokens.skip_symbol(":"):
            # n + "::"
            if not time.is_empty():
                raise SlotOverflowError("hour given after a complete time")
            time.add(n)
            time.add(0)
        else:
            if not time.add(n):
                raise SlotOverflowError("too many time fields")
            if tokens.peek().is_symbol("."):
                tokens.next()
    elif tokens.skip_symbol(".") and time.is_expecting(n):
        time.add(n)
        if not tokens.peek().is_number():
            raise LexicalError("missing fraction of a second after '.'")
        time.add_final(read_milliseconds(tokens.next()))
    elif tz.is_expecting(n):
        tz.set_absolute_minute(n)
    elif time.is_expecting(n):
        time.add_final(n)
    else:
        if not day.add(n, token.length):
            raise SlotOverflowError("more than three day, month or year numbers")
        tokens.skip_symbol("-")


def _lenient_keyword(tokens, token, day, time, tz) -> None:
    if token.keyword_type is KeywordType.AM_PM and not time.is_empty():
        time.set_hour_offset(token.value)
    elif token.keyword_type is KeywordType.MONTH_NAME:
        day.set_named_month(token.value)
        tokens.skip_symbol("-")
    elif token.keyword_type is KeywordType.TIME_ZONE_NAME:
        tz.set(token.value // 60)


def _lenient_zone_offset(tokens, token, tz) -> None:
    tz.set_sign(token.sign)
    n = 0
    length = 0
    if tokens.peek().is_number():
        number = tokens.next()
        n, length = number.value, number.length

    if tokens.peek().is_symbol(":"):
        # hh:mm, the minute arrives as the next number
        tz.set_absolute_hour(n)
        tz.set_absolute_minute(None)
    elif length <= 2:
        # a bare sign reads as +00
        tz.set_absolute_hour(n)
        tz.set_absolute_minute(0)
    elif length in (3, 4):
        tz.set_absolute_hour(n // 100)
        tz.set_absolute_minute(n % 100)
    else:
        raise RangeViolationError("timezone offset digits", length)
