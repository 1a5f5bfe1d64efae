from __future__ import annotations

from typing import MutableSequence, Optional

from .composers import DayComposer, TimeComposer, TimeZoneComposer
from .errors import DateParseError, LexicalError
from .record import OUTPUT_SIZE, DateRecord, new_output
from .scanner import Scanner, WhitespacePredicate
from .strategies import StrictOutcome, parse_lenient, parse_strict
from .tokenizer import DateTokenizer


def _compose(text: str, output: MutableSequence, is_whitespace: Optional[WhitespacePredicate]) -> None:
    tokens = DateTokenizer(Scanner(text, is_whitespace))
    day, time, tz = DayComposer(), TimeComposer(), TimeZoneComposer()

    result = parse_strict(tokens, day, time, tz)
    if result.outcome is StrictOutcome.INVALID:
        raise LexicalError("malformed date-time string")
    if result.outcome is StrictOutcome.NOT_APPLICABLE:
        # Start over from the first character with empty composers.
        tokens = DateTokenizer(Scanner(text, is_whitespace))
        day, time, tz = DayComposer(), TimeComposer(), TimeZoneComposer()
        parse_lenient(tokens, tokens.next(), day, time, tz)
    elif result.outcome is StrictOutcome.CONTINUE:
        parse_lenient(tokens, result.token, day, time, tz)

    day.write(output)
    time.write(output)
    tz.write(output)


def parse(
    text: str,
    output: MutableSequence,
    is_whitespace: Optional[WhitespacePredicate] = None,
) -> bool:
    """Parse `text` into the first OUTPUT_SIZE slots of `output`.

    Returns False when the string is not a date; the slots are then left in
    an unspecified state.
    """
    if len(output) < OUTPUT_SIZE:
        raise ValueError(f"output needs {OUTPUT_SIZE} slots, got {len(output)}")
    try:
        _compose(text, output, is_whitespace)
    except DateParseError:
        return False
    return True


def parse_record(text: str, *, is_whitespace: Optional[WhitespacePredicate] = None) -> DateRecord:
    """Parse `text`, raising a DateParseError subclass describing the failure."""
    output = new_output()
    _compose(text, output, is_whitespace)
    return DateRecord.from_output(output)


def parse_date(text: str | None, *, is_whitespace: Optional[WhitespacePredicate] = None) -> DateRecord | None:
    if not text:
        return None
    try:
        return parse_record(text, is_whitespace=is_whitespace)
    except DateParseError:
        return None
