from __future__ import annotations


class DateParseError(ValueError):
    """Base class for every reason a date string is rejected."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LexicalError(DateParseError):
    kind = "lexical"


class SlotOverflowError(DateParseError):
    kind = "overflow"


class RangeViolationError(DateParseError):
    kind = "range"

    def __init__(self, field: str, value: int):
        super().__init__(f"{field} out of range: {value}")
        self.field = field
        self.value = value


class IncompleteDateError(DateParseError):
    kind = "incomplete"


__all__ = [
    "DateParseError",
    "LexicalError",
    "SlotOverflowError",
    "RangeViolationError",
    "IncompleteDateError",
]
