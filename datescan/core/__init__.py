from .errors import (
    DateParseError,
    IncompleteDateError,
    LexicalError,
    RangeViolationError,
    SlotOverflowError,
)
from .parser import parse, parse_date, parse_record
from .record import OUTPUT_SIZE, DateRecord, OutputField, new_output

__all__ = [
    "parse",
    "parse_date",
    "parse_record",
    "DateRecord",
    "OutputField",
    "OUTPUT_SIZE",
    "new_output",
    "DateParseError",
    "LexicalError",
    "SlotOverflowError",
    "RangeViolationError",
    "IncompleteDateError",
]
