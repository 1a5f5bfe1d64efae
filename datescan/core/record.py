from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import IntEnum
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict


class OutputField(IntEnum):
    YEAR = 0
    MONTH = 1  # 0 = January
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5
    MILLISECOND = 6
    UTC_OFFSET = 7  # seconds, or None when no zone was given


OUTPUT_SIZE = len(OutputField)


def new_output() -> list:
    return [None] * OUTPUT_SIZE


class DateRecord(BaseModel):
    """A successfully parsed date string.

    `month` is 0-based; `utc_offset_seconds` is None when the input carried
    no timezone.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    utc_offset_seconds: Optional[int] = None

    @classmethod
    def from_output(cls, output: Sequence[Optional[int]]) -> "DateRecord":
        return cls(
            year=output[OutputField.YEAR],
            month=output[OutputField.MONTH],
            day=output[OutputField.DAY],
            hour=output[OutputField.HOUR],
            minute=output[OutputField.MINUTE],
            second=output[OutputField.SECOND],
            millisecond=output[OutputField.MILLISECOND],
            utc_offset_seconds=output[OutputField.UTC_OFFSET],
        )

    def to_output(self) -> list:
        return [
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond,
            self.utc_offset_seconds,
        ]

    def isoformat(self) -> str:
        """Render as YYYY-MM-DDThh:mm:ss.mmm[+hh:mm]; the parser reads this back unchanged."""
        if 0 <= self.year <= 9999:
            year = f"{self.year:04d}"
        else:
            year = f"{'+' if self.year > 0 else '-'}{abs(self.year):06d}"
        text = (
            f"{year}-{self.month + 1:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.millisecond:03d}"
        )
        if self.utc_offset_seconds is not None:
            sign = "-" if self.utc_offset_seconds < 0 else "+"
            hours, rem = divmod(abs(self.utc_offset_seconds), 3600)
            text += f"{sign}{hours:02d}:{rem // 60:02d}"
        return text

    def to_datetime(self) -> datetime:
        """Convert to a datetime; raises ValueError for dates like 30 February."""
        tzinfo = None
        if self.utc_offset_seconds is not None:
            tzinfo = timezone(timedelta(seconds=self.utc_offset_seconds))
        return datetime(
            self.year,
            self.month + 1,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=tzinfo,
        )
