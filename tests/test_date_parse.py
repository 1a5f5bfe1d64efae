import unittest
from datetime import datetime, timedelta, timezone

from datescan.core import (
    OUTPUT_SIZE,
    DateRecord,
    IncompleteDateError,
    LexicalError,
    RangeViolationError,
    SlotOverflowError,
    new_output,
    parse,
    parse_date,
    parse_record,
)


def ymd(text):
    record = parse_record(text)
    return record.year, record.month, record.day


def hms(text):
    record = parse_record(text)
    return record.hour, record.minute, record.second, record.millisecond


class StrictFormatTests(unittest.TestCase):
    def test_iso_triples(self):
        for y, m, d in ((2020, 1, 1), (1999, 12, 31), (2024, 2, 29), (1, 6, 15), (9999, 10, 9)):
            with self.subTest(y=y, m=m, d=d):
                self.assertEqual(ymd(f"{y:04d}-{m:02d}-{d:02d}"), (y, m - 1, d))

    def test_full_date_time(self):
        record = parse_record("2020-01-05T10:30:15.250Z")
        self.assertEqual(
            record.to_output(), [2020, 0, 5, 10, 30, 15, 250, 0]
        )

    def test_positive_and_compact_offsets(self):
        self.assertEqual(parse_record("2020-01-01T00:00:00+05:30").utc_offset_seconds, 19800)
        self.assertEqual(parse_record("2020-01-01T00:00:00-0800").utc_offset_seconds, -28800)

    def test_missing_zone_is_absent(self):
        self.assertIsNone(parse_record("2020-01-01T00:00:00").utc_offset_seconds)
        self.assertIsNone(parse_record("2020-01-01").utc_offset_seconds)

    def test_fraction_digits(self):
        self.assertEqual(hms("2020-01-01T00:00:00.5")[3], 500)
        self.assertEqual(hms("2020-01-01T00:00:00.05")[3], 50)
        self.assertEqual(hms("2020-01-01T00:00:00.123456")[3], 123)

    def test_year_and_year_month_default_to_first_day(self):
        self.assertEqual(ymd("2020"), (2020, 0, 1))
        self.assertEqual(ymd("2020-07"), (2020, 6, 1))

    def test_extended_years(self):
        self.assertEqual(ymd("+002020-01-05"), (2020, 0, 5))
        self.assertEqual(ymd("-000001-01-05"), (-1, 0, 5))

    def test_padded_small_year_is_kept(self):
        self.assertEqual(ymd("0049-03-04"), (49, 2, 4))

    def test_out_of_range_fields(self):
        for text in ("2020-01-32", "2020-13-01", "2020-00-10"):
            with self.subTest(text=text):
                self.assertIsNone(parse_date(text))
        with self.assertRaises(RangeViolationError):
            parse_record("2020-13-01")

    def test_malformed_time_part_is_rejected(self):
        for text in ("2020-01-01T25:00", "2020-01-01T10", "2020-01-01T10:00x", "2020-01-01T10:00+5"):
            with self.subTest(text=text):
                with self.assertRaises(LexicalError):
                    parse_record(text)

    def test_date_then_lenient_time(self):
        record = parse_record("2020-01-05 3:15 PM")
        self.assertEqual(record.to_output()[:5], [2020, 0, 5, 15, 15])

    def test_strict_time_then_lenient_tail(self):
        record = parse_record("2020-01-05T10:00 PM")
        self.assertEqual(record.hour, 22)

    def test_slash_separated_year_first(self):
        self.assertEqual(ymd("2020/01/05"), (2020, 0, 5))


class LenientFormatTests(unittest.TestCase):
    def test_month_name_positions(self):
        for text in ("Jan 5 2020", "5 Jan 2020", "2020 Jan 5", "January 5, 2020", "5-Jan-2020"):
            with self.subTest(text=text):
                self.assertEqual(ymd(text), (2020, 0, 5))

    def test_us_numeric_order(self):
        self.assertEqual(ymd("03/04/2020"), (2020, 2, 4))
        self.assertEqual(ymd("12-25-2020"), (2020, 11, 25))

    def test_day_first_when_forced_by_range(self):
        self.assertEqual(ymd("25/12/2020"), (2020, 11, 25))

    def test_two_digit_years(self):
        for n in (0, 7, 49):
            self.assertEqual(ymd(f"1/2/{n:02d}")[0], 2000 + n)
        for n in (50, 75, 99):
            self.assertEqual(ymd(f"1/2/{n:02d}")[0], 1900 + n)

    def test_rfc_style(self):
        record = parse_record("Tue, 05 Jan 2021 10:20:30 GMT")
        self.assertEqual(record.to_output(), [2021, 0, 5, 10, 20, 30, 0, 0])

    def test_named_zone_and_offset(self):
        self.assertEqual(parse_record("Jan 5 2020 10:00 EST").utc_offset_seconds, -5 * 3600)
        self.assertEqual(parse_record("Jan 5 2020 10:00 GMT+0530").utc_offset_seconds, 19800)
        self.assertEqual(parse_record("Jan 5 2020 10:00 +05:30").utc_offset_seconds, 19800)
        self.assertEqual(parse_record("Jan 5 2020 10:00 UTC-8").utc_offset_seconds, -8 * 3600)

    def test_offset_hour_out_of_range(self):
        self.assertIsNone(parse_date("Jan 5 2020 10:00 +99"))
        with self.assertRaises(RangeViolationError):
            parse_record("Jan 5 2020 10:00 GMT+2400")

    def test_bare_sign_after_zone_name_is_zero_offset(self):
        self.assertEqual(parse_record("Jan 5 2020 10:00 GMT+").utc_offset_seconds, 0)
        self.assertEqual(parse_record("Jan 5 2020 10:00 UTC -").utc_offset_seconds, 0)

    def test_lenient_time_with_fraction(self):
        self.assertEqual(hms("Jan 5 2020 10:30:15.25"), (10, 30, 15, 250))

    def test_double_colon_hour(self):
        self.assertEqual(hms("Jan 5 2020 10::"), (10, 0, 0, 0))

    def test_am_pm(self):
        self.assertEqual(hms("Jan 5 2020 3:15 PM")[0], 15)
        self.assertEqual(hms("Jan 5 2020 12:00 AM")[0], 0)
        self.assertEqual(hms("Jan 5 2020 12:00 PM")[0], 12)

    def test_time_before_date(self):
        self.assertEqual(parse_record("10:30 Jan 5 2020").to_output()[:5], [2020, 0, 5, 10, 30])

    def test_hour_out_of_range(self):
        with self.assertRaises(RangeViolationError):
            parse_record("Jan 5 2020 25:00")

    def test_time_only_fails(self):
        self.assertIsNone(parse_date("12:30:00"))
        with self.assertRaises(IncompleteDateError):
            parse_record("12:30:00")

    def test_no_date_at_all(self):
        self.assertIsNone(parse_date("n/a"))
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date(None))

    def test_too_many_numbers(self):
        with self.assertRaises(SlotOverflowError):
            parse_record("1 2 3 4")

    def test_unknown_words_are_ignored(self):
        self.assertEqual(ymd("Posted on Jan 5 2020"), (2020, 0, 5))


class WhitespaceAndCommentTests(unittest.TestCase):
    def test_insertions_do_not_change_result(self):
        base = parse_record("Jan 5 2020 10:30 PM EST")
        for text in (
            "Jan   5 2020  10:30  PM EST",
            "Jan (month) 5 2020 10:30 PM (Eastern) EST",
            "\tJan 5\n2020 10:30 PM EST ",
            "Jan 5 (a (nested) note) 2020 10:30 PM EST",
        ):
            with self.subTest(text=text):
                self.assertEqual(parse_record(text), base)

    def test_insertions_inside_structured_time(self):
        base = parse_record("2020-01-01T10:30:00Z")
        for text in (
            "2020-01-01T 10:30:00Z",
            "2020-01-01T10: 30:00Z",
            "2020-01-01T10 :30:00Z",
            "2020-01-01T10:30 :00Z",
            "2020-01-01T10:30:00 Z",
            "2020-01-01 T10:30:00Z",
            "2020-01-01T10:30 (noon-ish) :00Z",
        ):
            with self.subTest(text=text):
                self.assertEqual(parse_date(text), base)

    def test_custom_whitespace_classifier(self):
        record = parse_record("Jan_5_2020", is_whitespace=lambda ch: ch == "_")
        self.assertEqual((record.year, record.month, record.day), (2020, 0, 5))


class OutputBufferTests(unittest.TestCase):
    def test_parse_fills_output(self):
        out = new_output()
        self.assertTrue(parse("2020-01-01T00:00:00Z", out))
        self.assertEqual(out, [2020, 0, 1, 0, 0, 0, 0, 0])

    def test_parse_reports_failure(self):
        out = [0] * OUTPUT_SIZE
        self.assertFalse(parse("2020-01-32", out))

    def test_short_buffer_is_a_caller_error(self):
        with self.assertRaises(ValueError):
            parse("2020-01-01", [0] * 3)


class RecordTests(unittest.TestCase):
    def test_round_trip(self):
        for record in (
            DateRecord(year=2020, month=0, day=5, hour=10, minute=30, second=15, millisecond=250, utc_offset_seconds=19800),
            DateRecord(year=1999, month=11, day=31, hour=23, minute=59, second=59, millisecond=999, utc_offset_seconds=-28800),
            DateRecord(year=2020, month=5, day=1, utc_offset_seconds=0),
            DateRecord(year=49, month=2, day=4),
            DateRecord(year=-12, month=2, day=4, hour=1),
        ):
            with self.subTest(iso=record.isoformat()):
                self.assertEqual(parse_record(record.isoformat()), record)

    def test_isoformat(self):
        record = parse_record("Jan 5 2020 3:15 PM EST")
        self.assertEqual(record.isoformat(), "2020-01-05T15:15:00.000-05:00")

    def test_to_datetime(self):
        record = parse_record("2020-01-05T10:30:00.250+01:00")
        self.assertEqual(
            record.to_datetime(),
            datetime(2020, 1, 5, 10, 30, 0, 250000, tzinfo=timezone(timedelta(hours=1))),
        )
        self.assertIsNone(parse_record("2020-01-05").to_datetime().tzinfo)

    def test_to_datetime_rejects_calendar_invalid_dates(self):
        record = parse_record("2021-02-30")
        with self.assertRaises(ValueError):
            record.to_datetime()


if __name__ == "__main__":
    unittest.main()
