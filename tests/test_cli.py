import csv
import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

import date_scan
from datescan import cli


def run(argv):
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = date_scan.main(argv)
    return code, buf.getvalue()


class CliTests(unittest.TestCase):
    def test_table_output(self):
        code, out = run(["2020-01-05", "Jan 5 2020 10:00 PM"])
        self.assertEqual(code, 0)
        self.assertIn("2020-01-05T00:00:00.000", out)
        self.assertIn("2020-01-05T22:00:00.000", out)
        self.assertIn("parsed=2 failed=0", out)

    def test_json_output(self):
        code, out = run(["--format", "json", "5 Jan 2020", "12:30"])
        self.assertEqual(code, 0)
        rows = json.loads(out)
        self.assertTrue(rows[0]["ok"])
        self.assertEqual(rows[0]["year"], 2020)
        self.assertFalse(rows[1]["ok"])
        self.assertTrue(rows[1]["error"].startswith("incomplete"))

    def test_strict_exit(self):
        code, _ = run(["--strict-exit", "--no-summary", "not a date"])
        self.assertEqual(code, 1)

    def test_file_input_and_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "dates.txt"
            src.write_text("2020-01-05\n\nDec 25 99\n", encoding="utf-8")
            dest = Path(tmp) / "out" / "dates.csv"
            code, out = run(["--file", str(src), "--format", "csv", "--csv-out", str(dest)])
            self.assertEqual(code, 0)
            self.assertIn("Wrote 2 rows", out)
            with dest.open(encoding="utf-8") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual([r["iso"] for r in rows], ["2020-01-05T00:00:00.000", "1999-12-25T00:00:00.000"])


class ConsoleEntryTests(unittest.TestCase):
    def test_console_entry_exits_with_status(self):
        buf = io.StringIO()
        with mock.patch.object(sys, "argv", ["date-scan", "--no-summary", "2020-01-05"]):
            with redirect_stdout(buf), self.assertRaises(SystemExit) as ctx:
                cli.main()
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("2020-01-05T00:00:00.000", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
