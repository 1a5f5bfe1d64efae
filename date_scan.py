import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from datescan.config import configure_logging, load_settings
from datescan.core import DateParseError, parse_record

LOGGER = logging.getLogger("date_scan")

CSV_COLUMNS = [
    "input", "ok", "iso", "year", "month", "day", "hour", "minute", "second",
    "millisecond", "utc_offset_seconds", "error",
]


def _read_lines(path: str) -> List[str]:
    if path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        with Path(path).open(encoding="utf-8") as f:
            lines = f.read().splitlines()
    # blank lines carry no date; skip them instead of reporting failures
    return [line for line in lines if line.strip()]


def scan(texts: Iterable[str]) -> List[dict]:
    """Parse each text and return one result row per input."""
    rows: List[dict] = []
    for text in texts:
        row = {"input": text, "ok": False, "iso": "", "error": ""}
        try:
            record = parse_record(text)
        except DateParseError as e:
            row["error"] = f"{e.kind}: {e.message}"
            LOGGER.debug("parse-failed kind=%s input=%r", e.kind, text)
        else:
            row.update(record.model_dump())
            row["ok"] = True
            row["iso"] = record.isoformat()
        rows.append(row)
    return rows


def _print_table(rows: List[dict]) -> None:
    width = max((len(r["input"]) for r in rows), default=0)
    for r in rows:
        result = r["iso"] if r["ok"] else f"! {r['error']}"
        print(f"{r['input']:<{width}}  {result}")


def _write_csv(rows: List[dict], path: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8", newline="") as fcsv:
        writer = csv.DictWriter(fcsv, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for row in rows:
            writer.writerow({col: row.get(col, "") for col in CSV_COLUMNS})


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Parse free-form date strings")
    parser.add_argument("texts", nargs="*", help="Date strings to parse")
    parser.add_argument("--file", type=str, default=None,
                        help="Read one date string per line from this file ('-' for stdin)")
    parser.add_argument("--format", choices=["table", "json", "csv"], default="table",
                        help="Output format (default: table)")
    parser.add_argument("--csv-out", type=str, default="output/dates.csv",
                        help="Path of the CSV file written by --format csv (default: output/dates.csv)")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML settings file (overrides DATESCAN_CONFIG)")
    parser.add_argument("--no-summary", action="store_true", help="Suppress the parsed/failed summary line")
    parser.add_argument("--strict-exit", action="store_true",
                        help="Exit with status 1 when any input fails to parse")

    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    configure_logging(settings)

    texts = list(args.texts)
    if args.file:
        texts.extend(_read_lines(args.file))
    if not texts:
        parser.error("no input: pass date strings or --file")

    rows = scan(texts)
    parsed = sum(1 for r in rows if r["ok"])
    failed = len(rows) - parsed

    if args.format == "json":
        print(json.dumps(rows, indent=2))
    elif args.format == "csv":
        _write_csv(rows, args.csv_out)
        if not args.no_summary:
            print(f"Wrote {len(rows)} rows to {args.csv_out}")
    else:
        _print_table(rows)

    if not args.no_summary and args.format != "json":
        print(f"parsed={parsed} failed={failed}")
    LOGGER.info("scan parsed=%s failed=%s total=%s", parsed, failed, len(rows))

    if args.strict_exit and failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
