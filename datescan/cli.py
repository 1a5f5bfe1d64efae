# datescan/cli.py
import sys


def main() -> None:
    """
    Console entry point:
      date-scan = datescan.cli:main
    Delegates to the root script so `python date_scan.py ...` and the
    installed command behave the same.
    """
    import date_scan  # the root script module
    sys.exit(date_scan.main())

if __name__ == "__main__":
    # When executed as `python -m datescan.cli ...`
    main()
