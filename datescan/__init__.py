from .core import DateRecord, parse, parse_date, parse_record

__version__ = "0.1.0"

__all__ = ["DateRecord", "parse", "parse_date", "parse_record", "__version__"]
