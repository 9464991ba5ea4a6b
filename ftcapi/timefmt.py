"""
Timestamps as the FTC server writes them: "2024-04-12T10:00:00", sometimes
with fractional seconds and/or a trailing "Z". Everything from the first "Z"
on is dropped, so parsed values are naive datetimes.
"""
import datetime as dt
import re
from typing import Optional

from ftcapi.errors import ParseError

DATE_FMT = "%Y-%m-%dT%H:%M:%S"

# strptime alone takes one-digit fields, so the shape is checked first.
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.(\d+))?", re.ASCII)


def parse_time(value: str) -> dt.datetime:
    if not isinstance(value, str):
        raise ParseError(f"expected a timestamp string, got {type(value).__name__}")
    s = value.strip('"').split("Z", 1)[0]
    m = _TIMESTAMP_RE.fullmatch(s)
    if m is None:
        raise ParseError(f"invalid timestamp {value!r}: expected YYYY-MM-DDTHH:MM:SS")
    frac = m.group(1)
    try:
        parsed = dt.datetime.strptime(s[:19], DATE_FMT)
    except ValueError as e:
        raise ParseError(f"invalid timestamp {value!r}: {e}") from e

    if frac:
        parsed = parsed.replace(microsecond=int(frac[:6].ljust(6, "0")))
    return parsed


def parse_optional_time(value: Optional[str]) -> Optional[dt.datetime]:
    """parse_time, but None and "" stay None."""
    if value is None or value == "":
        return None
    return parse_time(value)


def format_time(value: dt.datetime) -> str:
    return value.strftime(DATE_FMT)
