import re
from datetime import datetime, timezone
from typing import NamedTuple

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

RFC3339_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?(Z|[+-]\d{2}:\d{2})"
)

# Tried in order; the first layout whose shape matches and that parses wins.
# strptime alone accepts unpadded fields, so each layout is shape-checked first.
DATE_LAYOUTS = [
    (re.compile(r"\d{4}-\d{2}-\d{2}"), "%Y-%m-%d"),              # 2024-01-05
    (RFC3339_RE, None),                                          # 2024-01-05T20:00:00.5Z
    (re.compile(r"\d{2}/\d{2}/\d{4}"), "%d/%m/%Y"),              # 05/01/2024
    (re.compile(r"\d{2} [A-Za-z]{3} \d{4}"), "%d %b %Y"),        # 05 Jan 2024
    (re.compile(r"[A-Za-z]+ \d{1,2}, \d{4}"), "%B %d, %Y"),      # January 5, 2024
]


class ParsedDate(NamedTuple):
    value: datetime
    ok: bool


def _parse_rfc3339(match):
    """strptime's %f stops at microseconds; nanosecond fractions are cut to six digits."""
    base, fraction, zone = match.groups()
    if fraction:
        return datetime.strptime(f"{base}.{fraction[:6].ljust(6, '0')}{zone}", "%Y-%m-%dT%H:%M:%S.%f%z")
    return datetime.strptime(f"{base}{zone}", "%Y-%m-%dT%H:%M:%S%z")


def parse_date(text):
    """
    Best-effort parse of a tour date string.
    Returns ParsedDate(value, ok). When no layout matches, value is ZERO_TIME
    and ok is False, so callers must check ok before using value.
    Values without an offset are taken as UTC to keep every result comparable.
    """
    if not text:
        return ParsedDate(ZERO_TIME, False)

    for pattern, layout in DATE_LAYOUTS:
        match = pattern.fullmatch(text)
        if not match:
            continue
        try:
            parsed = _parse_rfc3339(match) if layout is None else datetime.strptime(text, layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return ParsedDate(parsed, True)

    return ParsedDate(ZERO_TIME, False)
