from __future__ import annotations

import re
from datetime import datetime

# Local wall-clock time, second precision, no timezone.
TRASH_DATETIME_FORMAT: str = "%Y-%m-%dT%H:%M:%S"
_TRASH_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII)


def now_local() -> datetime:
    """Return current local time as a naive datetime truncated to seconds."""
    return datetime.now().replace(microsecond=0)


def format_trash_datetime(dt: datetime) -> str:
    """Render a datetime with TRASH_DATETIME_FORMAT."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    return dt.strftime(TRASH_DATETIME_FORMAT)


def parse_trash_datetime(value: str) -> datetime:
    """
    Parse a DeletionDate value into a naive datetime.

    Only the exact pattern is accepted:
      - 2024-03-01T10:15:00

    Fractional seconds, offsets and 'Z' suffixes raise ValueError.
    """
    if not isinstance(value, str) or not value:
        raise ValueError("DeletionDate value must be a non-empty string")
    if not _TRASH_DATETIME_RE.fullmatch(value):
        raise ValueError(
            f"DeletionDate value must be zero-padded {TRASH_DATETIME_FORMAT}: {value!r}"
        )
    return datetime.strptime(value, TRASH_DATETIME_FORMAT)
