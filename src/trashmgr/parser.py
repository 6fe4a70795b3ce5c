"""Parser for the textual trash info record layout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NoReturn

from trashmgr.errors import TrashInfoParseError
from trashmgr.util.percent import is_single_line_value
from trashmgr.util.time import TRASH_DATETIME_FORMAT, parse_trash_datetime

TRASH_INFO_HEADER: str = "[Trash Info]"
PATH_KEY: str = "Path"
DELETION_DATE_KEY: str = "DeletionDate"


@dataclass(slots=True, frozen=True)
class ParsedTrashInfo:
    """Structured fields extracted from record text."""

    percent_path: str
    deletion_date: datetime


def parse_trash_info(text: str) -> ParsedTrashInfo:
    """
    Parse record text into its percent-encoded path and deletion date.

    Accepted layout (\\n or \\r\\n line endings, trailing blank lines allowed):

        [Trash Info]
        Path=<percent-encoded path>
        DeletionDate=<YYYY-MM-DDTHH:MM:SS>

    Raises:
        TrashInfoParseError: with details["line"] (1-based) and details["reason"].
    """
    if not isinstance(text, str):
        raise TypeError("text must be a str")

    # Only \n and \r\n end a line.
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines or lines[0] != TRASH_INFO_HEADER:
        _fail(1, f"expected header {TRASH_INFO_HEADER!r}")

    percent_path = _read_value(lines, 2, PATH_KEY)
    if not is_single_line_value(percent_path):
        _fail(2, "Path value must not contain whitespace or control characters")

    raw_date = _read_value(lines, 3, DELETION_DATE_KEY)
    try:
        deletion_date = parse_trash_datetime(raw_date)
    except ValueError as exc:
        raise TrashInfoParseError(
            f"Invalid DeletionDate {raw_date!r}: expected {TRASH_DATETIME_FORMAT}",
            details={"line": 3, "reason": "bad DeletionDate", "value": raw_date},
            cause=exc,
        ) from exc

    if len(lines) > 3:
        _fail(4, "unexpected content after DeletionDate")

    return ParsedTrashInfo(percent_path=percent_path, deletion_date=deletion_date)


def _read_value(lines: list[str], lineno: int, key: str) -> str:
    if len(lines) < lineno:
        _fail(lineno, f"missing {key}= line")

    line = lines[lineno - 1]
    name, sep, value = line.partition("=")
    if not sep or name != key:
        _fail(lineno, f"expected {key}= line, got {line!r}")
    if not value:
        _fail(lineno, f"{key} value is empty")
    return value


def _fail(lineno: int, reason: str) -> NoReturn:
    raise TrashInfoParseError(
        f"Malformed trash info at line {lineno}: {reason}",
        details={"line": lineno, "reason": reason},
    )
