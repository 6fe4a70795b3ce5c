"""Trash info record: one metadata file per trashed item."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from trashmgr.errors import (
    FileOpenError,
    InvalidNameError,
    PathDecodingError,
    PathEncodingError,
    ReadError,
    WriteError,
)
from trashmgr.parser import TRASH_INFO_HEADER, parse_trash_info
from trashmgr.util.paths import check_extension, with_trash_info_ext
from trashmgr.util.percent import is_single_line_value, percent_decode, percent_encode
from trashmgr.util.time import format_trash_datetime, now_local

logger = logging.getLogger(__name__)

RealPath = Union[str, bytes, "os.PathLike[Any]"]
Resolver = Callable[[str], Union[str, "os.PathLike[str]"]]


@dataclass(slots=True, frozen=True)
class TrashInfo:
    """
    Original location and deletion time of a trashed item.

    Notes:
        - percent_path is stored exactly as written in the record file.
        - Ordering (<, <=, >, >=) looks at deletion_date only; equality
          compares both fields.
    """

    percent_path: str
    deletion_date: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.percent_path, str) or not is_single_line_value(
            self.percent_path
        ):
            raise ValueError(
                "TrashInfo.percent_path must be a non-empty string without "
                "whitespace or control characters"
            )
        if not isinstance(self.deletion_date, datetime):
            raise TypeError("TrashInfo.deletion_date must be a datetime")
        if self.deletion_date.tzinfo is not None:
            raise ValueError(
                "aware datetime is not allowed; DeletionDate is naive local time"
            )

    @classmethod
    def new(
        cls,
        real_path: RealPath,
        deletion_date: Optional[datetime] = None,
    ) -> TrashInfo:
        """
        Build a record for real_path without touching the filesystem.

        Raises:
            PathEncodingError: if real_path is not representable as UTF-8.
        """
        text = os.fsdecode(real_path)
        try:
            percent_path = percent_encode(text)
        except UnicodeEncodeError as exc:
            raise PathEncodingError(
                f"Could not convert path {text!r} to UTF-8 for percent encoding",
                details={"path": text},
                cause=exc,
            ) from exc

        if deletion_date is None:
            deletion_date = now_local()
        return cls(percent_path=percent_path, deletion_date=deletion_date)

    @classmethod
    def from_str(cls, text: str) -> TrashInfo:
        """Build a record from record text. Parser errors propagate as-is."""
        parsed = parse_trash_info(text)
        return cls(percent_path=parsed.percent_path, deletion_date=parsed.deletion_date)

    @classmethod
    def parse_from_path(cls, path: Union[str, "os.PathLike[str]"]) -> TrashInfo:
        """
        Load a record file.

        Raises:
            WrongExtensionError / NoExtensionError: if path is not a .trashinfo file.
            ReadError: if the file cannot be read as UTF-8 text.
            TrashInfoParseError: if the content is malformed.
        """
        check_extension(path)
        p = Path(path)
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(
                f"Failed to read trash info file {p}: {exc}",
                details={"path": str(p)},
                cause=exc,
            ) from exc

        logger.debug("read trash info %s", p)
        return cls.from_str(text)

    def save(self, name: str, resolver: Resolver) -> Path:
        """
        Write the record as <name>.trashinfo at the path given by resolver.

        The file is created exclusively: an existing file is never touched.

        Returns:
            The path that was written.

        Raises:
            FileOpenError: if the file cannot be created (exists, permissions,
                a name without a file component, or a path the resolver rejects).
            WriteError: if writing fails; the partial file is left in place.
        """
        try:
            file_name = with_trash_info_ext(name)
        except ValueError as exc:
            raise FileOpenError(
                f"Invalid trash info name: {name!r}",
                details={"name": name},
                cause=exc,
            ) from exc
        try:
            path = Path(resolver(file_name))
        except (InvalidNameError, ValueError, TypeError) as exc:
            raise FileOpenError(
                f"Could not resolve trash info path for {file_name!r}: {exc}",
                details={"name": file_name},
                cause=exc,
            ) from exc

        try:
            handle = open(path, "x", encoding="utf-8", newline="")
        except OSError as exc:
            raise FileOpenError(
                f"Failed to open file with path {path}: {exc}",
                details={"path": str(path)},
                cause=exc,
            ) from exc

        try:
            with handle:
                handle.write(self.to_text())
        except OSError as exc:
            raise WriteError(
                f"Failed to write to trash info file {path}: {exc}",
                details={"path": str(path)},
                cause=exc,
            ) from exc

        logger.debug("created trash info %s", path)
        return path

    @property
    def path(self) -> str:
        """The original path, percent-encoded."""
        return self.percent_path

    def path_decoded(self) -> str:
        """
        The original path, percent-decoded.

        Raises:
            PathDecodingError: if the decoded bytes are not well-formed UTF-8.
        """
        try:
            return percent_decode(self.percent_path)
        except UnicodeDecodeError as exc:
            raise PathDecodingError(
                f"Percent-decoded bytes of {self.percent_path} are not well-formed "
                f"in UTF-8: {exc}",
                details={"string": self.percent_path},
                cause=exc,
            ) from exc

    def deletion_date_string(self) -> str:
        return format_trash_datetime(self.deletion_date)

    def to_text(self) -> str:
        return (
            f"{TRASH_INFO_HEADER}\n"
            f"Path={self.percent_path}\n"
            f"DeletionDate={self.deletion_date_string()}"
        )

    def __str__(self) -> str:
        return self.to_text()

    # ----------------------------
    # Ordering (deletion_date only)
    # ----------------------------
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TrashInfo):
            return NotImplemented
        return self.deletion_date < other.deletion_date

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TrashInfo):
            return NotImplemented
        return self.deletion_date <= other.deletion_date

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TrashInfo):
            return NotImplemented
        return self.deletion_date > other.deletion_date

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TrashInfo):
            return NotImplemented
        return self.deletion_date >= other.deletion_date
