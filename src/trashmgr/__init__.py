"""trashmgr public API."""

from __future__ import annotations

import logging

from trashmgr.config import TrashConfig
from trashmgr.errors import (
    ConfigError,
    ExtensionError,
    FileOpenError,
    InvalidNameError,
    MoveError,
    NoExtensionError,
    PathDecodingError,
    PathEncodingError,
    ReadError,
    RestoreConflictError,
    TrashInfoParseError,
    TrashMgrError,
    WriteError,
    WrongExtensionError,
)
from trashmgr.local import TrashDir
from trashmgr.models import TrashEntry, TrashInfo
from trashmgr.parser import ParsedTrashInfo, parse_trash_info
from trashmgr.util.paths import TRASH_INFO_EXT, check_extension
from trashmgr.util.time import TRASH_DATETIME_FORMAT

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # High-level
    "TrashDir",
    "TrashConfig",
    # Models
    "TrashInfo",
    "TrashEntry",
    # Parsing / format
    "ParsedTrashInfo",
    "parse_trash_info",
    "check_extension",
    "TRASH_INFO_EXT",
    "TRASH_DATETIME_FORMAT",
    # Errors
    "TrashMgrError",
    "PathEncodingError",
    "PathDecodingError",
    "FileOpenError",
    "WriteError",
    "ReadError",
    "ExtensionError",
    "WrongExtensionError",
    "NoExtensionError",
    "TrashInfoParseError",
    "InvalidNameError",
    "MoveError",
    "RestoreConflictError",
    "ConfigError",
]
