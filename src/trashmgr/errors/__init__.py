"""Public error exports for trashmgr."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
