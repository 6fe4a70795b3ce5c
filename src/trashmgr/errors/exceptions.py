"""Exception hierarchy for trashmgr."""

from __future__ import annotations

from typing import Any, Optional


class TrashMgrError(Exception):
    """
    Base exception for trashmgr.

    Attributes:
        details: Optional structured information (e.g., offending path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class PathEncodingError(TrashMgrError):
    """Raised when a real path cannot be represented as UTF-8 text."""


class PathDecodingError(TrashMgrError):
    """Raised when a percent-decoded path is not well-formed UTF-8."""


class FileOpenError(TrashMgrError):
    """Raised when a record file cannot be created exclusively."""


class WriteError(TrashMgrError):
    """Raised when writing a record file fails midway."""


class ReadError(TrashMgrError):
    """Raised when a record file cannot be read as UTF-8 text."""


class ExtensionError(TrashMgrError):
    """Raised when a path is not a ``.trashinfo`` record by its extension."""


class WrongExtensionError(ExtensionError):
    """Raised when a path has an extension other than ``.trashinfo``."""


class NoExtensionError(ExtensionError):
    """Raised when a path has no extension at all."""


class TrashInfoParseError(TrashMgrError):
    """Raised when record text does not follow the trash info layout."""


class InvalidNameError(TrashMgrError):
    """Raised when a record name cannot live inside the trash directory."""


class MoveError(TrashMgrError):
    """Raised when a payload cannot be moved into or out of the trash."""


class RestoreConflictError(TrashMgrError):
    """Raised when the restore destination is already occupied."""


class ConfigError(TrashMgrError):
    """Raised when no usable trash location can be configured."""
