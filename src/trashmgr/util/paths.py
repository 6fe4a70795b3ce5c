from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union

from trashmgr.errors import NoExtensionError, WrongExtensionError

TRASH_INFO_EXT: str = "trashinfo"
TRASH_INFO_SUFFIX: str = "." + TRASH_INFO_EXT

PathLike = Union[str, os.PathLike]


def with_trash_info_ext(name: str) -> str:
    """
    Give name the .trashinfo extension, replacing any existing one.

    "report.pdf" -> "report.trashinfo", "notes" -> "notes.trashinfo".
    """
    return str(PurePath(name).with_suffix(TRASH_INFO_SUFFIX))


def check_extension(path: PathLike) -> None:
    """
    Ensure path carries exactly the .trashinfo extension.

    Raises:
        NoExtensionError: if path has no extension.
        WrongExtensionError: if path has any other extension.
    """
    p = PurePath(path)
    if not p.suffix:
        raise NoExtensionError(
            f"Path has no extension, expected {TRASH_INFO_SUFFIX}: {p}",
            details={"path": str(p)},
        )
    if p.suffix != TRASH_INFO_SUFFIX:
        raise WrongExtensionError(
            f"Path has extension {p.suffix}, expected {TRASH_INFO_SUFFIX}: {p}",
            details={"path": str(p), "extension": p.suffix},
        )
