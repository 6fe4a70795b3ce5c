"""Validation helpers for TrashDir."""

from __future__ import annotations

import os
from pathlib import Path

from trashmgr.errors import InvalidNameError, RestoreConflictError


def validate_record_name(name: str) -> None:
    """A record name must be a single, non-special path component."""
    if not isinstance(name, str) or not name:
        raise InvalidNameError("Record name must be a non-empty string")
    if name in (".", ".."):
        raise InvalidNameError(f"Record name is reserved: {name!r}", details={"name": name})

    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators) or "\0" in name:
        raise InvalidNameError(
            f"Record name must not contain a path separator: {name!r}",
            details={"name": name},
        )


def validate_restore_target(target: Path, overwrite: bool) -> None:
    if overwrite:
        return
    # lexists: a dangling symlink still occupies the slot.
    if os.path.lexists(target):
        raise RestoreConflictError(
            f"Restore destination already exists: {target}",
            details={"path": str(target)},
        )
