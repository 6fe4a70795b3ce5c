"""A trashed item as found in a trash directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .trash_info import TrashInfo


@dataclass(slots=True, frozen=True)
class TrashEntry:
    """
    Record file and payload slot sharing one name inside a trash directory.

    Notes:
        - name is the payload name; the record file is <name>.trashinfo.
        - files_path may not exist if the payload was removed behind our back.
    """

    name: str
    info: TrashInfo
    info_path: Path
    files_path: Path

    def sort_key(self) -> tuple:
        """Oldest first, ties broken by name."""
        return (self.info.deletion_date, self.name)
