"""Public model exports for trashmgr."""

from __future__ import annotations

from .trash_entry import TrashEntry
from .trash_info import TrashInfo

__all__ = [
    "TrashInfo",
    "TrashEntry",
]
