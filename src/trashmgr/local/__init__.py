"""Public trash directory exports for trashmgr."""

from __future__ import annotations

from .trash_dir import TrashDir

__all__ = ["TrashDir"]
