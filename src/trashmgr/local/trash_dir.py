"""TrashDir: record storage layout plus trash/restore/remove of payloads."""

from __future__ import annotations

import itertools
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

from trashmgr.config import TrashConfig
from trashmgr.errors import (
    FileOpenError,
    InvalidNameError,
    MoveError,
    TrashMgrError,
)
from trashmgr.models import TrashEntry, TrashInfo
from trashmgr.util.paths import TRASH_INFO_SUFFIX

from .validators import validate_record_name, validate_restore_target

logger = logging.getLogger(__name__)

EntryRef = Union[TrashEntry, str]


class TrashDir:
    """
    A trash directory laid out as:

        <root>/info/<name>.trashinfo   record (TrashInfo)
        <root>/files/<name>            payload (the trashed file or directory)

    Moves use os.rename and therefore only work within one filesystem.
    """

    def __init__(self, root: Union[str, os.PathLike]) -> None:
        self.root = Path(root)

    @classmethod
    def from_config(cls, config: TrashConfig) -> TrashDir:
        return cls(config.trash_dir)

    @property
    def info_dir(self) -> Path:
        return self.root / "info"

    @property
    def files_dir(self) -> Path:
        return self.root / "files"

    def ensure(self) -> None:
        """Create info/ and files/ if missing."""
        self.info_dir.mkdir(parents=True, exist_ok=True)
        self.files_dir.mkdir(parents=True, exist_ok=True)

    # ----------------------------
    # Path resolution
    # ----------------------------
    def info_path(self, name: str) -> Path:
        """Resolve a record file name (already carrying .trashinfo)."""
        validate_record_name(name)
        return self.info_dir / name

    def files_path(self, name: str) -> Path:
        validate_record_name(name)
        return self.files_dir / name

    # ----------------------------
    # Read APIs
    # ----------------------------
    def get(self, name: str) -> TrashEntry:
        """
        Load the entry stored under name.

        Raises:
            ReadError: if no record exists for name.
            TrashInfoParseError: if the record is malformed.
        """
        info_path = self.info_path(name + TRASH_INFO_SUFFIX)
        info = TrashInfo.parse_from_path(info_path)
        return TrashEntry(
            name=name,
            info=info,
            info_path=info_path,
            files_path=self.files_path(name),
        )

    def list_entries(self) -> list[TrashEntry]:
        """
        Return all parseable entries, oldest first (ties by name).

        Records that fail to load are logged and skipped.
        """
        if not self.info_dir.is_dir():
            return []

        entries: list[TrashEntry] = []
        for info_path in sorted(self.info_dir.iterdir()):
            if info_path.suffix != TRASH_INFO_SUFFIX or not info_path.is_file():
                continue
            name = info_path.name[: -len(TRASH_INFO_SUFFIX)]
            try:
                entries.append(self.get(name))
            except TrashMgrError as exc:
                logger.warning("skipping unreadable trash info %s: %s", info_path, exc)

        entries.sort(key=TrashEntry.sort_key)
        return entries

    # ----------------------------
    # Write APIs
    # ----------------------------
    def trash(
        self,
        path: Union[str, os.PathLike],
        deletion_date: Optional[datetime] = None,
    ) -> TrashEntry:
        """
        Move path into the trash and write its record.

        The record is written first (exclusively); if the payload move then
        fails, the record is removed again.

        Raises:
            PathEncodingError: if path is not representable as UTF-8.
            InvalidNameError: if path has no usable base name (e.g. "/").
            MoveError: if path does not exist or cannot be moved.
        """
        src = Path(os.path.abspath(path))
        if not os.path.lexists(src):
            raise MoveError(f"Path does not exist: {src}", details={"from": str(src)})

        info = TrashInfo.new(src, deletion_date)
        validate_record_name(src.name)
        self.ensure()

        name, info_path = self._claim_name(src.name, info)
        dest = self.files_path(name)
        try:
            os.rename(src, dest)
        except OSError as exc:
            info_path.unlink(missing_ok=True)
            raise MoveError(
                f"Failed to move {src} to {dest}: {exc}",
                details={"from": str(src), "to": str(dest)},
                cause=exc,
            ) from exc

        logger.info("trashed %s as %s", src, name)
        return TrashEntry(name=name, info=info, info_path=info_path, files_path=dest)

    def restore(self, entry: EntryRef, *, overwrite: bool = False) -> Path:
        """
        Move a trashed payload back to its original location.

        Raises:
            PathDecodingError: if the recorded path cannot be decoded.
            RestoreConflictError: if the destination exists and overwrite is False.
            MoveError: if the payload is missing or cannot be moved.
        """
        entry = self._resolve_entry(entry)
        target = Path(entry.info.path_decoded())
        validate_restore_target(target, overwrite)

        if not os.path.lexists(entry.files_path):
            raise MoveError(
                f"Trashed payload is missing: {entry.files_path}",
                details={"from": str(entry.files_path), "to": str(target)},
            )

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            os.replace(entry.files_path, target)
        except OSError as exc:
            raise MoveError(
                f"Failed to move {entry.files_path} to {target}: {exc}",
                details={"from": str(entry.files_path), "to": str(target)},
                cause=exc,
            ) from exc

        _unlink_record(entry.info_path)
        logger.info("restored %s to %s", entry.name, target)
        return target

    def remove(self, entry: EntryRef) -> None:
        """Permanently delete a trashed payload and its record."""
        entry = self._resolve_entry(entry)
        payload = entry.files_path
        try:
            if payload.is_dir() and not payload.is_symlink():
                shutil.rmtree(payload)
            elif os.path.lexists(payload):
                payload.unlink()
        except OSError as exc:
            raise TrashMgrError(
                f"Failed to delete trashed payload {payload}: {exc}",
                details={"path": str(payload)},
                cause=exc,
            ) from exc

        _unlink_record(entry.info_path)
        logger.info("removed %s permanently", entry.name)

    # ----------------------------
    # Internals
    # ----------------------------
    def _claim_name(self, base: str, info: TrashInfo) -> tuple[str, Path]:
        """Write the record under the first free name derived from base."""
        for name in _candidate_names(base):
            if os.path.lexists(self.files_path(name)):
                continue
            try:
                info_path = info.save(name + TRASH_INFO_SUFFIX, self.info_path)
            except FileOpenError as exc:
                if isinstance(exc.cause, FileExistsError):
                    logger.debug("trash info name %s taken, trying next", name)
                    continue
                raise
            return name, info_path
        raise InvalidNameError(f"No free trash name for {base!r}")  # pragma: no cover

    def _resolve_entry(self, entry: EntryRef) -> TrashEntry:
        if isinstance(entry, TrashEntry):
            return entry
        return self.get(entry)


def _candidate_names(base: str) -> Iterator[str]:
    """base, then stem_2.ext, stem_3.ext, ..."""
    yield base
    p = Path(base)
    for n in itertools.count(2):
        yield f"{p.stem}_{n}{p.suffix}"


def _unlink_record(info_path: Path) -> None:
    try:
        info_path.unlink()
    except OSError as exc:
        raise TrashMgrError(
            f"Failed to delete trash info file {info_path}: {exc}",
            details={"path": str(info_path)},
            cause=exc,
        ) from exc
