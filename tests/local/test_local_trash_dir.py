import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from trashmgr.config import TrashConfig
from trashmgr.errors import (
    InvalidNameError,
    MoveError,
    PathDecodingError,
    ReadError,
    RestoreConflictError,
)
from trashmgr.local import TrashDir
from trashmgr.models import TrashInfo


class TestTrashDir(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        base = Path(self._tmp.name)
        self.home = base / "home"
        self.home.mkdir()
        self.trash = TrashDir(base / "Trash")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _make_file(self, rel: str, content: str = "data") -> Path:
        path = self.home / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def test_from_config(self) -> None:
        trash = TrashDir.from_config(TrashConfig(trash_dir=Path("/t/Trash")))
        self.assertEqual(trash.info_dir, Path("/t/Trash/info"))
        self.assertEqual(trash.files_dir, Path("/t/Trash/files"))

    def test_info_path_rejects_bad_names(self) -> None:
        with self.assertRaises(InvalidNameError):
            self.trash.info_path("../escape.trashinfo")

    def test_trash_moves_payload_and_writes_record(self) -> None:
        src = self._make_file("notes.txt", "hello")
        dt = datetime(2024, 3, 1, 10, 15, 0)

        entry = self.trash.trash(src, deletion_date=dt)

        self.assertFalse(src.exists())
        self.assertEqual(entry.name, "notes.txt")
        self.assertEqual(entry.files_path, self.trash.files_dir / "notes.txt")
        self.assertEqual(entry.files_path.read_text(encoding="utf-8"), "hello")
        self.assertEqual(entry.info_path, self.trash.info_dir / "notes.txt.trashinfo")
        self.assertEqual(
            entry.info_path.read_text(encoding="utf-8"),
            TrashInfo.new(src, dt).to_text(),
        )

    def test_trash_name_collision_gets_suffix(self) -> None:
        a = self._make_file("a/notes.txt")
        b = self._make_file("b/notes.txt")
        c = self._make_file("c/notes.txt")

        names = [self.trash.trash(p).name for p in (a, b, c)]

        self.assertEqual(names, ["notes.txt", "notes_2.txt", "notes_3.txt"])

    def test_trash_skips_name_with_leftover_record(self) -> None:
        self.trash.ensure()
        leftover = TrashInfo.new("/elsewhere/notes.txt", datetime(2020, 1, 1))
        leftover.save("notes.txt.trashinfo", self.trash.info_path)

        entry = self.trash.trash(self._make_file("notes.txt"))

        self.assertEqual(entry.name, "notes_2.txt")
        kept = TrashInfo.parse_from_path(self.trash.info_dir / "notes.txt.trashinfo")
        self.assertEqual(kept, leftover)

    def test_trash_directory(self) -> None:
        self._make_file("proj/src/main.py")
        entry = self.trash.trash(self.home / "proj")
        self.assertTrue((entry.files_path / "src" / "main.py").is_file())

    def test_trash_missing_path(self) -> None:
        with self.assertRaises(MoveError):
            self.trash.trash(self.home / "missing")
        self.assertEqual(self.trash.list_entries(), [])

    def test_trash_root_has_no_name(self) -> None:
        with self.assertRaises(InvalidNameError):
            self.trash.trash("/")

    def test_list_entries_sorted_oldest_first(self) -> None:
        late = self._make_file("late.txt")
        early = self._make_file("early.txt")
        self.trash.trash(late, deletion_date=datetime(2024, 6, 1))
        self.trash.trash(early, deletion_date=datetime(2024, 1, 1))

        names = [e.name for e in self.trash.list_entries()]

        self.assertEqual(names, ["early.txt", "late.txt"])

    def test_list_entries_skips_malformed_record(self) -> None:
        self.trash.trash(self._make_file("ok.txt"))
        (self.trash.info_dir / "broken.trashinfo").write_text("garbage", encoding="utf-8")
        (self.trash.info_dir / "README").write_text("not a record", encoding="utf-8")

        with self.assertLogs("trashmgr.local.trash_dir", level="WARNING") as logs:
            entries = self.trash.list_entries()

        self.assertEqual([e.name for e in entries], ["ok.txt"])
        self.assertEqual(len(logs.records), 1)
        self.assertIn("broken.trashinfo", logs.output[0])

    def test_list_entries_without_trash_dir(self) -> None:
        self.assertEqual(self.trash.list_entries(), [])

    def test_get_unknown_name(self) -> None:
        with self.assertRaises(ReadError):
            self.trash.get("nope")

    def test_restore_round_trip(self) -> None:
        src = self._make_file("docs/report.txt", "report")
        entry = self.trash.trash(src)
        (self.home / "docs").rmdir()

        restored = self.trash.restore(entry.name)

        self.assertEqual(restored, src)
        self.assertEqual(src.read_text(encoding="utf-8"), "report")
        self.assertFalse(entry.info_path.exists())
        self.assertFalse(entry.files_path.exists())

    def test_restore_conflict(self) -> None:
        src = self._make_file("notes.txt", "old")
        entry = self.trash.trash(src)
        src.write_text("new", encoding="utf-8")

        with self.assertRaises(RestoreConflictError):
            self.trash.restore(entry)
        self.assertEqual(src.read_text(encoding="utf-8"), "new")
        self.assertTrue(entry.info_path.exists())

        self.trash.restore(entry, overwrite=True)
        self.assertEqual(src.read_text(encoding="utf-8"), "old")

    def test_restore_missing_payload(self) -> None:
        entry = self.trash.trash(self._make_file("notes.txt"))
        entry.files_path.unlink()
        with self.assertRaises(MoveError):
            self.trash.restore(entry)

    def test_restore_undecodable_path(self) -> None:
        self.trash.ensure()
        bad = TrashInfo(percent_path="%2Ftmp%2F%FF", deletion_date=datetime(2024, 1, 1))
        bad.save("bad.trashinfo", self.trash.info_path)
        with self.assertRaises(PathDecodingError):
            self.trash.restore("bad")

    def test_remove(self) -> None:
        self._make_file("proj/a.txt")
        entry = self.trash.trash(self.home / "proj")

        self.trash.remove(entry)

        self.assertFalse(entry.files_path.exists())
        self.assertFalse(entry.info_path.exists())
        self.assertEqual(self.trash.list_entries(), [])


if __name__ == "__main__":
    unittest.main()
