import unittest
from datetime import datetime, timezone
from dataclasses import FrozenInstanceError

from drivedupes.models import EMPTY_HASH, HASH_KEYS, FileRecord


class TestFileRecord(unittest.TestCase):
    def test_required_fields_and_defaults(self) -> None:
        record = FileRecord(file_id="F1", size=10)
        self.assertEqual(record.file_id, "F1")
        self.assertEqual(record.size, 10)
        self.assertIsNone(record.name)
        self.assertIsNone(record.parent_path)
        self.assertIsNone(record.created_time)
        for key in HASH_KEYS:
            self.assertEqual(record.hash_value(key), EMPTY_HASH)

    def test_optional_fields(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        record = FileRecord(
            file_id="F1",
            size=123,
            name="photo.jpg",
            url="https://drive.google.com/file/d/F1/view",
            parent_path="/Photos",
            created_time=dt,
            modified_time=dt,
            hashes={"md5": "abc", "sha1": None},
        )
        self.assertEqual(record.name, "photo.jpg")
        self.assertEqual(record.modified_time, dt)
        self.assertEqual(record.hash_value("md5"), "abc")
        self.assertEqual(record.hash_value("sha1"), EMPTY_HASH)
        self.assertEqual(record.hash_value("crc32"), EMPTY_HASH)

    def test_record_is_immutable(self) -> None:
        record = FileRecord(file_id="F1", size=1, hashes={"md5": "abc"})
        with self.assertRaises(FrozenInstanceError):
            record.size = 2  # type: ignore[misc]
        with self.assertRaises(TypeError):
            record.hashes["md5"] = "changed"  # type: ignore[index]

    def test_hashes_are_copied(self) -> None:
        source = {"md5": "abc"}
        record = FileRecord(file_id="F1", size=1, hashes=source)
        source["md5"] = "changed"
        self.assertEqual(record.hash_value("md5"), "abc")

    def test_size_validation(self) -> None:
        with self.assertRaises(ValueError):
            FileRecord(file_id="F1", size=-1)
        with self.assertRaises(TypeError):
            FileRecord(file_id="F1", size="10")  # type: ignore[arg-type]

    def test_records_are_hashable(self) -> None:
        a = FileRecord(file_id="A", size=1, hashes={"md5": "x"})
        b = FileRecord(file_id="B", size=1, hashes={"md5": "x"})
        self.assertEqual(len({a, b, a}), 2)


if __name__ == "__main__":
    unittest.main()
