import unittest

from drivedupes.models import EntryKind, FolderRef, ListingEntry


class TestListingEntry(unittest.TestCase):
    def test_kind_properties(self) -> None:
        file_entry = ListingEntry(entry_id="F1", kind=EntryKind.FILE, size=1)
        self.assertTrue(file_entry.is_file)
        self.assertFalse(file_entry.is_folder)
        self.assertFalse(file_entry.is_empty_folder)

        other = ListingEntry(entry_id="D1", kind=EntryKind.OTHER)
        self.assertFalse(other.is_file)
        self.assertFalse(other.is_folder)

    def test_empty_folder_needs_reported_zero(self) -> None:
        unknown = ListingEntry(entry_id="P1", kind=EntryKind.FOLDER)
        self.assertFalse(unknown.is_empty_folder)

        empty = ListingEntry(entry_id="P2", kind=EntryKind.FOLDER, child_count=0)
        self.assertTrue(empty.is_empty_folder)

        full = ListingEntry(entry_id="P3", kind=EntryKind.FOLDER, child_count=4)
        self.assertFalse(full.is_empty_folder)


class TestFolderRef(unittest.TestCase):
    def test_default_path(self) -> None:
        ref = FolderRef(folder_id="root", container_id="C1")
        self.assertEqual(ref.path, "/")


if __name__ == "__main__":
    unittest.main()
