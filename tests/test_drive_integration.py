import os
import unittest

from drivedupes import DuplicateFileFinder, FinderConfig, GoogleDriveBackend, TreeEnumerator


class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Read-only integration test against a real Google Drive.

    Required env vars:
        - DRIVEDUPES_CLIENT_SECRETS: path to OAuth client secrets json
        - DRIVEDUPES_TOKEN_FILE: path to token json (created/updated)
        - DRIVEDUPES_TEST_ROOT_ID: Drive folder ID to scan (kept small)

    Skipped when any of them is missing.
    """

    @classmethod
    def setUpClass(cls) -> None:
        required = ("DRIVEDUPES_CLIENT_SECRETS", "DRIVEDUPES_TOKEN_FILE", "DRIVEDUPES_TEST_ROOT_ID")
        missing = [name for name in required if not os.environ.get(name, "").strip()]
        if missing:
            raise unittest.SkipTest(f"Missing env vars: {', '.join(missing)}")

        cls.root_id = os.environ["DRIVEDUPES_TEST_ROOT_ID"].strip()
        cls.config = FinderConfig.from_env(root_folder_ids=(cls.root_id,))

    def test_enumerate_test_root(self) -> None:
        backend = GoogleDriveBackend(self.config.auth_info)
        files = TreeEnumerator(backend, root_folder_ids=[self.root_id]).get_files()

        for record in files:
            self.assertIsNotNone(record.file_id)
            self.assertGreaterEqual(record.size, 0)

    def test_find_duplicates_smoke(self) -> None:
        groups = DuplicateFileFinder.from_config(self.config).get_duplicate_files()
        for group in groups:
            self.assertGreaterEqual(len(group), 2)
            self.assertEqual(len({f.size for f in group}), 1)


if __name__ == "__main__":
    unittest.main()
