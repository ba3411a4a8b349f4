import unittest

from drivedupes.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid(self) -> None:
        info = AuthInfo(
            client_secrets_file="/tmp/client_secrets.json",
            token_file="/tmp/token.json",
        )
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_blank_path(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="x", token_file="  ")

    def test_auth_info_non_string(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file=None, token_file="t")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
