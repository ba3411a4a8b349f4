import unittest

from drivedupes.errors.exceptions import (
    ApiError,
    AuthError,
    BackendError,
    DataIntegrityError,
    DriveDupesError,
    HttpErrorInfo,
    InvalidArgumentError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = DriveDupesError("msg", details={"folder_id": "F1"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["folder_id"], "F1")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        err = DataIntegrityError("missing size")
        self.assertEqual(err.details, {})
        self.assertIsNone(err.cause)

    def test_taxonomy(self) -> None:
        for cls in (AuthError, PermissionError, NotFoundError, RateLimitError,
                    QuotaExceededError, ApiError):
            self.assertTrue(issubclass(cls, BackendError), cls)
        self.assertFalse(issubclass(DataIntegrityError, BackendError))
        self.assertFalse(issubclass(InvalidArgumentError, BackendError))
        self.assertTrue(issubclass(DataIntegrityError, DriveDupesError))

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)
        self.assertEqual(str(err), "not found")
        self.assertEqual(err.details["status_code"], 404)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_variants(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="userRateLimitExceeded", message="slow")
        )
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="dailyLimitExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_other_is_api_error(self) -> None:
        for status in (400, 418, 500, 503):
            err = map_http_error(HttpErrorInfo(status_code=status))
            self.assertIsInstance(err, ApiError)
            self.assertEqual(str(err), f"HTTP error {status}")

    def test_map_http_error_merges_details(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=500, reason="backendError", details={"domain": "global"})
        )
        self.assertEqual(err.details["domain"], "global")
        self.assertEqual(err.details["reason"], "backendError")


if __name__ == "__main__":
    unittest.main()
