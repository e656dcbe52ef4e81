import unittest

from drivetransfer.errors.exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    DriveTransferError,
    HttpErrorInfo,
    InvalidArgumentError,
    NotFoundError,
    OwnershipError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = DriveTransferError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_fresh_dict(self) -> None:
        a = OwnershipError("a")
        b = OwnershipError("b")
        a.details["x"] = 1
        self.assertEqual(b.details, {})
        self.assertIsInstance(a, DriveTransferError)

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)
        self.assertEqual(str(err), "not found")
        self.assertEqual(err.details["status_code"], 404)

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=412, message="conflict"))
        self.assertIsInstance(err, ConflictError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)

    def test_map_http_error_403_quota_vs_permission(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="quotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientFilePermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_without_message_uses_status(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=503))
        self.assertIsInstance(err, ApiError)
        self.assertEqual(str(err), "HTTP error 503")

    def test_map_http_error_keeps_cause(self) -> None:
        cause = ValueError("raw")
        err = map_http_error(HttpErrorInfo(status_code=418, message="teapot"), cause=cause)
        self.assertIsInstance(err, ApiError)
        self.assertIs(err.cause, cause)


if __name__ == "__main__":
    unittest.main()
