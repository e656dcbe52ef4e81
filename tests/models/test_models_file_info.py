import unittest
from datetime import datetime, timezone

from drivetransfer.models import DriveFile, PermissionInfo


class TestDriveFile(unittest.TestCase):
    def test_drive_file_required_fields(self) -> None:
        info = DriveFile(file_id="F1", name="n")
        self.assertEqual(info.mime_type, "")
        self.assertEqual(info.owner_emails, [])
        self.assertIsNone(info.owner_email)
        self.assertIsNone(info.modified_time)
        self.assertIsNone(info.web_view_link)

    def test_owner_email_is_first_owner(self) -> None:
        dt = datetime(2025, 1, 1, tzinfo=timezone.utc)
        info = DriveFile(
            file_id="F1",
            name="doc",
            mime_type="application/vnd.google-apps.document",
            owner_emails=["alice@example.com", "bob@example.com"],
            modified_time=dt,
        )
        self.assertEqual(info.owner_email, "alice@example.com")
        self.assertEqual(info.modified_time, dt)


class TestPermissionInfo(unittest.TestCase):
    def test_permission_defaults(self) -> None:
        p = PermissionInfo(permission_id="P1", role="writer")
        self.assertIsNone(p.email_address)
        self.assertFalse(p.pending_owner)


if __name__ == "__main__":
    unittest.main()
