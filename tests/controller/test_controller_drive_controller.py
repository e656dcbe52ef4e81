import json
import unittest
from datetime import datetime, timezone
from unittest.mock import Mock

from drivetransfer.controller.drive_controller import (
    GoogleDriveController,
    _build_documents_query,
    _file_dict_to_drive_file,
)
from drivetransfer.errors import (
    ApiError,
    NetworkError,
    NotFoundError,
    PermissionError,
    RateLimitError,
)


def _http_error(status: int, reason: str, body: dict | None = None):
    from googleapiclient.errors import HttpError

    resp = Mock()
    resp.status = status
    resp.reason = reason
    content = json.dumps(body).encode("utf-8") if body is not None else b"{}"
    return HttpError(resp=resp, content=content)


class TestDriveControllerHelpers(unittest.TestCase):
    def test_file_dict_to_drive_file_parses_owners_and_times(self) -> None:
        data = {
            "id": "F1",
            "name": "Plan",
            "mimeType": "application/vnd.google-apps.document",
            "owners": [{"emailAddress": "alice@example.com", "displayName": "Alice"}],
            "webViewLink": "https://docs.google.com/document/d/F1/edit",
            "createdTime": "2025-01-01T00:00:00.000Z",
            "modifiedTime": "2025-02-01T10:00:00.000Z",
        }
        info = _file_dict_to_drive_file(data)
        self.assertEqual(info.file_id, "F1")
        self.assertEqual(info.owner_email, "alice@example.com")
        self.assertEqual(info.web_view_link, data["webViewLink"])
        self.assertEqual(info.created_time, datetime(2025, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(
            info.modified_time, datetime(2025, 2, 1, 10, tzinfo=timezone.utc)
        )

    def test_file_dict_tolerates_missing_fields(self) -> None:
        info = _file_dict_to_drive_file({"id": "F1", "modifiedTime": "garbage"})
        self.assertEqual(info.name, "")
        self.assertEqual(info.owner_emails, [])
        self.assertIsNone(info.modified_time)

    def test_documents_query_lists_native_types(self) -> None:
        q = _build_documents_query(None)
        self.assertIn("mimeType='application/vnd.google-apps.document'", q)
        self.assertIn("mimeType='application/vnd.google-apps.drawing'", q)
        self.assertIn("trashed=false", q)
        self.assertNotIn("name contains", q)

    def test_documents_query_escapes_search(self) -> None:
        q = _build_documents_query("Bob's \\ notes")
        self.assertTrue(q.endswith("name contains 'Bob\\'s \\\\ notes'"))


class TestDriveControllerMocked(unittest.TestCase):
    def _controller(self):
        service = Mock()
        return GoogleDriveController.from_service(service), service

    def test_list_documents_sends_ordering_and_page_size(self) -> None:
        controller, service = self._controller()
        service.files.return_value.list.return_value.execute.return_value = {
            "files": [
                {"id": "F1", "name": "a", "mimeType": "application/vnd.google-apps.document"},
            ]
        }

        files = controller.list_documents(search="report", page_size=50)

        kwargs = service.files.return_value.list.call_args.kwargs
        self.assertEqual(kwargs["orderBy"], "modifiedTime desc")
        self.assertEqual(kwargs["pageSize"], 50)
        self.assertIn("name contains 'report'", kwargs["q"])
        self.assertEqual([f.file_id for f in files], ["F1"])

    def test_get_user_email(self) -> None:
        controller, service = self._controller()
        service.about.return_value.get.return_value.execute.return_value = {
            "user": {"emailAddress": "alice@example.com"}
        }
        self.assertEqual(controller.get_user_email(), "alice@example.com")
        self.assertIn("user", service.about.return_value.get.call_args.kwargs["fields"])

    def test_create_permission_requests_notification(self) -> None:
        controller, service = self._controller()
        perms = service.permissions.return_value
        perms.create.return_value.execute.return_value = {
            "id": "P1",
            "emailAddress": "bob@example.com",
            "role": "writer",
        }

        p = controller.create_permission("F1", "bob@example.com")

        kwargs = perms.create.call_args.kwargs
        self.assertEqual(kwargs["fileId"], "F1")
        self.assertTrue(kwargs["sendNotificationEmail"])
        self.assertEqual(
            kwargs["body"],
            {"type": "user", "role": "writer", "emailAddress": "bob@example.com"},
        )
        self.assertEqual(p.permission_id, "P1")

    def test_list_and_update_permissions(self) -> None:
        controller, service = self._controller()
        perms = service.permissions.return_value
        perms.list.return_value.execute.return_value = {
            "permissions": [
                {"id": "P0", "emailAddress": "alice@example.com", "role": "owner"},
                {"id": "P1", "emailAddress": "bob@example.com", "role": "writer"},
            ]
        }
        perms.update.return_value.execute.return_value = {
            "id": "P1",
            "role": "writer",
            "pendingOwner": True,
        }

        listed = controller.list_permissions("F1")
        updated = controller.update_permission("F1", "P1", role="writer", pending_owner=True)

        self.assertEqual([p.role for p in listed], ["owner", "writer"])
        self.assertEqual(
            perms.update.call_args.kwargs["body"],
            {"role": "writer", "pendingOwner": True},
        )
        self.assertEqual(perms.update.call_args.kwargs["permissionId"], "P1")
        self.assertTrue(updated.pending_owner)

    def test_get_maps_http_404_to_not_found(self) -> None:
        controller, service = self._controller()
        service.files.return_value.get.return_value.execute.side_effect = _http_error(
            404, "Not Found"
        )
        with self.assertRaises(NotFoundError):
            controller.get("X")

    def test_http_error_message_comes_from_payload(self) -> None:
        controller, service = self._controller()
        body = {
            "error": {
                "message": "The user does not have sufficient permissions for this file.",
                "errors": [{"domain": "global", "reason": "insufficientFilePermissions"}],
            }
        }
        service.permissions.return_value.create.return_value.execute.side_effect = (
            _http_error(403, "Forbidden", body)
        )
        with self.assertRaises(PermissionError) as ctx:
            controller.create_permission("F1", "bob@example.com")
        self.assertIn("sufficient permissions", str(ctx.exception))
        self.assertEqual(ctx.exception.details["reason"], "insufficientFilePermissions")

    def test_429_is_not_retried(self) -> None:
        controller, service = self._controller()
        req = service.files.return_value.get.return_value
        req.execute.side_effect = _http_error(
            429,
            "rateLimitExceeded",
            {"error": {"message": "rate limited", "errors": [{"reason": "rateLimitExceeded"}]}},
        )
        with self.assertRaises(RateLimitError):
            controller.get("X")
        self.assertEqual(req.execute.call_count, 1)

    def test_os_error_maps_to_network_error(self) -> None:
        controller, service = self._controller()
        service.files.return_value.get.return_value.execute.side_effect = (
            ConnectionResetError("reset")
        )
        with self.assertRaises(NetworkError):
            controller.get("X")

    def test_unknown_error_maps_to_api_error(self) -> None:
        controller, service = self._controller()
        service.files.return_value.get.return_value.execute.side_effect = KeyError("x")
        with self.assertRaises(ApiError):
            controller.get("X")


if __name__ == "__main__":
    unittest.main()
