from __future__ import annotations

# Google-native editor types offered for ownership transfer, with display labels.
GOOGLE_DOCUMENT_TYPES: dict[str, str] = {
    "application/vnd.google-apps.document": "Google Doc",
    "application/vnd.google-apps.spreadsheet": "Google Sheet",
    "application/vnd.google-apps.presentation": "Google Slides",
    "application/vnd.google-apps.form": "Google Form",
    "application/vnd.google-apps.drawing": "Google Drawing",
}

DEFAULT_TYPE_LABEL: str = "Google File"


def is_google_document(mime_type: str) -> bool:
    """Returns True if the MIME type is one of GOOGLE_DOCUMENT_TYPES."""
    return mime_type in GOOGLE_DOCUMENT_TYPES


def file_type_label(mime_type: str) -> str:
    """
    Human-readable label for a Google-native MIME type.

    Unknown types (including other 'application/vnd.google-apps.*' types)
    fall back to DEFAULT_TYPE_LABEL.
    """
    return GOOGLE_DOCUMENT_TYPES.get(mime_type, DEFAULT_TYPE_LABEL)
