from .mime import (
    DEFAULT_TYPE_LABEL,
    GOOGLE_DOCUMENT_TYPES,
    file_type_label,
    is_google_document,
)
from .time import (
    EPOCH_UTC,
    normalize_dt,
    parse_rfc3339,
    parse_rfc3339_or_none,
    to_display_date,
)

__all__ = [
    "DEFAULT_TYPE_LABEL",
    "GOOGLE_DOCUMENT_TYPES",
    "file_type_label",
    "is_google_document",
    "EPOCH_UTC",
    "parse_rfc3339",
    "parse_rfc3339_or_none",
    "normalize_dt",
    "to_display_date",
]
