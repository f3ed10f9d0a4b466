"""Application downloads – Blob, BlobSaver port and implementations."""
from search_export.application.downloads.blob import (
    CSV_CONTENT_TYPE,
    XLSX_CONTENT_TYPE,
    Blob,
    BlobSaver,
    DirectoryBlobSaver,
    InMemoryBlobSaver,
    sanitize_filename,
    select_blob_saver,
)

__all__ = [
    "CSV_CONTENT_TYPE",
    "XLSX_CONTENT_TYPE",
    "Blob",
    "BlobSaver",
    "DirectoryBlobSaver",
    "InMemoryBlobSaver",
    "sanitize_filename",
    "select_blob_saver",
]
