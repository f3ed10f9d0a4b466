"""Application downloads – Blob and the BlobSaver port."""
from __future__ import annotations

import asyncio
import contextlib
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from search_export.observability.logging import get_logger

if TYPE_CHECKING:
    from search_export.config import ExportSettings

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

logger = get_logger(__name__)

CSV_CONTENT_TYPE = "text/csv;charset=utf-8;"
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


@dataclass(frozen=True)
class Blob:
    """Immutable file content plus its MIME type."""

    data: bytes
    type: str = "application/octet-stream"

    @classmethod
    def from_text(cls, text: str, type: str = CSV_CONTENT_TYPE) -> "Blob":  # noqa: A002
        return cls(text.encode("utf-8"), type)

    @property
    def size(self) -> int:
        return len(self.data)


@runtime_checkable
class BlobSaver(Protocol):
    """Port: hand a finished download to the user; returns where it ended up."""

    async def save_blob(self, blob: Blob, filename: str) -> str: ...


def sanitize_filename(filename: str, default: str = "download") -> str:
    """Strip path separators and characters most filesystems reject."""
    cleaned = _UNSAFE_CHARS.sub("_", filename).strip().lstrip(".")
    return cleaned or default


class DirectoryBlobSaver:
    """Writes downloads into a directory, like a browser's download folder.

    The content is written to a hidden temp file and renamed into place, so a
    reader never observes a partial file. Name clashes get a ``" (n)"`` suffix.
    """

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    async def save_blob(self, blob: Blob, filename: str) -> str:
        """Write *blob* on a worker thread so the event loop keeps running."""
        target = await asyncio.to_thread(self._save_sync, blob, filename)
        logger.info("download.saved", path=target, size=blob.size, content_type=blob.type)
        return target

    def _save_sync(self, blob: Blob, filename: str) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._unique_path(sanitize_filename(filename))
        fd, tmp_path = tempfile.mkstemp(dir=self._directory, prefix=".download-", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(blob.data)
            os.replace(tmp_path, target)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_path)
            raise
        return str(target)

    def _unique_path(self, filename: str) -> Path:
        candidate = self._directory / filename
        stem, suffix = candidate.stem, candidate.suffix
        n = 1
        while candidate.exists():
            candidate = self._directory / f"{stem} ({n}){suffix}"
            n += 1
        return candidate


class InMemoryBlobSaver:
    """Fake BlobSaver that keeps saved blobs keyed by filename."""

    def __init__(self) -> None:
        self.saved: list[tuple[str, Blob]] = []

    async def save_blob(self, blob: Blob, filename: str) -> str:
        self.saved.append((filename, blob))
        return f"memory://{filename}"

    def get(self, filename: str) -> Blob | None:
        for name, blob in reversed(self.saved):
            if name == filename:
                return blob
        return None

    @property
    def filenames(self) -> list[str]:
        return [name for name, _ in self.saved]

    def reset(self) -> None:
        self.saved.clear()


def select_blob_saver(settings: "ExportSettings") -> BlobSaver:
    """Pick the BlobSaver for this environment once, at startup."""
    if settings.blob_saver == "memory":
        return InMemoryBlobSaver()
    return DirectoryBlobSaver(settings.download_dir)
