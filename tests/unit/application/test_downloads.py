"""Unit tests – Blob and BlobSaver implementations."""
from __future__ import annotations

import asyncio
import threading
from pathlib import Path

import pytest

from search_export.application.downloads import (
    CSV_CONTENT_TYPE,
    Blob,
    BlobSaver,
    DirectoryBlobSaver,
    InMemoryBlobSaver,
    sanitize_filename,
    select_blob_saver,
)
from search_export.config import ExportSettings


class TestBlob:
    def test_from_text_is_utf8(self) -> None:
        blob = Blob.from_text("naïve")
        assert blob.data == "naïve".encode()
        assert blob.type == CSV_CONTENT_TYPE
        assert blob.size == 6


class TestSanitizeFilename:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("report.csv", "report.csv"),
            ("a/b\\c.csv", "a_b_c.csv"),
            ('what?"*.csv', "what___.csv"),
            ("../../etc/passwd", "_.._etc_passwd"),
            ("", "download"),
            ("...", "download"),
        ],
    )
    def test_sanitize(self, name: str, expected: str) -> None:
        assert sanitize_filename(name) == expected


class TestDirectoryBlobSaver:
    def test_writes_file(self, tmp_path: Path) -> None:
        saver = DirectoryBlobSaver(tmp_path / "downloads")
        location = asyncio.run(saver.save_blob(Blob.from_text("a,b\n"), "report.csv"))
        assert Path(location) == tmp_path / "downloads" / "report.csv"
        assert Path(location).read_text(encoding="utf-8") == "a,b\n"

    def test_name_clash_gets_suffix(self, tmp_path: Path) -> None:
        saver = DirectoryBlobSaver(tmp_path)

        async def run() -> list[str]:
            return [await saver.save_blob(Blob.from_text(str(i)), "report.csv") for i in range(3)]

        locations = [Path(p).name for p in asyncio.run(run())]
        assert locations == ["report.csv", "report (1).csv", "report (2).csv"]
        assert (tmp_path / "report (2).csv").read_text() == "2"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        asyncio.run(DirectoryBlobSaver(tmp_path).save_blob(Blob(b"x"), "a.xlsx"))
        assert [p.name for p in tmp_path.iterdir()] == ["a.xlsx"]

    def test_unsafe_name_stays_inside_directory(self, tmp_path: Path) -> None:
        location = asyncio.run(DirectoryBlobSaver(tmp_path).save_blob(Blob(b"x"), "../escape.csv"))
        assert Path(location).parent == tmp_path

    def test_satisfies_port(self, tmp_path: Path) -> None:
        assert isinstance(DirectoryBlobSaver(tmp_path), BlobSaver)

    def test_write_runs_off_the_event_loop_thread(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        saver = DirectoryBlobSaver(tmp_path)
        write_threads: list[int] = []
        original = saver._save_sync

        def recording_save(blob: Blob, filename: str) -> str:
            write_threads.append(threading.get_ident())
            return original(blob, filename)

        monkeypatch.setattr(saver, "_save_sync", recording_save)

        async def run() -> int:
            await saver.save_blob(Blob(b"x"), "a.csv")
            return threading.get_ident()

        loop_thread = asyncio.run(run())
        assert write_threads and write_threads[0] != loop_thread
        assert (tmp_path / "a.csv").read_bytes() == b"x"


class TestInMemoryBlobSaver:
    def test_records_blobs(self) -> None:
        saver = InMemoryBlobSaver()
        location = asyncio.run(saver.save_blob(Blob(b"1"), "a.csv"))
        assert location == "memory://a.csv"
        assert saver.filenames == ["a.csv"]
        assert saver.get("a.csv") == Blob(b"1")
        assert saver.get("missing.csv") is None

    def test_get_returns_latest(self) -> None:
        saver = InMemoryBlobSaver()

        async def run() -> None:
            await saver.save_blob(Blob(b"1"), "a.csv")
            await saver.save_blob(Blob(b"2"), "a.csv")

        asyncio.run(run())
        assert saver.get("a.csv") == Blob(b"2")

    def test_reset(self) -> None:
        saver = InMemoryBlobSaver()
        asyncio.run(saver.save_blob(Blob(b"1"), "a.csv"))
        saver.reset()
        assert saver.saved == []


class TestSelectBlobSaver:
    def test_memory(self) -> None:
        assert isinstance(select_blob_saver(ExportSettings(blob_saver="memory")), InMemoryBlobSaver)

    def test_directory(self, tmp_path: Path) -> None:
        saver = select_blob_saver(ExportSettings(download_dir=str(tmp_path)))
        assert isinstance(saver, DirectoryBlobSaver)
        assert saver.directory == tmp_path
