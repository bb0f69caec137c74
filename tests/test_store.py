"""Tests for the output store."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from species_marker.errors import FilesystemError
from species_marker.store import OutputStore

if TYPE_CHECKING:
    from pathlib import Path


class TestOutputStore:
    def test_ensure_creates_directory(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path / "files")
        store.ensure()
        assert (tmp_path / "files").is_dir()
        assert stat.S_IMODE((tmp_path / "files").stat().st_mode) & 0o077 == 0

    def test_ensure_is_idempotent(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        store.ensure()
        store.ensure()

    def test_ensure_fails_on_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "files"
        blocker.write_text("x")
        with pytest.raises(FilesystemError, match="files directory"):
            OutputStore(blocker).ensure()

    def test_filenames(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        assert store.silhouette_path("bufo bufo", "abc") == tmp_path / "bufo_bufo_abc.svg"
        assert store.marker_path("bufo bufo") == tmp_path / "bufo_bufo_marker.svg"

    def test_write_sets_owner_only(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        path = store.write(store.marker_path("bufo"), b"<svg/>")
        assert path.read_bytes() == b"<svg/>"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_rejects_escaping_names(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path / "files")
        with pytest.raises(FilesystemError, match="escapes"):
            store.marker_path("../../etc/bufo")

    def test_file_created_with_owner_only_mode(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        path = store.marker_path("bufo")

        with patch("species_marker.store.os.open", wraps=os.open) as mock_open:
            store.write(path, b"<svg/>")

        mock_open.assert_called_once()
        assert mock_open.call_args.args[2] == 0o600
        flags = mock_open.call_args.args[1]
        assert flags & os.O_CREAT
        assert flags & os.O_TRUNC

    def test_permissive_umask_still_owner_only(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        old_umask = os.umask(0)
        try:
            path = store.write(store.marker_path("bufo"), b"<svg/>")
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_existing_file_tightened_and_truncated(self, tmp_path: Path) -> None:
        store = OutputStore(tmp_path)
        path = store.marker_path("bufo")
        path.write_bytes(b"a much longer previous marker")
        path.chmod(0o644)

        store.write(path, b"<svg/>")

        assert path.read_bytes() == b"<svg/>"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
