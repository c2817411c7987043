"""Unit tests for garnet_launcher.install."""

import logging
import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from garnet_launcher.errors import InstallError
from garnet_launcher.install import install_artifact


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "event_generator"
    path.write_bytes(b"\x7fELF fake binary contents")
    return path


class TestInstallArtifact:
    def test_returns_destination_path(self, source, tmp_path):
        dest_dir = tmp_path / "bin"
        assert install_artifact(source, dest_dir) == dest_dir / "event_generator"

    def test_copies_contents(self, source, tmp_path):
        dest = install_artifact(source, tmp_path / "bin")
        assert dest.read_bytes() == source.read_bytes()

    def test_sets_executable_mode(self, source, tmp_path):
        dest = install_artifact(source, tmp_path / "bin")
        assert stat.S_IMODE(dest.stat().st_mode) == 0o755

    def test_mode_survives_restrictive_umask(self, source, tmp_path):
        old = os.umask(0o077)
        try:
            dest = install_artifact(source, tmp_path / "bin")
        finally:
            os.umask(old)
        assert stat.S_IMODE(dest.stat().st_mode) == 0o755

    def test_creates_missing_parents(self, source, tmp_path):
        dest_dir = tmp_path / "a" / "b" / "c"
        dest = install_artifact(source, dest_dir)
        assert dest_dir.is_dir()
        assert dest.exists()

    def test_existing_directory_is_fine(self, source, tmp_path):
        dest_dir = tmp_path / "bin"
        dest_dir.mkdir()
        assert install_artifact(source, dest_dir).exists()

    def test_install_twice_matches_source(self, source, tmp_path):
        dest_dir = tmp_path / "bin"
        install_artifact(source, dest_dir)
        dest = install_artifact(source, dest_dir)
        assert dest.read_bytes() == source.read_bytes()

    def test_overwrites_previous_install(self, source, tmp_path):
        dest_dir = tmp_path / "bin"
        dest_dir.mkdir()
        (dest_dir / "event_generator").write_bytes(b"old version that is much longer than the new one")
        dest = install_artifact(source, dest_dir)
        assert dest.read_bytes() == source.read_bytes()


class TestInstallErrors:
    def test_missing_source(self, tmp_path):
        with pytest.raises(InstallError, match="failed to read source file"):
            install_artifact(tmp_path / "missing", tmp_path / "bin")

    def test_directory_creation_failure(self, source, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(InstallError, match="failed to create directory"):
            install_artifact(source, blocker / "bin")

    def test_write_failure_is_wrapped(self, source, tmp_path):
        with patch("garnet_launcher.install.os.open", side_effect=PermissionError("denied")):
            with pytest.raises(InstallError, match="failed to write destination file") as exc_info:
                install_artifact(source, tmp_path / "bin")
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_failed_removal_is_logged_not_raised(self, source, tmp_path, caplog):
        dest_dir = tmp_path / "bin"
        dest_dir.mkdir()
        (dest_dir / "event_generator").write_bytes(b"stale")
        with patch.object(Path, "unlink", side_effect=PermissionError("busy")):
            with caplog.at_level(logging.WARNING):
                dest = install_artifact(source, dest_dir)
        assert "Could not remove existing" in caplog.text
        assert dest.read_bytes() == source.read_bytes()
