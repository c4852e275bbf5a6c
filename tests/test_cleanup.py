"""
Tests for TempFileCleaner.
"""

import os

import pytest

from user_directory_api.app.core.errors import CleanupError
from user_directory_api.app.services.cleanup_service import CleanupResult, TempFileCleaner


def touch(directory, name: str) -> None:
    (directory / name).write_text("x")


class TestDeleteTempFiles:
    """Tests for TempFileCleaner.delete_temp_files."""

    def test_removes_everything_by_default(self, tmp_path):
        for name in ("a.tmp", "b.log", "c"):
            touch(tmp_path, name)

        result = TempFileCleaner(str(tmp_path)).delete_temp_files()

        assert result.removed == ["a.tmp", "b.log", "c"]
        assert result.ok
        assert os.listdir(tmp_path) == []

    def test_pattern_filters(self, tmp_path):
        for name in ("a.tmp", "b.tmp", "keep.log"):
            touch(tmp_path, name)

        result = TempFileCleaner(str(tmp_path)).delete_temp_files("*.tmp")

        assert result.removed == ["a.tmp", "b.tmp"]
        assert sorted(os.listdir(tmp_path)) == ["keep.log"]

    def test_empty_directory_removed(self, tmp_path):
        (tmp_path / "emptydir").mkdir()

        result = TempFileCleaner(str(tmp_path)).delete_temp_files()

        assert result.removed == ["emptydir"]
        assert result.ok
        assert os.listdir(tmp_path) == []

    def test_non_empty_directory_reported_not_removed(self, tmp_path):
        (tmp_path / "subdir").mkdir()
        touch(tmp_path / "subdir", "inner")
        touch(tmp_path, "file.tmp")

        result = TempFileCleaner(str(tmp_path)).delete_temp_files()

        assert result.removed == ["file.tmp"]
        assert [name for name, _ in result.failures] == ["subdir"]
        assert not result.ok
        assert (tmp_path / "subdir").is_dir()

    def test_fail_fast_raises_with_partial_result(self, tmp_path):
        touch(tmp_path, "a.tmp")
        (tmp_path / "b.tmp").mkdir()
        touch(tmp_path / "b.tmp", "inner")
        touch(tmp_path, "c.tmp")

        with pytest.raises(CleanupError) as excinfo:
            TempFileCleaner(str(tmp_path)).delete_temp_files("*.tmp", fail_fast=True)

        result = excinfo.value.result
        assert result.removed == ["a.tmp"]
        assert [name for name, _ in result.failures] == ["b.tmp"]
        assert (tmp_path / "c.tmp").exists()

    def test_missing_directory_raises(self, tmp_path):
        cleaner = TempFileCleaner(str(tmp_path / "missing"))

        with pytest.raises(CleanupError) as excinfo:
            cleaner.delete_temp_files()

        assert excinfo.value.result is None

    def test_nothing_to_clean(self, tmp_path):
        result = TempFileCleaner(str(tmp_path)).delete_temp_files()
        assert result == CleanupResult()

    def test_symlink_removed_not_target(self, tmp_path):
        target = tmp_path / "target"
        target.mkdir()
        workdir = tmp_path / "work"
        workdir.mkdir()
        os.symlink(target, workdir / "link")

        result = TempFileCleaner(str(workdir)).delete_temp_files()

        assert result.removed == ["link"]
        assert target.is_dir()
