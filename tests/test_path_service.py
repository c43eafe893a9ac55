"""Tests for unique names, empty file creation and selection text."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.errors import FileSystemError
from core.services.path_service import (
    create_empty_file,
    relative_path,
    serialize_selection,
    unique_filename,
    working_directory_for,
)


class TestUniqueFilename:
    def test_base_name_when_free(self, tmp_path):
        assert unique_filename(tmp_path, "untitled") == "untitled"

    def test_first_collision_gets_counter_one(self, tmp_path):
        (tmp_path / "untitled").touch()
        assert unique_filename(tmp_path, "untitled") == "untitled 1"

    def test_counts_up_without_gaps(self, tmp_path):
        (tmp_path / "untitled").touch()
        (tmp_path / "untitled 1").touch()
        (tmp_path / "untitled 2").touch()
        assert unique_filename(tmp_path, "untitled") == "untitled 3"

    def test_free_gap_is_not_skipped(self, tmp_path):
        (tmp_path / "untitled").touch()
        (tmp_path / "untitled 2").touch()
        assert unique_filename(tmp_path, "untitled") == "untitled 1"

    def test_directory_counts_as_taken(self, tmp_path):
        (tmp_path / "untitled").mkdir()
        assert unique_filename(tmp_path, "untitled") == "untitled 1"

    def test_extension_applies_to_every_candidate(self, tmp_path):
        assert unique_filename(tmp_path, "untitled", ".txt") == "untitled.txt"
        (tmp_path / "untitled.txt").touch()
        assert unique_filename(tmp_path, "untitled", ".txt") == "untitled 1.txt"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_dangling_symlink_counts_as_taken(self, tmp_path):
        os.symlink(tmp_path / "nowhere", tmp_path / "untitled")
        assert unique_filename(tmp_path, "untitled") == "untitled 1"


class TestCreateEmptyFile:
    def test_creates_zero_byte_untitled(self, target_dir):
        path = create_empty_file(target_dir)
        assert path == target_dir / "untitled"
        assert path.is_file()
        assert path.stat().st_size == 0

    def test_second_call_never_overwrites(self, target_dir):
        first = create_empty_file(target_dir)
        first.write_text("keep me")
        second = create_empty_file(target_dir)
        assert second == target_dir / "untitled 1"
        assert first.read_text() == "keep me"

    def test_custom_base_and_extension(self, target_dir):
        path = create_empty_file(target_dir, "notes", ".md")
        assert path.name == "notes.md"

    def test_missing_directory_raises_with_path(self, tmp_path):
        missing = tmp_path / "gone"
        with pytest.raises(FileSystemError) as excinfo:
            create_empty_file(missing)
        assert excinfo.value.path == str(missing / "untitled")
        assert isinstance(excinfo.value.cause, OSError)
        assert str(missing / "untitled") in str(excinfo.value)

    def test_logs_created_path(self, target_dir, log_messages):
        path = create_empty_file(target_dir)
        assert any(str(path) in m for m in log_messages)


class TestWorkingDirectory:
    def test_directory_is_its_own_working_directory(self, target_dir):
        assert working_directory_for(target_dir) == target_dir

    def test_file_uses_parent(self, target_dir):
        file_path = target_dir / "readme.txt"
        file_path.touch()
        assert working_directory_for(file_path) == target_dir


class TestSerializeSelection:
    def test_relative_to_base(self):
        assert serialize_selection([Path("/a/b"), Path("/a/c")], base="/a") == "b\nc"

    def test_no_trailing_newline(self):
        text = serialize_selection(["/a/b"], base="/a")
        assert text == "b"

    def test_without_base_keeps_paths(self):
        assert serialize_selection(["/a/b", "/x/y z"]) == "/a/b\n/x/y z"

    def test_empty_selection_is_none(self):
        assert serialize_selection([]) is None

    def test_preserves_order(self):
        assert serialize_selection(["/a/c", "/a/b"], base="/a") == "c\nb"

    def test_relative_path_outside_base(self):
        assert relative_path("/a/b", "/a/c") == os.path.join("..", "b")
