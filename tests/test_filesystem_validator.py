"""
Unit tests for FileSystemValidator.
"""

import os
import pytest
from unittest.mock import patch

from config.filesystem_validator import FileSystemValidator
from config.error_handling import FileSystemError


class TestFileSystemValidator:
    """Test cases for FileSystemValidator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = FileSystemValidator()

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "a" / "b"

        path = self.validator.ensure_directory(str(target))

        assert target.is_dir()
        assert path == target

    def test_trailing_separator_accepted(self, tmp_path):
        target = tmp_path / "videos"

        self.validator.ensure_directory(str(target) + os.sep)

        assert target.is_dir()

    def test_existing_directory_is_left_alone(self, tmp_path):
        marker = tmp_path / "keep.txt"
        marker.write_text("x")

        self.validator.ensure_directory(str(tmp_path))

        assert marker.read_text() == "x"

    def test_empty_path_is_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        path = self.validator.ensure_directory("")

        assert path.resolve() == tmp_path.resolve()

    def test_file_in_the_way(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory")

        with pytest.raises(FileSystemError) as exc_info:
            self.validator.ensure_directory(str(blocker))

        assert "not a directory" in str(exc_info.value)

    def test_os_error_wrapped(self, tmp_path):
        with patch('pathlib.Path.mkdir', side_effect=PermissionError("denied")):
            with pytest.raises(FileSystemError) as exc_info:
                self.validator.ensure_directory(str(tmp_path / "x"))

        assert isinstance(exc_info.value.original_exception, PermissionError)
        assert "Cannot create directory" in exc_info.value.message

    def test_unwritable_directory_logs_warning(self, tmp_path):
        with patch('config.filesystem_validator.os.access', return_value=False):
            with patch.object(self.validator.logger, 'warning') as mock_warning:
                self.validator.ensure_directory(str(tmp_path))

        mock_warning.assert_called_once()
