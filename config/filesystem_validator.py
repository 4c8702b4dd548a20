"""
File system checks for the output directory.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from config.error_handling import FileSystemError


class FileSystemValidator:
    """Prepares the directory the external tool will write into."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def ensure_directory(self, output_path: str) -> Path:
        """
        Create the output directory if it does not exist yet.

        This is a single create-if-missing call; nothing is written inside
        the directory.

        Args:
            output_path: Directory path as typed by the user (may end with a separator)

        Returns:
            Path of the directory

        Raises:
            FileSystemError: If the directory cannot be created or is not a directory
        """
        path = Path(output_path or os.curdir)

        try:
            path.mkdir(parents=True, exist_ok=True)
        except FileExistsError as e:
            raise FileSystemError(
                f"Output path {output_path} exists but is not a directory",
                details={'path': str(path)},
                original_exception=e
            )
        except OSError as e:
            raise FileSystemError(
                f"Cannot create directory {output_path}: {str(e)}",
                details={'path': str(path)},
                original_exception=e
            )

        if not path.is_dir():
            raise FileSystemError(
                f"Output path {output_path} exists but is not a directory",
                details={'path': str(path)}
            )

        if not os.access(str(path), os.W_OK):
            self.logger.warning(f"Output directory may not be writable: {path}")

        self.logger.debug(f"Output directory ready: {path}")
        return path
