"""
Directory entry entity.
"""

import os

from file_manager.exceptions import FileRepositoryError


class Entry:
    """
    Directory listing entry (file or directory).
    """

    def __init__(self, path: str):
        """
        Initialize the Entry entity.

        Args:
            path: Path to the entry

        Raises:
            FileRepositoryError: If path is invalid or the entry doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        if not os.path.lexists(path):
            raise FileRepositoryError(f"Entry does not exist: {path}")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = os.path.isdir(self.path)

    @property
    def kind(self) -> str:
        """Either "directory" or "file"."""
        return "directory" if self.is_dir else "file"

    def __str__(self) -> str:
        return f"{self.name} - {self.kind}"

    def __repr__(self) -> str:
        return f"Entry(path='{self.path}')"
