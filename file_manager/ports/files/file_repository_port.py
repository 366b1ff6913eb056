"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, ContextManager, Iterator

from file_manager.entities.entry import Entry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations.

    Implementations raise FileRepositoryError when the underlying call fails.
    """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path exists and is a directory."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if path exists and is a regular file."""
        pass

    @abstractmethod
    def same_file(self, first: str, second: str) -> bool:
        """Return True if both paths exist and refer to the same file."""
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List all entries (files and directories) of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities, unordered

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def iter_text(self, path: str, chunk_size: int) -> Iterator[str]:
        """
        Read a UTF-8 text file chunk by chunk.

        Args:
            path: File to read
            chunk_size: Maximum number of characters per chunk

        Raises:
            FileRepositoryError: If opening or reading fails
        """
        pass

    @abstractmethod
    def iter_bytes(self, path: str, chunk_size: int) -> Iterator[bytes]:
        """
        Read a file as a stream of byte chunks.

        Args:
            path: File to read
            chunk_size: Maximum number of bytes per chunk

        Raises:
            FileRepositoryError: If opening or reading fails
        """
        pass

    @abstractmethod
    def open_writer(self, path: str) -> ContextManager[BinaryIO]:
        """
        Open a file for binary writing, creating or truncating it.

        Raises:
            FileRepositoryError: If the file cannot be opened
        """
        pass

    @abstractmethod
    def create_empty(self, path: str) -> None:
        """Create an empty file, truncating an existing one."""
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Rename source to destination."""
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """Delete a file."""
        pass
