"""
Local file system adapter implementation for file operations.
"""

import contextlib
import logging
import os
from typing import BinaryIO, Iterator

from typing_extensions import override

from file_manager.entities.entry import Entry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _create_entries(self, paths: list[str]) -> list[Entry]:
        """
        Create Entry entities from a list of paths.

        Entries that vanish between listing and inspection are skipped.
        """
        entries: list[Entry] = []
        for path in paths:
            try:
                entries.append(Entry(path))
            except FileRepositoryError as e:
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def same_file(self, first: str, second: str) -> bool:
        try:
            return os.path.samefile(first, second)
        except OSError:
            return False

    @override
    def list_entries(self, directory: str) -> list[Entry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of Entry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            paths: list[str] = [
                os.path.join(directory, item) for item in os.listdir(directory)
            ]
            return self._create_entries(paths)

        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    def iter_text(self, path: str, chunk_size: int) -> Iterator[str]:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                while chunk := f.read(chunk_size):
                    yield chunk
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def iter_bytes(self, path: str, chunk_size: int) -> Iterator[bytes]:
        try:
            with open(path, "rb") as f:
                while chunk := f.read(chunk_size):
                    yield chunk
        except OSError as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    @contextlib.contextmanager
    def open_writer(self, path: str) -> Iterator[BinaryIO]:
        try:
            f = open(path, "wb")
        except OSError as e:
            raise FileRepositoryError(f"Failed to open {path} for writing: {str(e)}")
        try:
            yield f
            f.flush()
        except OSError as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")
        finally:
            f.close()

    @override
    def create_empty(self, path: str) -> None:
        try:
            with open(path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise FileRepositoryError(f"Failed to create {path}: {str(e)}")
        self._logger.debug(f"Created empty file {path}")

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to rename {source} to {destination}: {str(e)}"
            )
        self._logger.debug(f"Renamed {source} to {destination}")

    @override
    def delete(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete {path}: {str(e)}")
        self._logger.debug(f"Deleted {path}")
