"""
Use case for listing the current directory.
"""

import locale
import logging
from typing import Optional

from file_manager.entities.entry import Entry
from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Directories first, then files; locale-aware name order within each group.

    Names are case-folded before collation so the order stays case-insensitive
    under the C locale; the raw name breaks ties.
    """
    return sorted(
        entries,
        key=lambda e: (not e.is_dir, locale.strxfrm(e.name.casefold()), e.name),
    )


class ListDirectoryUseCase:
    """Use case for listing entries in the current directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> list[Entry]:
        """
        List the session's current directory.

        Returns:
            Sorted list of Entry entities

        Raises:
            OperationError: If listing fails
        """
        directory = session.current_directory
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            entries = self._file_repository.list_entries(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return sort_entries(entries)
        except FileRepositoryError as e:
            self._logger.error(f"Error listing entries: {e}")
            raise OperationError("Operation failed") from e
