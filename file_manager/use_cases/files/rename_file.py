"""
Use case for renaming a file.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class RenameFileUseCase:
    """Renames a file; the new name lands in the current directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, old: str, new_name: str) -> str:
        source = session.resolve(old)
        destination = session.join_name(new_name)
        if not self._file_repository.is_file(source):
            raise PathError("Invalid file path")

        try:
            self._file_repository.rename(source, destination)
        except FileRepositoryError as e:
            self._logger.error(f"Error renaming file: {e}")
            raise OperationError("Operation failed") from e
        self._logger.info(f"Renamed {source} to {destination}")
        return f"File renamed to {new_name}"
