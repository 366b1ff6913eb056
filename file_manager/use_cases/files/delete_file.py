"""
Use case for deleting a file.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class DeleteFileUseCase:
    """Use case for deleting a regular file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Delete target.

        Raises:
            PathError: If target is not an existing regular file
            OperationError: If deletion fails
        """
        path = session.resolve(target)
        if not self._file_repository.is_file(path):
            raise PathError("Invalid file path")

        try:
            self._file_repository.delete(path)
        except FileRepositoryError as e:
            self._logger.error(f"Error deleting file: {e}")
            raise OperationError("Operation failed") from e
        self._logger.info(f"Deleted file {path}")
        return "File deleted"
