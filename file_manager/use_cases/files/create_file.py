"""
Use case for creating an empty file.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Creates an empty file in the current directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        """
        Create (or truncate) ``<current directory>/<name>``.

        Returns:
            Confirmation message

        Raises:
            OperationError: If the file cannot be created
        """
        path = session.join_name(name)
        try:
            self._file_repository.create_empty(path)
        except FileRepositoryError as e:
            self._logger.error(f"Error creating file: {e}")
            raise OperationError("Operation failed") from e
        self._logger.info(f"Created file {path}")
        return f"File {name} created"
