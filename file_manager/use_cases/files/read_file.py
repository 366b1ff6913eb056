"""
Use case for printing a text file.
"""

import logging
from typing import Callable, Optional

from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class ReadFileUseCase:
    """Streams a file's text to a callback, chunk by chunk."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = 64 * 1024,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            chunk_size: Number of characters read at a time
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str, emit: Callable[[str], None]) -> int:
        """
        Read target and pass every chunk to emit as soon as it is read.

        Args:
            session: Session used to resolve target
            target: File to read
            emit: Called with each decoded chunk

        Returns:
            Number of characters emitted

        Raises:
            PathError: If target is not an existing regular file
            OperationError: If reading fails part way
        """
        path = session.resolve(target)
        if not self._file_repository.is_file(path):
            raise PathError("Invalid file path")

        self._logger.info(f"Reading file: {path}")
        emitted = 0
        try:
            for chunk in self._file_repository.iter_text(path, self._chunk_size):
                emit(chunk)
                emitted += len(chunk)
        except FileRepositoryError as e:
            self._logger.error(f"Error reading file: {e}")
            raise OperationError("Error reading file") from e
        return emitted
