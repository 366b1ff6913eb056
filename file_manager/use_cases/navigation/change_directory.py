"""
Use cases for moving the session's current directory.
"""

import logging
import os
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class GoUpUseCase:
    """Move one level up, never above the home directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session) -> str:
        if not session.at_home():
            session.current_directory = os.path.dirname(session.current_directory)
            self._logger.info(f"Moved up to {session.current_directory}")
        return session.current_directory


class ChangeDirectoryUseCase:
    """Use case for changing the current directory."""

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

    def execute(self, session: Session, target: str) -> str:
        """
        Make target the session's current directory.

        Args:
            session: Session to update
            target: Directory, relative to the current one or absolute

        Returns:
            The new current directory

        Raises:
            PathError: If target is not an existing directory
        """
        path = session.resolve(target)
        if not self._file_repository.is_directory(path):
            self._logger.info(f"Refusing to change into {path}: not a directory")
            raise PathError("Invalid directory")

        session.current_directory = path
        self._logger.info(f"Changed directory to {path}")
        return path
