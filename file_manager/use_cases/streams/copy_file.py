"""
Use cases for copying and moving files through a stream pipeline.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.streams.pipeline import StreamJob, StreamPipeline


class CopyFileUseCase:
    """Use case for duplicating a file byte for byte."""

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
            chunk_size: Number of bytes read at a time
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    def _resolve(self, session: Session, source: str, destination: str) -> tuple[str, str]:
        src = session.resolve(source)
        dest = session.resolve(destination)
        if not self._file_repository.is_file(src):
            raise PathError("Invalid source file")
        return src, dest

    def _pipeline(self, src: str, dest: str) -> StreamPipeline:
        return StreamPipeline(
            source=lambda: self._file_repository.iter_bytes(src, self._chunk_size),
            sink=lambda: self._file_repository.open_writer(dest),
            logger=self._logger,
        )

    def _copy(self, src: str, dest: str) -> int:
        # opening the destination would truncate the source first
        if self._file_repository.same_file(src, dest):
            self._logger.error(f"Refusing to copy {src} onto itself")
            raise OperationError("Operation failed")
        written = self._pipeline(src, dest).run()
        self._logger.info(f"Copied {written} bytes from {src} to {dest}")
        return written

    def prepare(self, session: Session, source: str, destination: str) -> StreamJob:
        """
        Validate the source and build the copy job.

        Raises:
            PathError: If source is not an existing regular file
        """
        src, dest = self._resolve(session, source, destination)

        def run() -> str:
            self._copy(src, dest)
            return f"File copied to {dest}"

        return StreamJob(name=f"cp {src} {dest}", run=run)


class MoveFileUseCase(CopyFileUseCase):
    """Copies a file, then removes the source once the copy has completed."""

    def prepare(self, session: Session, source: str, destination: str) -> StreamJob:
        src, dest = self._resolve(session, source, destination)

        def run() -> str:
            self._copy(src, dest)
            try:
                self._file_repository.delete(src)
            except FileRepositoryError as e:
                self._logger.error(f"Copied {src} but could not remove it: {e}")
                raise OperationError(
                    f"Operation failed: file copied to {dest} but source was not removed"
                ) from e
            self._logger.info(f"Moved {src} to {dest}")
            return f"File moved to {dest}"

        return StreamJob(name=f"mv {src} {dest}", run=run)
