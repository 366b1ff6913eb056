"""
Use cases for gzip compression and decompression of files.
"""

import logging
import zlib
from abc import ABC, abstractmethod
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.streams.pipeline import (
    ByteTransform,
    GzipCompressTransform,
    GzipDecompressTransform,
    StreamJob,
    StreamPipeline,
)


class _CodecUseCase(ABC):
    verb = ""
    done = ""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = 64 * 1024,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def _transform(self) -> ByteTransform:
        """Fresh codec stage for one run."""
        pass

    def _on_failure(self, src: str, error: OperationError) -> None:
        """Hook called when the pipeline fails, before the error propagates."""
        pass

    def prepare(self, session: Session, source: str, destination: str) -> StreamJob:
        """
        Validate the source and build the codec job.

        Raises:
            PathError: If source is not an existing regular file
        """
        src = session.resolve(source)
        dest = session.resolve(destination)
        if not self._file_repository.is_file(src):
            raise PathError("Invalid source file")

        def run() -> str:
            if self._file_repository.same_file(src, dest):
                raise OperationError("Operation failed")
            try:
                written = StreamPipeline(
                    source=lambda: self._file_repository.iter_bytes(src, self._chunk_size),
                    sink=lambda: self._file_repository.open_writer(dest),
                    transforms=[self._transform()],
                    logger=self._logger,
                ).run()
            except OperationError as e:
                self._on_failure(src, e)
                raise
            self._logger.info(f"{self.verb}: wrote {written} bytes from {src} to {dest}")
            return f"File {self.done} to {dest}"

        return StreamJob(name=f"{self.verb} {src} {dest}", run=run)


class CompressFileUseCase(_CodecUseCase):
    """Writes a gzip-compressed copy of a file."""

    verb = "compress"
    done = "compressed"

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = 64 * 1024,
        level: int = 9,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(file_repository, chunk_size, logger)
        self._level = level

    def _transform(self) -> ByteTransform:
        return GzipCompressTransform(self._level)


class DecompressFileUseCase(_CodecUseCase):
    """Restores a file compressed by CompressFileUseCase (gzip or zlib data)."""

    verb = "decompress"
    done = "decompressed"

    def _transform(self) -> ByteTransform:
        return GzipDecompressTransform()

    def _on_failure(self, src: str, error: OperationError) -> None:
        if isinstance(error.__cause__, zlib.error):
            self._logger.error(
                f"{src} is not readable as gzip or zlib data "
                f"(Brotli archives are not supported): {error.__cause__}"
            )
