"""
Use case for computing a file's SHA-256 digest.
"""

import logging
from typing import Optional

from file_manager.entities.session import Session
from file_manager.exceptions import PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.streams.pipeline import (
    DigestSink,
    StreamJob,
    StreamPipeline,
    digest_sink,
)


class HashFileUseCase:
    """Hashes a file incrementally as its bytes stream in."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        chunk_size: int = 64 * 1024,
        algorithm: str = "sha256",
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._chunk_size = chunk_size
        self._algorithm = algorithm
        self._logger = logger or logging.getLogger(__name__)

    def prepare(self, session: Session, target: str) -> StreamJob:
        path = session.resolve(target)
        if not self._file_repository.is_file(path):
            raise PathError("Invalid file path")

        def run() -> str:
            sink = DigestSink(self._algorithm)
            StreamPipeline(
                source=lambda: self._file_repository.iter_bytes(path, self._chunk_size),
                sink=digest_sink(sink),
                logger=self._logger,
            ).run()
            digest = sink.hexdigest()
            self._logger.info(f"{self._algorithm} of {path}: {digest}")
            return f"Hash: {digest}"

        return StreamJob(name=f"hash {path}", run=run)
