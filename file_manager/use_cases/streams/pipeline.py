"""
Chunked byte pipelines: source -> transforms -> sink.

A pipeline never holds more than one chunk (plus whatever a transform buffers)
in memory.
"""

from __future__ import annotations

import contextlib
import hashlib
import logging
import zlib
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterator, Optional, Protocol, Sequence

from file_manager.exceptions import FileRepositoryError, OperationError

# gzip container for compression; auto-detect gzip or zlib when decompressing.
GZIP_WBITS = 16 + zlib.MAX_WBITS
AUTO_WBITS = 32 + zlib.MAX_WBITS


class Writable(Protocol):
    def write(self, data: bytes, /) -> object: ...


class ByteTransform(Protocol):
    """A stage that rewrites chunks and may hold data until flushed."""

    def process(self, chunk: bytes) -> bytes: ...

    def flush(self) -> bytes: ...


class GzipCompressTransform:
    def __init__(self, level: int = 9):
        self._compressor = zlib.compressobj(level, zlib.DEFLATED, GZIP_WBITS)

    def process(self, chunk: bytes) -> bytes:
        return self._compressor.compress(chunk)

    def flush(self) -> bytes:
        return self._compressor.flush()


class GzipDecompressTransform:
    def __init__(self):
        self._decompressor = zlib.decompressobj(AUTO_WBITS)

    def process(self, chunk: bytes) -> bytes:
        if self._decompressor.eof:
            # trailing data after the end of the compressed stream is ignored
            return b""
        return self._decompressor.decompress(chunk)

    def flush(self) -> bytes:
        tail = self._decompressor.flush()
        if not self._decompressor.eof:
            raise zlib.error("compressed stream ended prematurely")
        return tail


class DigestSink:
    """Sink that feeds bytes into a hashlib digest."""

    def __init__(self, algorithm: str = "sha256"):
        self._digest = hashlib.new(algorithm)

    def write(self, data: bytes) -> int:
        self._digest.update(data)
        return len(data)

    def hexdigest(self) -> str:
        return self._digest.hexdigest()


class StreamPipeline:
    """Drives chunks from a source through transforms into a sink."""

    def __init__(
        self,
        source: Callable[[], Iterator[bytes]],
        sink: Callable[[], ContextManager[Writable]],
        transforms: Sequence[ByteTransform] = (),
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            source: Opens the source lazily and yields its chunks
            sink: Opens the destination lazily, as a context manager
            transforms: Stages applied to every chunk, in order
        """
        self._source = source
        self._sink = sink
        self._transforms = list(transforms)
        self._logger = logger or logging.getLogger(__name__)

    def _through(self, chunk: bytes, start: int) -> bytes:
        for transform in self._transforms[start:]:
            if not chunk:
                break
            chunk = transform.process(chunk)
        return chunk

    def run(self) -> int:
        """
        Run the pipeline to completion.

        Returns:
            Number of bytes written to the sink

        Raises:
            OperationError: If reading, transforming or writing fails
        """
        written = 0
        try:
            with self._sink() as sink:
                for chunk in self._source():
                    out = self._through(chunk, 0)
                    if out:
                        sink.write(out)
                        written += len(out)
                # flushed data from stage i still has to pass through stages after i
                for index, transform in enumerate(self._transforms):
                    out = self._through(transform.flush(), index + 1)
                    if out:
                        sink.write(out)
                        written += len(out)
        except (FileRepositoryError, OSError, zlib.error) as e:
            self._logger.error(f"Stream pipeline failed: {e}")
            raise OperationError("Operation failed") from e
        return written


def digest_sink(sink: DigestSink) -> Callable[[], ContextManager[DigestSink]]:
    return lambda: contextlib.nullcontext(sink)


@dataclass(frozen=True)
class StreamJob:
    """A validated stream operation, ready to run.

    ``run`` returns the line reported on success and raises BaseAppError
    subclasses on failure.
    """

    name: str
    run: Callable[[], str]
