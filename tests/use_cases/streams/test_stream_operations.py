"""
Tests for the stream use cases (cp, mv, hash, compress, decompress).
"""

import gzip
import hashlib
import os
from unittest.mock import patch

import pytest

from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.use_cases.streams.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
    _CodecUseCase,
)
from file_manager.use_cases.streams.copy_file import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.streams.hash_file import HashFileUseCase


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


@pytest.fixture
def payload(session):
    data = os.urandom(3000) + b"tail"
    path = os.path.join(session.home_directory, "payload.bin")
    with open(path, "wb") as f:
        f.write(data)
    return data


class TestCopyFileUseCase:
    def test_copy(self, session, repository, mock_logger, payload):
        job = CopyFileUseCase(repository, 128, mock_logger).prepare(
            session, "payload.bin", "subdir/copy.bin"
        )

        message = job.run()

        dest = os.path.join(session.home_directory, "subdir", "copy.bin")
        assert message == f"File copied to {dest}"
        assert _read(dest) == payload
        assert job.name.startswith("cp ")

    def test_copy_overwrites_destination(self, session, repository, mock_logger):
        CopyFileUseCase(repository, 4, mock_logger).prepare(session, "test1.txt", "test2.py").run()

        assert _read(os.path.join(session.home_directory, "test2.py")) == b"This is a test file."

    @pytest.mark.parametrize("source", ["missing.bin", "subdir"])
    def test_invalid_source_is_rejected_before_running(self, session, repository, mock_logger, source):
        with pytest.raises(PathError, match="^Invalid source file$"):
            CopyFileUseCase(repository, 4, mock_logger).prepare(session, source, "out.bin")

        assert not os.path.exists(os.path.join(session.home_directory, "out.bin"))

    def test_copy_onto_itself_keeps_source(self, session, repository, mock_logger):
        job = CopyFileUseCase(repository, 4, mock_logger).prepare(
            session, "test1.txt", "./test1.txt"
        )

        with pytest.raises(OperationError, match="^Operation failed$"):
            job.run()
        assert _read(os.path.join(session.home_directory, "test1.txt")) == b"This is a test file."

    def test_copy_into_missing_directory(self, session, repository, mock_logger):
        job = CopyFileUseCase(repository, 4, mock_logger).prepare(
            session, "test1.txt", "nowhere/copy.txt"
        )

        with pytest.raises(OperationError, match="^Operation failed$"):
            job.run()


class TestMoveFileUseCase:
    def test_move(self, session, repository, mock_logger, payload):
        message = MoveFileUseCase(repository, 256, mock_logger).prepare(
            session, "payload.bin", "moved.bin"
        ).run()

        dest = os.path.join(session.home_directory, "moved.bin")
        assert message == f"File moved to {dest}"
        assert _read(dest) == payload
        assert not os.path.exists(os.path.join(session.home_directory, "payload.bin"))

    def test_failed_copy_keeps_source(self, session, repository, mock_logger):
        job = MoveFileUseCase(repository, 4, mock_logger).prepare(
            session, "test1.txt", "nowhere/x.txt"
        )

        with pytest.raises(OperationError, match="^Operation failed$"):
            job.run()
        assert os.path.exists(os.path.join(session.home_directory, "test1.txt"))

    def test_source_delete_failure_reports_partial_outcome(self, session, repository, mock_logger):
        job = MoveFileUseCase(repository, 4, mock_logger).prepare(session, "test1.txt", "copy.txt")

        with patch.object(repository, "delete", side_effect=FileRepositoryError("locked")):
            with pytest.raises(OperationError) as exc_info:
                job.run()

        dest = os.path.join(session.home_directory, "copy.txt")
        assert str(exc_info.value) == (
            f"Operation failed: file copied to {dest} but source was not removed"
        )
        assert os.path.exists(os.path.join(session.home_directory, "test1.txt"))
        assert _read(dest) == b"This is a test file."


class TestHashFileUseCase:
    def test_hash(self, session, repository, mock_logger, payload):
        message = HashFileUseCase(repository, 100, logger=mock_logger).prepare(
            session, "payload.bin"
        ).run()

        assert message == f"Hash: {hashlib.sha256(payload).hexdigest()}"

    def test_hash_empty_file(self, session, repository, mock_logger):
        open(os.path.join(session.home_directory, "empty"), "w").close()

        message = HashFileUseCase(repository, logger=mock_logger).prepare(session, "empty").run()

        assert message == f"Hash: {hashlib.sha256(b'').hexdigest()}"

    def test_copy_preserves_digest(self, session, repository, mock_logger, payload):
        CopyFileUseCase(repository, 64, mock_logger).prepare(session, "payload.bin", "dup.bin").run()
        hasher = HashFileUseCase(repository, 64, logger=mock_logger)

        assert (
            hasher.prepare(session, "payload.bin").run()
            == hasher.prepare(session, "dup.bin").run()
        )

    def test_invalid_path(self, session, repository, mock_logger):
        with pytest.raises(PathError, match="^Invalid file path$"):
            HashFileUseCase(repository, logger=mock_logger).prepare(session, "subdir")


class TestCompressionUseCases:
    def test_round_trip(self, session, repository, mock_logger, payload):
        compress = CompressFileUseCase(repository, 100, level=9, logger=mock_logger)
        decompress = DecompressFileUseCase(repository, 50, mock_logger)

        first = compress.prepare(session, "payload.bin", "payload.gz").run()
        second = decompress.prepare(session, "payload.gz", "restored.bin").run()

        home = session.home_directory
        assert first == f"File compressed to {os.path.join(home, 'payload.gz')}"
        assert second == f"File decompressed to {os.path.join(home, 'restored.bin')}"
        assert _read(os.path.join(home, "restored.bin")) == payload
        assert gzip.decompress(_read(os.path.join(home, "payload.gz"))) == payload

    def test_round_trip_empty_file(self, session, repository, mock_logger):
        open(os.path.join(session.home_directory, "empty"), "w").close()

        CompressFileUseCase(repository, logger=mock_logger).prepare(session, "empty", "e.gz").run()
        DecompressFileUseCase(repository, logger=mock_logger).prepare(session, "e.gz", "e").run()

        assert _read(os.path.join(session.home_directory, "e")) == b""

    def test_decompress_garbage_fails(self, session, repository, mock_logger):
        job = DecompressFileUseCase(repository, logger=mock_logger).prepare(
            session, "test1.txt", "out.txt"
        )

        with pytest.raises(OperationError, match="^Operation failed$"):
            job.run()
        messages = [c.args[0] for c in mock_logger.error.call_args_list]
        assert any("not readable as gzip or zlib data" in m and "Brotli" in m for m in messages)

    def test_codec_base_is_abstract(self, repository, mock_logger):
        with pytest.raises(TypeError):
            _CodecUseCase(repository, logger=mock_logger)

    def test_invalid_source(self, session, repository, mock_logger):
        with pytest.raises(PathError, match="^Invalid source file$"):
            CompressFileUseCase(repository, logger=mock_logger).prepare(session, "missing", "x.gz")
