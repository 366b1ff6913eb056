"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.cli.output import OutputChannel, make_console
from file_manager.container import DependencyContainer
from file_manager.entities.session import Session


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    """Session whose home is the temporary directory."""
    return Session(home_directory=temp_directory, display_name="Tester")


@pytest.fixture
def repository(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def output():
    """
    Output channel writing into memory.

    The captured text is available as ``output.console.file.getvalue()``.
    """
    return OutputChannel(make_console(file=io.StringIO(), width=200))


@pytest.fixture
def dependency_container(mock_logger, monkeypatch, temp_directory, output):
    """
    Create a dependency container with a mocked logger and test settings.

    Returns:
        DependencyContainer instance with mocked logger
    """
    from file_manager.config.settings import Settings

    monkeypatch.setenv("FM_HOME_DIR", temp_directory)
    monkeypatch.setenv("FM_USERNAME", "Tester")
    monkeypatch.setenv("FM_CHUNK_SIZE", "4")
    monkeypatch.setenv("FM_WAIT_FOR_STREAMS", "1")
    container = DependencyContainer(Settings())
    # Replace the logger with our mock
    container._logger = mock_logger
    container.get_output(output.console)
    yield container
    container.reset()
