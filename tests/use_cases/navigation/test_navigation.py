"""
Tests for the navigation use cases (up, cd, ls).
"""

import os
from unittest.mock import MagicMock

import pytest

from file_manager.entities.entry import Entry
from file_manager.exceptions import FileRepositoryError, OperationError, PathError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from file_manager.use_cases.navigation.list_directory import (
    ListDirectoryUseCase,
    sort_entries,
)


class TestGoUpUseCase:
    def test_up_at_home_is_a_no_op(self, session, mock_logger):
        use_case = GoUpUseCase(mock_logger)

        assert use_case.execute(session) == session.home_directory
        assert use_case.execute(session) == session.home_directory
        mock_logger.info.assert_not_called()

    def test_up_moves_to_parent(self, session, repository, mock_logger):
        ChangeDirectoryUseCase(repository, mock_logger).execute(session, "subdir")

        GoUpUseCase(mock_logger).execute(session)

        assert session.current_directory == session.home_directory

    def test_up_from_nested_directory(self, session, repository, mock_logger):
        nested = os.path.join(session.home_directory, "subdir", "deeper")
        os.makedirs(nested)
        ChangeDirectoryUseCase(repository, mock_logger).execute(session, "subdir/deeper")

        GoUpUseCase(mock_logger).execute(session)

        assert session.current_directory == os.path.join(session.home_directory, "subdir")


class TestChangeDirectoryUseCase:
    def test_cd_into_subdirectory(self, session, repository, mock_logger):
        use_case = ChangeDirectoryUseCase(repository, mock_logger)

        result = use_case.execute(session, "subdir")

        assert result == os.path.join(session.home_directory, "subdir")
        assert session.current_directory == result

    def test_cd_absolute_path(self, session, repository, mock_logger):
        target = os.path.join(session.home_directory, "subdir")

        ChangeDirectoryUseCase(repository, mock_logger).execute(session, target)

        assert session.current_directory == target

    @pytest.mark.parametrize("target", ["missing", "test1.txt"])
    def test_cd_invalid_target(self, session, repository, mock_logger, target):
        use_case = ChangeDirectoryUseCase(repository, mock_logger)

        with pytest.raises(PathError, match="^Invalid directory$"):
            use_case.execute(session, target)

        assert session.current_directory == session.home_directory


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_orders_directories_first(self, session, repository, mock_logger):
        os.makedirs(os.path.join(session.home_directory, "zeta"))
        open(os.path.join(session.home_directory, "alpha.txt"), "w").close()

        entries = ListDirectoryUseCase(repository, mock_logger).execute(session)

        assert [str(e) for e in entries] == [
            "subdir - directory",
            "zeta - directory",
            "alpha.txt - file",
            "test1.txt - file",
            "test2.py - file",
        ]
        mock_logger.info.assert_any_call(
            f"Listing entries in directory: {session.home_directory}"
        )
        mock_logger.info.assert_any_call("Found 5 entries")

    def test_execute_orders_names_case_insensitively(self, session, repository, mock_logger):
        for name in ("Zebra.txt", "apple.txt"):
            open(os.path.join(session.home_directory, name), "w").close()
        os.makedirs(os.path.join(session.home_directory, "Beta"))

        entries = ListDirectoryUseCase(repository, mock_logger).execute(session)

        assert [e.name for e in entries] == [
            "Beta",
            "subdir",
            "apple.txt",
            "test1.txt",
            "test2.py",
            "Zebra.txt",
        ]

    def test_execute_empty_directory(self, session, repository, mock_logger):
        empty = os.path.join(session.home_directory, "subdir", "empty")
        os.makedirs(empty)
        session.current_directory = empty

        assert ListDirectoryUseCase(repository, mock_logger).execute(session) == []

    def test_execute_repository_error(self, session, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_entries.side_effect = FileRepositoryError("Directory not found")

        use_case = ListDirectoryUseCase(mock_repository, mock_logger)

        with pytest.raises(OperationError, match="^Operation failed$"):
            use_case.execute(session)

        mock_repository.list_entries.assert_called_once_with(session.home_directory)
        mock_logger.error.assert_called_once_with("Error listing entries: Directory not found")

    def test_sort_entries_property(self, temp_directory):
        names = ["b", "a.txt", "c"]
        for name in ("b", "c"):
            os.makedirs(os.path.join(temp_directory, name))
        open(os.path.join(temp_directory, "a.txt"), "w").close()
        entries = sort_entries([Entry(os.path.join(temp_directory, n)) for n in names])

        seen_file = False
        for entry in entries:
            if not entry.is_dir:
                seen_file = True
            else:
                assert not seen_file, "directory listed after a file"
        assert [e.name for e in entries] == ["b", "c", "a.txt"]

    def test_initialization_without_logger(self):
        mock_repository = MagicMock(spec=FileRepositoryPort)

        use_case = ListDirectoryUseCase(mock_repository)

        assert use_case._logger is not None
        assert use_case._file_repository == mock_repository
