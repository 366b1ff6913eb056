"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.system.local_system_info import LocalSystemInfoAdapter
from file_manager.cli.dispatcher import CommandDispatcher
from file_manager.cli.output import OutputChannel
from file_manager.config.settings import Settings, settings
from file_manager.entities.session import Session
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.system.system_info_port import SystemInfoPort
from file_manager.use_cases.files.create_file import CreateFileUseCase
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from file_manager.use_cases.navigation.list_directory import ListDirectoryUseCase
from file_manager.use_cases.streams.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.streams.copy_file import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.streams.hash_file import HashFileUseCase
from file_manager.use_cases.streams.runner import StreamRunner
from file_manager.use_cases.system.os_info import SystemInfoUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self._settings = app_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        return self._settings or settings

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_system_info(self) -> SystemInfoPort:
        """
        Get system information adapter instance.

        Returns:
            SystemInfoPort implementation
        """
        if "system_info" not in self._instances:
            self._instances["system_info"] = LocalSystemInfoAdapter(self._logger)
        return self._instances["system_info"]

    def get_output(self, console: Optional[Console] = None) -> OutputChannel:
        """
        Get the shared output channel.

        Args:
            console: Console to write to; only used on first call
        """
        if "output" not in self._instances:
            self._instances["output"] = OutputChannel(console)
        return self._instances["output"]

    def get_stream_runner(self) -> StreamRunner:
        if "stream_runner" not in self._instances:
            cfg = self.get_settings()
            self._instances["stream_runner"] = StreamRunner(
                report=self.get_output().line,
                wait=cfg.wait_for_streams,
                max_workers=cfg.max_workers,
                logger=self._logger,
            )
        return self._instances["stream_runner"]

    def _use_case(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_go_up_use_case(self) -> GoUpUseCase:
        return self._use_case("go_up", lambda: GoUpUseCase(self._logger))

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._use_case(
            "change_directory",
            lambda: ChangeDirectoryUseCase(self.get_file_repository(), self._logger),
        )

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        return self._use_case(
            "list_directory",
            lambda: ListDirectoryUseCase(self.get_file_repository(), self._logger),
        )

    def get_read_file_use_case(self) -> ReadFileUseCase:
        return self._use_case(
            "read_file",
            lambda: ReadFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                self._logger,
            ),
        )

    def get_create_file_use_case(self) -> CreateFileUseCase:
        return self._use_case(
            "create_file",
            lambda: CreateFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_rename_file_use_case(self) -> RenameFileUseCase:
        return self._use_case(
            "rename_file",
            lambda: RenameFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_delete_file_use_case(self) -> DeleteFileUseCase:
        return self._use_case(
            "delete_file",
            lambda: DeleteFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._use_case(
            "copy_file",
            lambda: CopyFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                self._logger,
            ),
        )

    def get_move_file_use_case(self) -> MoveFileUseCase:
        return self._use_case(
            "move_file",
            lambda: MoveFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                self._logger,
            ),
        )

    def get_hash_file_use_case(self) -> HashFileUseCase:
        return self._use_case(
            "hash_file",
            lambda: HashFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                logger=self._logger,
            ),
        )

    def get_compress_file_use_case(self) -> CompressFileUseCase:
        return self._use_case(
            "compress_file",
            lambda: CompressFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                level=self.get_settings().compression_level,
                logger=self._logger,
            ),
        )

    def get_decompress_file_use_case(self) -> DecompressFileUseCase:
        return self._use_case(
            "decompress_file",
            lambda: DecompressFileUseCase(
                self.get_file_repository(),
                self.get_settings().chunk_size,
                self._logger,
            ),
        )

    def get_system_info_use_case(self) -> SystemInfoUseCase:
        return self._use_case(
            "system_info",
            lambda: SystemInfoUseCase(self.get_system_info(), self._logger),
        )

    def create_session(self, display_name: Optional[str] = None) -> Session:
        """
        Create a fresh session rooted at the configured home directory.

        Args:
            display_name: Name shown in greetings; defaults to the configured username
        """
        cfg = self.get_settings()
        return Session(
            home_directory=cfg.home_directory,
            display_name=display_name or cfg.username,
        )

    def get_dispatcher(self, session: Session) -> CommandDispatcher:
        """
        Build a dispatcher for session with every use case injected.
        """
        return CommandDispatcher(
            session,
            self.get_output(),
            go_up=self.get_go_up_use_case(),
            change_directory=self.get_change_directory_use_case(),
            list_directory=self.get_list_directory_use_case(),
            read_file=self.get_read_file_use_case(),
            create_file=self.get_create_file_use_case(),
            rename_file=self.get_rename_file_use_case(),
            delete_file=self.get_delete_file_use_case(),
            copy_file=self.get_copy_file_use_case(),
            move_file=self.get_move_file_use_case(),
            hash_file=self.get_hash_file_use_case(),
            compress_file=self.get_compress_file_use_case(),
            decompress_file=self.get_decompress_file_use_case(),
            system_info=self.get_system_info_use_case(),
            stream_runner=self.get_stream_runner(),
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        runner = self._instances.get("stream_runner")
        if runner is not None:
            runner.shutdown()
        self._instances.clear()


# Global container instance
container = DependencyContainer()
