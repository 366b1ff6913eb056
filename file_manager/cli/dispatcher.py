"""
Command dispatcher: maps parsed commands to use cases and prints the outcome.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from file_manager.cli.output import OutputChannel
from file_manager.entities.command import Command, CommandKind, parse_command
from file_manager.entities.session import Session
from file_manager.exceptions import BaseAppError
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


class CommandDispatcher:
    """
    Runs one input line against the session.

    Every application error is caught here and printed as its message, so a
    failing command never ends the loop.
    """

    def __init__(
        self,
        session: Session,
        output: OutputChannel,
        *,
        go_up: GoUpUseCase,
        change_directory: ChangeDirectoryUseCase,
        list_directory: ListDirectoryUseCase,
        read_file: ReadFileUseCase,
        create_file: CreateFileUseCase,
        rename_file: RenameFileUseCase,
        delete_file: DeleteFileUseCase,
        copy_file: CopyFileUseCase,
        move_file: MoveFileUseCase,
        hash_file: HashFileUseCase,
        compress_file: CompressFileUseCase,
        decompress_file: DecompressFileUseCase,
        system_info: SystemInfoUseCase,
        stream_runner: StreamRunner,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.session = session
        self._output = output
        self._go_up = go_up
        self._change_directory = change_directory
        self._list_directory = list_directory
        self._read_file = read_file
        self._create_file = create_file
        self._rename_file = rename_file
        self._delete_file = delete_file
        self._copy_file = copy_file
        self._move_file = move_file
        self._hash_file = hash_file
        self._compress_file = compress_file
        self._decompress_file = decompress_file
        self._system_info = system_info
        self._stream_runner = stream_runner
        self._logger = logger or logging.getLogger(__name__)

        self._handlers: dict[CommandKind, Callable[[Command], None]] = {
            CommandKind.UP: self._up,
            CommandKind.CD: self._cd,
            CommandKind.LS: self._ls,
            CommandKind.CAT: self._cat,
            CommandKind.ADD: self._add,
            CommandKind.RN: self._rn,
            CommandKind.RM: self._rm,
            CommandKind.CP: self._cp,
            CommandKind.MV: self._mv,
            CommandKind.OS: self._os,
            CommandKind.HASH: self._hash,
            CommandKind.COMPRESS: self._compress,
            CommandKind.DECOMPRESS: self._decompress,
        }
        missing = set(CommandKind) - set(self._handlers) - {CommandKind.EXIT}
        if missing:
            raise ValueError(f"No handler for: {sorted(k.verb for k in missing)}")

    # ------------------------- navigation -------------------------
    def _up(self, command: Command) -> None:
        self._go_up.execute(self.session)

    def _cd(self, command: Command) -> None:
        self._change_directory.execute(self.session, command.first)

    def _ls(self, command: Command) -> None:
        entries = self._list_directory.execute(self.session)
        self._output.lines([str(entry) for entry in entries])

    # ------------------------- single files -------------------------
    def _cat(self, command: Command) -> None:
        last = ""

        def emit(chunk: str) -> None:
            nonlocal last
            self._output.chunk(chunk)
            last = chunk

        try:
            self._read_file.execute(self.session, command.first, emit)
        finally:
            if last and not last.endswith("\n"):
                self._output.chunk("\n")

    def _add(self, command: Command) -> None:
        self._output.line(self._create_file.execute(self.session, command.first))

    def _rn(self, command: Command) -> None:
        self._output.line(
            self._rename_file.execute(self.session, command.first, command.second)
        )

    def _rm(self, command: Command) -> None:
        self._output.line(self._delete_file.execute(self.session, command.first))

    # ------------------------- streams -------------------------
    def _cp(self, command: Command) -> None:
        job = self._copy_file.prepare(self.session, command.first, command.second)
        self._stream_runner.submit(job)

    def _mv(self, command: Command) -> None:
        job = self._move_file.prepare(self.session, command.first, command.second)
        self._stream_runner.submit(job)

    def _hash(self, command: Command) -> None:
        self._stream_runner.submit(self._hash_file.prepare(self.session, command.first))

    def _compress(self, command: Command) -> None:
        job = self._compress_file.prepare(self.session, command.first, command.second)
        self._stream_runner.submit(job)

    def _decompress(self, command: Command) -> None:
        job = self._decompress_file.prepare(self.session, command.first, command.second)
        self._stream_runner.submit(job)

    # ------------------------- host -------------------------
    def _os(self, command: Command) -> None:
        self._output.lines(self._system_info.execute(command.first))

    def dispatch(self, raw: str) -> bool:
        """
        Parse and run one line.

        Returns:
            False when the line asks to end the session, True otherwise
        """
        try:
            command = parse_command(raw)
            if command.kind is CommandKind.EXIT:
                return False
            self._handlers[command.kind](command)
        except BaseAppError as e:
            self._output.line(str(e))
        except Exception:
            self._logger.exception(f"Unexpected error while running {raw!r}")
            self._output.line("Operation failed")
        return True
