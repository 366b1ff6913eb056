"""
Use case answering the `os --<flag>` queries.
"""

import logging
from typing import Callable, Optional

from file_manager.entities.command import INVALID_INPUT
from file_manager.exceptions import UserInputError
from file_manager.ports.system.system_info_port import SystemInfoPort


class SystemInfoUseCase:
    """Formats host information for one of the supported flags."""

    def __init__(
        self,
        system_info: SystemInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._system_info = system_info
        self._logger = logger or logging.getLogger(__name__)
        self._queries: dict[str, Callable[[], list[str]]] = {
            "--EOL": self._eol,
            "--cpus": self._cpus,
            "--homedir": self._homedir,
            "--username": self._username,
            "--architecture": self._architecture,
        }

    def _eol(self) -> list[str]:
        escaped = self._system_info.end_of_line().encode("unicode_escape").decode("ascii")
        return [f"EOL: {escaped}"]

    def _cpus(self) -> list[str]:
        cpus = self._system_info.cpus()
        lines = [f"CPU Info: {len(cpus)} CPUs"]
        for index, cpu in enumerate(cpus, start=1):
            lines.append(f"CPU {index}: {cpu.model}, {cpu.speed_mhz / 1000} GHz")
        return lines

    def _homedir(self) -> list[str]:
        return [f"Home Directory: {self._system_info.home_directory()}"]

    def _username(self) -> list[str]:
        return [f"Current User: {self._system_info.username()}"]

    def _architecture(self) -> list[str]:
        return [f"Architecture: {self._system_info.architecture()}"]

    def execute(self, flag: str) -> list[str]:
        """
        Answer one query.

        Raises:
            UserInputError: If flag is not one of the supported flags
        """
        query = self._queries.get(flag)
        if query is None:
            raise UserInputError(INVALID_INPUT)
        self._logger.info(f"Answering os query {flag}")
        return query()
