"""
System information port interface for host OS queries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CpuInfo:
    model: str
    speed_mhz: float


class SystemInfoPort(ABC):
    """Port interface for host operating system introspection."""

    @abstractmethod
    def end_of_line(self) -> str:
        """Line separator used by the host OS."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """One entry per logical CPU."""
        pass

    @abstractmethod
    def home_directory(self) -> str:
        pass

    @abstractmethod
    def username(self) -> str:
        """Login name of the user running the process."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        pass
