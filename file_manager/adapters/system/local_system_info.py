"""
Host system information adapter backed by the stdlib and psutil.
"""

import getpass
import logging
import os
import platform

import psutil
from typing_extensions import override

from file_manager.ports.system.system_info_port import CpuInfo, SystemInfoPort


class LocalSystemInfoAdapter(SystemInfoPort):
    """Reads information about the machine the process runs on."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _cpu_model(self) -> str:
        model = platform.processor()
        if not model and os.path.exists("/proc/cpuinfo"):
            try:
                with open("/proc/cpuinfo", "r", encoding="utf-8") as f:
                    for line in f:
                        if line.lower().startswith("model name"):
                            model = line.split(":", 1)[1].strip()
                            break
            except OSError as e:
                self._logger.debug(f"Could not read /proc/cpuinfo: {e}")
        return model or platform.machine() or "unknown"

    def _cpu_speeds(self, count: int) -> list[float]:
        try:
            freqs = psutil.cpu_freq(percpu=True) or []
        except (AttributeError, NotImplementedError, OSError) as e:
            # cpu_freq is not implemented on every platform
            self._logger.debug(f"CPU frequency unavailable: {e}")
            freqs = []
        speeds = [float(f.current or 0.0) for f in freqs]
        if len(speeds) == 1 and count > 1:
            speeds = speeds * count
        return (speeds + [0.0] * count)[:count]

    @override
    def end_of_line(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
        model = self._cpu_model()
        return [CpuInfo(model=model, speed_mhz=speed) for speed in self._cpu_speeds(count)]

    @override
    def home_directory(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()
