"""
Thread-safe line output on top of a rich Console.
"""

from __future__ import annotations

import threading
from typing import Optional

from rich.console import Console


def make_console(**kwargs) -> Console:
    """Console that prints user data verbatim (no markup, emoji or highlighting)."""
    kwargs.setdefault("soft_wrap", True)
    return Console(highlight=False, markup=False, emoji=False, **kwargs)


class OutputChannel:
    """Serialises writes from the command loop and stream workers."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or make_console()
        self._lock = threading.RLock()

    def line(self, text: str) -> None:
        with self._lock:
            self.console.print(text)

    def lines(self, texts: list[str]) -> None:
        with self._lock:
            for text in texts:
                self.console.print(text)

    def chunk(self, text: str) -> None:
        """Write raw text without adding a newline."""
        with self._lock:
            self.console.out(text, end="", highlight=False)

    def prompt(self, text: str) -> None:
        with self._lock:
            self.console.out(text, end="", highlight=False)
            self.console.file.flush()
