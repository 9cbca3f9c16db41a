"""
progress.py - Thread-safe progress indicator.

Prints one tick per discovered port.  Writes are serialised by a lock
so concurrent workers never garble the line.
"""

import sys
import threading
from typing import Optional, TextIO

from colorama import Fore, Style


class ProgressTicker:
    """Callable progress sink: ``ticker(port)`` writes one symbol."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        symbol: str = ".",
        color: bool = True,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.symbol = f"{Fore.GREEN}{symbol}{Style.RESET_ALL}" if color else symbol
        self.ticks = 0
        self._lock = threading.Lock()

    def __call__(self, port: int) -> None:
        with self._lock:
            self.stream.write(self.symbol)
            self.stream.flush()
            self.ticks += 1
