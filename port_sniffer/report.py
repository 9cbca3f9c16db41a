"""
report.py - Final scan report.

Turns the collected open ports into the ``<port> is open`` lines shown
to the user.  Formatting is a pure function; printing is separate.
"""

import sys
from typing import Iterable, List, Optional, TextIO

from colorama import Fore, Style


def format_report(open_ports: Iterable[int]) -> List[str]:
    """Return one ``"<port> is open"`` line per port, ascending, no duplicates."""
    return [f"{port} is open" for port in sorted(set(open_ports))]


def print_report(
    open_ports: Iterable[int],
    stream: Optional[TextIO] = None,
    color: bool = True,
) -> None:
    """
    Write the report: a blank line closing the progress ticks, then
    one line per open port.  Nothing else is printed when no port is open.
    """
    out = stream if stream is not None else sys.stdout
    out.write("\n")
    for line in format_report(open_ports):
        if color:
            line = f"{Fore.GREEN}{line}{Style.RESET_ALL}"
        out.write(line + "\n")
    out.flush()
