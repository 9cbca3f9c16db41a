"""
config.py - Scan configuration and command-line argument parsing.

The command line is turned into a single immutable ScanConfig before
any scanning starts; nothing else in the package reads sys.argv.
"""

import ipaddress
import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .errors import ArgumentError, HelpRequested

logger = logging.getLogger("port_sniffer")

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

DEFAULT_THREADS = 4
MAX_THREADS = 65535

HELP_FLAGS = ("-h", "-help", "--help")
THREADS_FLAG = "-j"

USAGE = """Usage: port-sniffer [-j <threads>] <address>

  <address>         target IPv4 or IPv6 address
  -j <threads>      number of concurrent workers (default 4)
  -h, -help         show this help message and exit

Examples:
  port-sniffer 192.168.1.1
  port-sniffer -j 100 192.168.1.1
  port-sniffer -j 8 ::1"""


@dataclass(frozen=True)
class ScanConfig:
    """Everything a scan needs, fixed for the whole scan session."""

    address: IPAddress
    threads: int = DEFAULT_THREADS


def parse_address(value: str) -> IPAddress:
    """Parse an IPv4/IPv6 literal or raise ArgumentError."""
    try:
        return ipaddress.ip_address(value)
    except ValueError as exc:
        raise ArgumentError("not a valid IPADDR; must be IPv4 or IPv6") from exc


def parse_threads(value: str) -> int:
    """Parse a worker count in [1, MAX_THREADS] or raise ArgumentError."""
    # plain ASCII digits only: no sign, whitespace or underscores
    if not (value.isascii() and value.isdigit()):
        raise ArgumentError("failed to parse thread number")
    threads = int(value)
    if not 1 <= threads <= MAX_THREADS:
        raise ArgumentError("failed to parse thread number")
    return threads


def parse_arguments(argv: Sequence[str]) -> ScanConfig:
    """
    Build a ScanConfig from command-line arguments (program name excluded).

    Accepted forms:
        <address>
        -j <threads> <address>
        -h | -help | --help

    Raises:
        HelpRequested: a help flag was given on its own.
        ArgumentError: anything else that is not a valid scan request.
    """
    args = list(argv)
    if not args:
        raise ArgumentError("not enough arguments")
    if len(args) > 3:
        raise ArgumentError("too many arguments")

    first = args[0]
    try:
        address = ipaddress.ip_address(first)
    except ValueError:
        pass
    else:
        if len(args) > 1:
            raise ArgumentError("too many arguments")
        return ScanConfig(address=address)

    if first in HELP_FLAGS:
        if len(args) == 1:
            raise HelpRequested()
        raise ArgumentError("too many arguments")

    if first == THREADS_FLAG:
        if len(args) != 3:
            raise ArgumentError("invalid syntax")
        address = parse_address(args[2])
        threads = parse_threads(args[1])
        logger.debug("Parsed arguments: %d threads, target %s", threads, address)
        return ScanConfig(address=address, threads=threads)

    raise ArgumentError("invalid syntax")
