"""
errors.py - Exception hierarchy for the port sniffer.

A failed TCP connect is never an exception here; it is the normal
signal for a closed or filtered port.
"""


class PortSnifferError(Exception):
    """Base class for every error raised by port_sniffer."""


class ArgumentError(PortSnifferError):
    """Raised when the command line cannot be turned into a ScanConfig."""


class HelpRequested(PortSnifferError):
    """Raised when the user asked for the usage text instead of a scan."""


class ChannelError(PortSnifferError):
    """Base class for result channel errors."""


class ChannelClosedError(ChannelError):
    """Raised when a port is sent through a sender that was already closed."""
