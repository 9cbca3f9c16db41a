"""
Concurrent TCP connect port scanner.

Splits the port space 1-65535 across worker threads by residue class,
collects the ports that accept a connection and reports them sorted.
"""

from .config import ScanConfig, parse_arguments
from .scanner import PortScanner

__all__ = ["PortScanner", "ScanConfig", "parse_arguments"]
__version__ = "1.0.0"
