# Scanner package initialization
from .channel import PortChannel, PortSender
from .port_scanner import MAX_PORT, PortScanner, partition_ports, probe_port
from .progress import ProgressTicker

__all__ = [
    "MAX_PORT",
    "PortChannel",
    "PortScanner",
    "PortSender",
    "ProgressTicker",
    "partition_ports",
    "probe_port",
]
