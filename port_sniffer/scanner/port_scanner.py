"""
port_scanner.py - Multi-threaded TCP connect port scanner.

The port space 1-65535 is partitioned by residue class: worker ``i`` of
``N`` probes ports ``i+1, i+1+N, i+1+2N, ...``.  Every worker runs in
its own thread and streams open ports through a PortChannel; the
collector drains the channel, then returns the ports sorted.
"""

import logging
import socket
import threading
import time
from typing import Callable, Iterator, List, Optional

from ..config import DEFAULT_THREADS, IPAddress
from .channel import PortChannel, PortSender

logger = logging.getLogger("port_sniffer")

MAX_PORT = 65535

Probe = Callable[[IPAddress, int], bool]
ProgressCallback = Callable[[int], None]


def partition_ports(start_index: int, stride: int) -> Iterator[int]:
    """
    Yield the ports assigned to worker *start_index* out of *stride* workers.

    The sequence starts at ``start_index + 1`` and advances by *stride*
    until the next port would exceed MAX_PORT.  Port 0 is never yielded.

    Raises:
        ValueError: stride < 1 or start_index outside [0, stride).
    """
    if stride < 1:
        raise ValueError(f"stride must be >= 1, got {stride}")
    if not 0 <= start_index < stride:
        raise ValueError(f"start_index must be in [0, {stride}), got {start_index}")

    port = start_index + 1
    while port <= MAX_PORT:
        yield port
        if MAX_PORT - port < stride:
            break
        port += stride


def probe_port(address: IPAddress, port: int) -> bool:
    """
    Attempt a TCP connect to *address*:*port* with the platform default timeout.

    Returns:
        True if the connection was accepted, False on any socket error.
    """
    try:
        with socket.create_connection((str(address), port)):
            return True
    except OSError as exc:
        logger.debug("Port %d on %s not open - %s", port, address, exc)
        return False


class PortScanner:
    """TCP connect-scan port scanner with one thread per port partition."""

    def __init__(
        self,
        threads: int = DEFAULT_THREADS,
        progress: Optional[ProgressCallback] = None,
        probe: Optional[Probe] = None,
    ) -> None:
        """
        Args:
            threads:  Number of concurrent workers; also the partition stride.
            progress: Called once per open port, from the worker thread.
            probe:    Connect function returning True for an open port
                      (defaults to probe_port).
        """
        if threads < 1:
            raise ValueError(f"threads must be >= 1, got {threads}")
        self.threads = threads
        self.progress = progress
        self.probe = probe if probe is not None else probe_port

    # ------------------------------------------------------------------ #
    #  Worker
    # ------------------------------------------------------------------ #
    def _scan_partition(
        self,
        start_index: int,
        address: IPAddress,
        sender: PortSender,
    ) -> None:
        """
        Probe every port of one residue class and send the open ones.

        A failure on one port (probe or progress tick) is logged and the
        worker moves on to its next port.
        """
        with sender:
            for port in partition_ports(start_index, self.threads):
                try:
                    is_open = self.probe(address, port)
                except Exception as exc:
                    logger.error(
                        "Error probing %s:%d in worker %d: %s",
                        address, port, start_index, exc, exc_info=True,
                    )
                    continue
                if not is_open:
                    continue

                logger.info("Port %d/tcp OPEN on %s", port, address)
                sender.send(port)

                if self.progress is None:
                    continue
                try:
                    self.progress(port)
                except Exception as exc:
                    logger.warning("Progress update for port %d failed: %s", port, exc)

    # ------------------------------------------------------------------ #
    #  Collector
    # ------------------------------------------------------------------ #
    def scan(self, address: IPAddress) -> List[int]:
        """
        Scan every TCP port of *address* and return the open ones.

        Blocks until every worker has finished.

        Returns:
            Sorted list of open port numbers (empty if none).
        """
        started = time.time()
        logger.info(
            "Starting TCP connect scan on %s  ports 1-%d (%d workers)",
            address, MAX_PORT, self.threads,
        )

        channel = PortChannel()
        workers: List[threading.Thread] = []
        with channel.sender() as sender:
            for index in range(self.threads):
                worker_sender = sender.clone()
                worker = threading.Thread(
                    target=self._scan_partition,
                    args=(index, address, worker_sender),
                    name=f"port-sniffer-{index}",
                    daemon=True,
                )
                try:
                    worker.start()
                except RuntimeError:
                    worker_sender.close()
                    raise
                workers.append(worker)

        open_ports = list(channel)
        for worker in workers:
            worker.join()

        open_ports.sort()
        logger.info(
            "Port scan complete - %d open port(s) found on %s in %.2fs",
            len(open_ports), address, time.time() - started,
        )
        return open_ports
