"""
channel.py - Many-producer / single-consumer conduit for open ports.

Workers each hold a PortSender and push ports as they find them; the
collector iterates the PortChannel.  The channel counts live senders
itself and ends the iteration once the last one is closed, so the
consumer never has to know how many producers exist.
"""

import queue
import threading
from typing import Iterator

from ..errors import ChannelClosedError

_END_OF_STREAM = object()


class PortSender:
    """Write handle for a PortChannel.  Close it when the producer is done."""

    def __init__(self, channel: "PortChannel") -> None:
        self._channel = channel
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, port: int) -> None:
        if self._closed:
            raise ChannelClosedError(f"cannot send port {port} on a closed sender")
        self._channel._queue.put(port)

    def clone(self) -> "PortSender":
        """Return a new, independent sender on the same channel."""
        if self._closed:
            raise ChannelClosedError("cannot clone a closed sender")
        return self._channel.sender()

    def close(self) -> None:
        """Drop this handle.  Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._channel._release()

    def __enter__(self) -> "PortSender":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class PortChannel:
    """Unbounded channel of ports; iteration stops when all senders are closed."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._lock = threading.Lock()
        self._senders = 0
        self._finished = False

    def sender(self) -> PortSender:
        with self._lock:
            if self._finished:
                raise ChannelClosedError("channel already drained; no senders left")
            self._senders += 1
        return PortSender(self)

    def _release(self) -> None:
        with self._lock:
            self._senders -= 1
            if self._senders == 0:
                self._finished = True
                self._queue.put(_END_OF_STREAM)

    def __iter__(self) -> Iterator[int]:
        while True:
            item = self._queue.get()
            if item is _END_OF_STREAM:
                return
            yield item  # type: ignore[misc]
