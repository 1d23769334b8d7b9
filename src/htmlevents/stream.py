"""Incremental (pull) serialization of event streams.

``HTMLReader`` turns a lazy event stream into a readable binary file object.
Each event is rendered only when a read needs more bytes, and the part of a
rendering that did not fit into the caller's buffer is kept for the next read.
"""

from __future__ import annotations

import enum
import io
import logging
from collections.abc import Generator, Iterable, Iterator

from .encoding import DEFAULT_ENCODING, HTMLEncoder
from .serialize import render_event
from .tokens import Event

logger = logging.getLogger(__name__)

_END = object()


class ReaderState(enum.Enum):
    EMPTY = "empty"  # nothing rendered is waiting
    DRAINING = "draining"  # part of a rendered event is waiting
    FINISHED = "finished"  # events exhausted and nothing waiting


class HTMLReader(io.RawIOBase):
    """Readable byte stream over rendered events.

    Reads of any size concatenate to exactly the eager rendering of the same
    events. A read returns 0 bytes only once the events are exhausted, and
    every read after that returns 0 as well.

    Not safe for concurrent use: reads mutate the pending buffer.
    """

    encoding: str
    state: ReaderState

    def __init__(self, events: Iterable[Event], encoding: str = DEFAULT_ENCODING) -> None:
        super().__init__()
        self.state = ReaderState.EMPTY
        self._events: Iterator[Event] = iter(events)
        self._buffer = bytearray()
        self._count = 0
        self._exhausted = False
        self._encoder = HTMLEncoder(encoding)
        self.encoding = self._encoder.encoding

    def readable(self) -> bool:
        return True

    def _next_bytes(self) -> bytes | None:
        # Encoded bytes of the next event, the encoder's final flush once the
        # events run out, then None.
        if self._exhausted:
            return None
        event = next(self._events, _END)
        if event is _END:
            data = self._encoder.encode("", final=True)
            self._exhausted = True
            logger.debug("Event stream exhausted after %d events", self._count)
            return data
        data = self._encoder.encode(render_event(event))
        self._count += 1
        return data

    def _fill(self) -> None:
        # Pull events until one renders to at least one byte, or none remain.
        while self.state is ReaderState.EMPTY:
            data = self._next_bytes()
            if data is None:
                self.state = ReaderState.FINISHED
                return
            if data:
                self._buffer += data
                self.state = ReaderState.DRAINING

    def readinto(self, b: bytearray | memoryview) -> int:  # type: ignore[override]
        self._checkClosed()
        view = memoryview(b).cast("B")
        size = view.nbytes
        if size == 0:
            return 0

        if self.state is ReaderState.EMPTY:
            self._fill()
        if self.state is ReaderState.FINISHED:
            return 0

        pending = len(self._buffer)
        if pending <= size:
            view[:pending] = self._buffer
            self._buffer.clear()
            self.state = ReaderState.EMPTY
            return pending

        view[:size] = self._buffer[:size]
        del self._buffer[:size]
        return size

    def readall(self) -> bytes:
        """Render every remaining event and return the bytes, pending ones first.

        Events are rendered into the pending buffer, so if one fails the bytes
        of the events before it are still there for the next read.
        """
        self._checkClosed()
        if self.state is ReaderState.FINISHED:
            return b""
        while (data := self._next_bytes()) is not None:
            if data:
                self._buffer += data
                self.state = ReaderState.DRAINING
        result = bytes(self._buffer)
        self._buffer.clear()
        self.state = ReaderState.FINISHED
        return result

    def close(self) -> None:
        if not self.closed:
            logger.debug("Closing reader in state %s", self.state.value)
            self._buffer.clear()
            self._events = iter(())
        super().close()


def iter_chunks(
    events: Iterable[Event],
    chunk_size: int = io.DEFAULT_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> Generator[bytes, None, None]:
    """Yield the encoded rendering of ``events`` in chunks of at most ``chunk_size`` bytes."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    reader = HTMLReader(events, encoding=encoding)
    buf = bytearray(chunk_size)
    with reader:
        while True:
            n = reader.readinto(buf)
            if not n:
                return
            yield bytes(buf[:n])
