"""
Shop journal: the Singleton logger and the sinks it writes to.

`Logger` is the **Singleton** of the demo. `Logger.get_instance()` (or plain
`Logger()`) creates the instance on first use and hands back the same object
for the rest of the process. It holds no state of its own: the sink to write
to is passed on every call, exactly like a TextWriter handed to a method.

The rest of the module is about *where* entries go:
  - `LogSink` is the protocol: anything that can open an appendable text
    stream for the duration of one write.
  - `FileSink` appends to a file, opening and closing it per entry so every
    entry is on disk as soon as `record()` returns.
  - `MemorySink` keeps everything in a StringIO for tests.
  - `EventLog` binds the Logger to one sink. This is what workers and the
    brewing algorithm receive by injection.

The journal is a domain artefact (the shop's flat text log). Diagnostic
logging of the program itself still goes through the stdlib `logging` module.
"""

import io
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import ContextManager, Protocol, TextIO

from coffee_shop.domain.models import ENTRY_SEPARATOR, LogEntry

logger = logging.getLogger(__name__)


class Logger:
    """Process-wide journal writer (Singleton)."""

    _instance: "Logger | None" = None

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "Logger":
        """Return the sole Logger, creating it on the first call."""
        return cls()

    def write_entry(self, message: str, sink: TextIO, now: datetime | None = None) -> LogEntry:
        """Append one formatted entry to `sink` and return it.

        Write errors are not handled here; they reach the caller.
        """
        entry = LogEntry(message=message) if now is None else LogEntry(message=message, timestamp=now)
        sink.write(entry.render())
        return entry


class LogSink(Protocol):
    """Interface for a journal destination."""

    def open(self) -> ContextManager[TextIO]: ...


class FileSink:
    """Appends to a text file, one open/close per entry."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @contextmanager
    def open(self) -> Iterator[TextIO]:
        # newline="" keeps the leading "\r\n" of each block byte-exact.
        with self.path.open("a", encoding="utf-8", newline="") as fh:
            yield fh

    def __repr__(self) -> str:
        return f"FileSink({str(self.path)!r})"


class MemorySink:
    """Keeps the journal in memory so tests can assert on it."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()

    @contextmanager
    def open(self) -> Iterator[TextIO]:
        # The buffer outlives every write; it is never closed.
        yield self._buffer

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def messages(self) -> list[str]:
        return parse_entries(self.getvalue())


class EventLog:
    """A Logger bound to one sink.

    `record()` serializes appends with a lock so that several workers sharing
    one EventLog never interleave their blocks.
    """

    def __init__(self, sink: LogSink, writer: Logger | None = None) -> None:
        self.sink = sink
        self.writer = writer or Logger.get_instance()
        self._lock = threading.Lock()

    def record(self, message: str) -> LogEntry:
        with self._lock:
            with self.sink.open() as fh:
                entry = self.writer.write_entry(message, fh)
        logger.debug("Journal entry recorded: %s", message)
        return entry


def parse_entries(text: str) -> list[str]:
    """Extract the message of every journal block in `text`, in order."""
    messages: list[str] = []
    lines = text.splitlines()
    for i, line in enumerate(lines):
        if not line.startswith("Log Entry : "):
            continue
        # Header, "  :" spacer, then "  :<message>".
        if i + 2 < len(lines) and lines[i + 2].startswith("  :"):
            messages.append(lines[i + 2][3:])
    return messages


def count_entries(text: str) -> int:
    """Number of complete journal blocks in `text`."""
    return sum(1 for line in text.splitlines() if line == ENTRY_SEPARATOR)
