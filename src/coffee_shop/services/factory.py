"""
Simple factory for the default journal.

The entry point asks `ServiceFactory.get_event_log()` for the shop journal
instead of wiring the Logger and the file sink itself. Tests either inject
their own EventLog directly or call `ServiceFactory.reset()` and point the
factory at a temporary path.
"""

from pathlib import Path

from coffee_shop.services.journal import EventLog, FileSink, Logger

DEFAULT_LOG_PATH = "log.txt"


class ServiceFactory:
    """Lazily creates and caches the journal (class-level singleton)."""

    log_path: str | Path = DEFAULT_LOG_PATH
    _event_log: EventLog | None = None

    @classmethod
    def get_event_log(cls) -> EventLog:
        if cls._event_log is None:
            cls._event_log = EventLog(FileSink(cls.log_path), Logger.get_instance())
        return cls._event_log

    @classmethod
    def reset(cls, log_path: str | Path = DEFAULT_LOG_PATH) -> None:
        cls.log_path = log_path
        cls._event_log = None
