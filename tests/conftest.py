import pytest

from coffee_shop.services.factory import ServiceFactory
from coffee_shop.services.journal import EventLog, MemorySink


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def journal(sink: MemorySink) -> EventLog:
    return EventLog(sink)


@pytest.fixture(autouse=True)
def isolated_factory(tmp_path):
    """Keep the default journal out of the working directory."""
    ServiceFactory.reset(tmp_path / "log.txt")
    yield tmp_path / "log.txt"
    ServiceFactory.reset()
