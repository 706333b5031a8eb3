import pytest

from dbinterface.drivers import add_driver, disable_driver
from dbinterface.statement_cache import StatementCache
from recording_driver import RecordingConnection


@pytest.fixture
def connection() -> RecordingConnection:
    return RecordingConnection(
        results={
            "SELECT id, name FROM users": [(1, "Alice"), (2, "Bob")],
        }
    )


@pytest.fixture
def statement(connection):
    return connection.prepare("INSERT INTO users (id, name) VALUES (?, ?)")


@pytest.fixture
def recording_driver_tag():
    """Registers the recording driver for the duration of a test."""
    add_driver("recording", RecordingConnection.connect)
    yield "recording"
    disable_driver("recording")


@pytest.fixture
def cache() -> StatementCache:
    return StatementCache()
