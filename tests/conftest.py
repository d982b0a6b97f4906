# ABOUTME: Shared fixtures for Chatter tests
# ABOUTME: Provides a deterministic clock and chat message factory

from datetime import date, datetime, timedelta, timezone

import pytest

from chatter.chat.chat_type import ChatType
from chatter.chat.clock import format_long_date
from chatter.chat.log_config import LogConfiguration
from chatter.chat.message import ChatMessage
from chatter.chat_string import ChatString, PlayerItem, TextItem

START = datetime(2023, 5, 9, 17, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that returns a fixed start time and moves forward by `step` on every call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current += self.step
        return value

    def format_long_date(self, day: date) -> str:
        return format_long_date(day)


def create_message(
    when: datetime = START,
    chat_type: ChatType = ChatType.SAY,
    type_label: str = "say",
    sender: str = "Robert Jones",
    world: str = "Zalera",
    body: str = "This is a test",
) -> ChatMessage:
    return ChatMessage(
        chat_type=chat_type,
        type_label=type_label,
        sender_id=0,
        sender=ChatString([PlayerItem(sender, world)]),
        body=ChatString([TextItem(body)]),
        when=when,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def log_dir(tmp_path):
    directory = tmp_path / "logs"
    directory.mkdir()
    return directory


@pytest.fixture
def log_config(log_dir):
    """A log named "test" that writes say messages to log_dir."""
    return LogConfiguration(
        name="test",
        directory=log_dir,
        chat_type_filter_flags={ChatType.SAY: True},
    )
