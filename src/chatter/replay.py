# ABOUTME: JSON chat event models and a chat source that replays them into the plugin
# ABOUTME: Stands in for the host chat stream when running Chatter outside the game client

import logging
from collections.abc import Iterable, Iterator
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from chatter.chat.chat_manager import ChatMessageHandler
from chatter.chat.chat_type import parse_chat_type
from chatter.chat_string import AutoTranslatePayload, Payload, PlayerPayload, TextPayload

logger = logging.getLogger(__name__)


class PlayerPayloadModel(BaseModel):
    type: Literal["player"]
    player_name: str
    world: str = ""

    def to_payload(self) -> Payload:
        return PlayerPayload(self.player_name, self.world)


class TextPayloadModel(BaseModel):
    type: Literal["text"]
    text: str | None = None

    def to_payload(self) -> Payload:
        return TextPayload(self.text)


class AutoTranslatePayloadModel(BaseModel):
    type: Literal["auto_translate"]
    text: str | None = None

    def to_payload(self) -> Payload:
        return AutoTranslatePayload(self.text)


PayloadModel = Annotated[
    PlayerPayloadModel | TextPayloadModel | AutoTranslatePayloadModel,
    Field(discriminator="type"),
]


class ChatEvent(BaseModel):
    """One chat event as written in a replay file."""

    chat_type: int
    sender_id: int = 0
    sender: list[PayloadModel] = []
    body: list[PayloadModel] = []

    @field_validator("chat_type", mode="before")
    @classmethod
    def parse_chat_type_name(cls, v: Any) -> Any:
        """Allow chat types by name ("Say", "TellIncoming") as well as by number."""
        if isinstance(v, str):
            return int(parse_chat_type(v))
        return v

    def sender_payloads(self) -> list[Payload]:
        return [payload.to_payload() for payload in self.sender]

    def body_payloads(self) -> list[Payload]:
        return [payload.to_payload() for payload in self.body]


def read_events(lines: Iterable[str]) -> Iterator[ChatEvent]:
    """
    Parse chat events from JSON lines.

    Blank lines are ignored. Invalid lines are logged and skipped so a
    single bad event does not stop a replay.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield ChatEvent.model_validate_json(line)
        except ValidationError as e:
            logger.warning(f"Skipping invalid chat event on line {line_number}: {e}")


class ReplayChatSource:
    """A chat source fed from recorded events instead of the game client."""

    def __init__(self) -> None:
        self._handlers: list[ChatMessageHandler] = []

    def subscribe(self, handler: ChatMessageHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: ChatMessageHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def replay(self, events: Iterable[ChatEvent]) -> int:
        """
        Deliver events to every subscribed handler, in order.

        Returns:
            The number of events delivered
        """
        count = 0
        for event in events:
            sender = event.sender_payloads()
            body = event.body_payloads()
            for handler in list(self._handlers):
                handler(event.chat_type, event.sender_id, sender, body)
            count += 1
        return count
