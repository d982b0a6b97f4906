# ABOUTME: Normalized chat message record handed from the event adapter to the chat logs
# ABOUTME: Renders the sender and body under a log's include-server and user directory settings

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from chatter.chat.chat_type import ChatType
from chatter.chat_string import ChatString


@dataclass(frozen=True, eq=False)
class ChatMessage:
    """
    A single chat message, captured once per host event.

    Attributes:
        chat_type: The channel the message arrived on
        type_label: Label written into log lines; empty means "do not log"
        sender_id: Host id of the sender
        sender: The sender, usually a single player item
        body: The message text
        when: Time of receipt in the configured time zone
    """

    chat_type: ChatType
    type_label: str
    sender_id: int
    sender: ChatString
    body: ChatString
    when: datetime

    def loggable_sender(self, include_server: bool, users: Mapping[str, str] | None = None) -> str:
        """
        Render the sender for a log line.

        The user directory maps a full player name (``Name@World``) to the name
        that should be logged instead. Missing or empty entries keep the
        rendered name.
        """
        if users:
            replacement = users.get(str(self.sender))
            if replacement:
                return replacement
        return self.sender.as_text(include_server)

    def loggable_body(self, include_server: bool) -> str:
        return self.body.as_text(include_server)
