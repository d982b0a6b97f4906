# ABOUTME: Adapter between the host chat event stream and the chat log manager
# ABOUTME: Parses host payloads into ChatMessage records and forwards supported chat types

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

from chatter.chat.chat_type import ChatType, is_supported, type_to_name
from chatter.chat.clock import Clock
from chatter.chat.log_config import Configuration
from chatter.chat.log_manager import ChatLogManager
from chatter.chat.message import ChatMessage
from chatter.chat_string import ChatString, Payload

logger = logging.getLogger(__name__)

# (chat_type, sender_id, sender payloads, body payloads) -> handled
ChatMessageHandler = Callable[[int, int, Sequence[Payload], Sequence[Payload]], bool]


class ChatSource(Protocol):
    """The host's chat event stream."""

    def subscribe(self, handler: ChatMessageHandler) -> None: ...

    def unsubscribe(self, handler: ChatMessageHandler) -> None: ...


class ChatManager:
    """
    Captures chat messages from the host and passes them on to the chat log manager.

    The host calls handle_chat_message for every chat message. Messages of
    unsupported chat types are dropped; the rest are normalized into
    ChatMessage records.
    """

    def __init__(
        self,
        configuration: Configuration,
        log_manager: ChatLogManager,
        chat_source: ChatSource,
        clock: Clock,
        default_home_world: str,
    ):
        """
        Initialize the ChatManager and subscribe to the chat source.

        Args:
            configuration: The plugin configuration
            log_manager: Receives the normalized messages
            chat_source: The host chat event stream
            clock: Timestamps the messages
            default_home_world: World used for senders that carry no world
        """
        self.configuration = configuration
        self.log_manager = log_manager
        self.chat_source = chat_source
        self.clock = clock
        self.default_home_world = default_home_world

        self.chat_source.subscribe(self.handle_chat_message)

    def dispose(self) -> None:
        self.chat_source.unsubscribe(self.handle_chat_message)

    def handle_chat_message(
        self,
        chat_type: int,
        sender_id: int,
        sender: Sequence[Payload],
        body: Sequence[Payload],
    ) -> bool:
        """
        Handle one chat event from the host.

        Args:
            chat_type: The host chat type
            sender_id: The host id of the sender
            sender: The sender payloads; the world is not separated from the name
            body: The message payloads

        Returns:
            Always False; the message is never marked as handled so the host
            keeps displaying it
        """
        if not is_supported(chat_type):
            if self.configuration.is_debug:
                logger.debug(f"Unsupported chat type: {chat_type}")
            return False

        chat_body = ChatString.from_payloads(body)
        chat_sender = self._clean_up_sender(ChatString.from_payloads(sender), chat_body)
        label = type_to_name(chat_type, self.configuration.is_debug)

        message = ChatMessage(
            chat_type=ChatType(chat_type),
            type_label=label,
            sender_id=sender_id,
            sender=chat_sender,
            body=chat_body,
            when=self.clock.now(),
        )
        self.log_manager.log_info(message)
        return False

    def _clean_up_sender(self, sender: ChatString, body: ChatString) -> ChatString:
        """
        Recover the sender's player item from the body when the sender has none.

        Emotes and some system messages carry the sender only as the first
        player of the body.
        """
        if sender.has_initial_player() or not body.has_initial_player():
            return sender
        return ChatString([body.get_initial_player_item(str(sender), self.default_home_world)])
