# ABOUTME: Chat module for Chatter - chat types, messages and the per-channel log writers
# ABOUTME: Provides the chat log state machine, its manager, formatter and file naming policy

from chatter.chat.chat_log import ChatLog, LogFileInfo
from chatter.chat.chat_manager import ChatManager, ChatSource
from chatter.chat.chat_type import ChatType, type_to_name
from chatter.chat.clock import Clock, format_long_date
from chatter.chat.formatter import format_message
from chatter.chat.log_config import Configuration, LogConfiguration
from chatter.chat.log_manager import ChatLogManager
from chatter.chat.message import ChatMessage
from chatter.chat.naming import log_file_path

__all__ = [
    "ChatLog",
    "LogFileInfo",
    "ChatManager",
    "ChatSource",
    "ChatType",
    "type_to_name",
    "Clock",
    "format_long_date",
    "format_message",
    "Configuration",
    "LogConfiguration",
    "ChatLogManager",
    "ChatMessage",
    "log_file_path",
]
