# ABOUTME: Per-channel chat log that filters, formats and appends chat messages to disk
# ABOUTME: Opens a new file per day or after an explicit close and inserts day separator banners

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import TextIO

from chatter.chat.clock import Clock
from chatter.chat.formatter import format_message
from chatter.chat.log_config import LogConfiguration
from chatter.chat.message import ChatMessage
from chatter.chat.naming import next_free_log_file_path

logger = logging.getLogger(__name__)

SEPARATOR_BANNER = "=" * 30

# Receives diagnostic lines from dump_log
DiagnosticSink = Callable[[str], None]


@dataclass
class LogFileInfo:
    """State of the file a chat log is currently writing to."""

    handle: TextIO | None = None
    path: Path | None = None
    start_time: datetime | None = None
    last_written_date: date | None = None


class ChatLog:
    """
    Writes the chat messages selected by one LogConfiguration to a series of files.

    The log is either closed (no file) or open (a file handle and its start
    time). A new file is opened on the first write, after an explicit close,
    and when the day changes since the current file was started. Every file
    gets a separator banner before its first line and whenever the message
    date changes.
    """

    def __init__(self, log_configuration: LogConfiguration, clock: Clock):
        """
        Initialize the chat log.

        Args:
            log_configuration: The configuration to follow; read, never modified
            clock: Source of the current time for file names and rotation
        """
        self.log_configuration = log_configuration
        self.clock = clock
        self.log_file_info = LogFileInfo()

    @property
    def name(self) -> str:
        return self.log_configuration.name

    @property
    def is_open(self) -> bool:
        return self.log_file_info.handle is not None

    @property
    def file_name(self) -> str:
        """Path of the open file, or an empty string when closed."""
        path = self.log_file_info.path
        return str(path) if path is not None else ""

    def should_log(self, message: ChatMessage) -> bool:
        """
        Decide whether a message belongs in this log.

        Never touches the file.

        Args:
            message: The message to check

        Returns:
            True if the message should be written
        """
        config = self.log_configuration
        if config.debug_include_all_messages:
            return True
        if not message.type_label:
            return False
        return config.is_enabled(message.chat_type)

    def write_log(self, message: ChatMessage, rendered_sender: str, rendered_body: str) -> bool:
        """
        Append a message to the current file, rotating first if needed.

        Open and write failures are logged and leave the log closed; the
        next write tries again with a fresh file.

        Args:
            message: The message to write
            rendered_sender: The sender as rendered for this log
            rendered_body: The body as rendered for this log

        Returns:
            True if the message was written
        """
        now = self.clock.now()
        handle = self.log_file_info.handle
        if handle is None or self._needs_new_file(now):
            self.close()
            handle = self._open(now)
            if handle is None:
                return False

        info = self.log_file_info
        config = self.log_configuration
        message_date = message.when.date()

        lines: list[str] = []
        if info.last_written_date != message_date:
            lines.append(self._separator(message_date))
        lines.extend(
            format_message(
                message,
                rendered_sender,
                rendered_body,
                config.date_time_format,
                config.format,
                config.message_wrap_width,
                config.message_wrap_indentation,
            )
        )

        try:
            handle.write("".join(line + "\n" for line in lines))
            handle.flush()
        except OSError as e:
            logger.error(f"Failed to write chat log '{self.name}' to {info.path}: {e}")
            self.close()
            return False

        info.last_written_date = message_date
        return True

    def close(self) -> None:
        """Close the current file, if any. The next write starts a new file."""
        info = self.log_file_info
        if info.handle is None:
            return

        try:
            try:
                info.handle.flush()
            finally:
                info.handle.close()
        except OSError as e:
            logger.error(f"Failed to close chat log '{self.name}' at {info.path}: {e}")
        finally:
            logger.debug(f"Closed chat log '{self.name}': {info.path}")
            info.handle = None
            info.path = None
            info.start_time = None

    def dump_log(self, sink: DiagnosticSink) -> None:
        """Report name, open state and file path as one line."""
        sink(f"[L]: {self.name:<14}{self.is_open!s:<7}'{self.file_name}'")

    def _needs_new_file(self, now: datetime) -> bool:
        start_time = self.log_file_info.start_time
        return start_time is None or now.date() != start_time.date()

    def _open(self, now: datetime) -> TextIO | None:
        config = self.log_configuration
        directory = config.output_directory
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path, start_time = next_free_log_file_path(config.base_name, directory, now)
            handle = path.open("x", encoding="utf-8", newline="\n")
        except OSError as e:
            logger.error(f"Failed to open chat log '{self.name}' in {directory}: {e}")
            return None

        self.log_file_info = LogFileInfo(handle=handle, path=path, start_time=start_time)
        logger.info(f"Opened chat log '{self.name}': {path}")
        return handle

    def _separator(self, day: date) -> str:
        return f"{SEPARATOR_BANNER} {self.clock.format_long_date(day)} {SEPARATOR_BANNER}"
