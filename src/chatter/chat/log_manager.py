# ABOUTME: Owns one ChatLog per configured log group and fans chat messages out to them
# ABOUTME: Reconciles the set of logs on configuration changes and closes them on shutdown

import logging

from chatter.chat.chat_log import ChatLog, DiagnosticSink
from chatter.chat.clock import Clock
from chatter.chat.log_config import Configuration, LogConfiguration
from chatter.chat.message import ChatMessage

logger = logging.getLogger(__name__)


class ChatLogManager:
    """Manages the chat logs for the lifetime of the plugin."""

    def __init__(self, configuration: Configuration, clock: Clock):
        self.clock = clock
        self.configuration = configuration
        self._logs: dict[str, ChatLog] = {}
        self.update_configuration(configuration)

    @property
    def logs(self) -> dict[str, ChatLog]:
        return dict(self._logs)

    def log_info(self, message: ChatMessage) -> None:
        """
        Write a message to every chat log that wants it.

        Each log renders the sender and body with its own settings. A failure
        in one log is logged and does not keep the others from writing.

        Args:
            message: The normalized chat message
        """
        for chat_log in self._logs.values():
            if not chat_log.should_log(message):
                continue

            config = chat_log.log_configuration
            try:
                sender = message.loggable_sender(config.include_server, config.users)
                body = message.loggable_body(config.include_server)
                chat_log.write_log(message, sender, body)
            except Exception as e:
                logger.exception(f"Unexpected error writing to chat log '{chat_log.name}': {e}")

    def update_configuration(self, configuration: Configuration) -> None:
        """
        Bring the set of chat logs in line with a configuration.

        New active logs are created, removed or deactivated logs are closed and
        dropped, and kept logs switch to their new settings. A kept log is
        closed when its file location changes so its next write starts a file
        in the new place.
        """
        self.configuration = configuration
        wanted = {
            name: log_config
            for name, log_config in configuration.chat_logs.items()
            if log_config.is_active
        }

        for name in list(self._logs):
            if name not in wanted:
                logger.info(f"Removing chat log '{name}'")
                self._logs.pop(name).close()

        for name, log_config in wanted.items():
            chat_log = self._logs.get(name)
            if chat_log is None:
                logger.info(f"Adding chat log '{name}'")
                self._logs[name] = ChatLog(log_config, self.clock)
                continue

            if chat_log.log_configuration is not log_config:
                if _location_changed(chat_log.log_configuration, log_config):
                    chat_log.close()
                chat_log.log_configuration = log_config

    def dump_logs(self, sink: DiagnosticSink | None = None) -> None:
        """Write one diagnostic line per chat log, in name order."""
        if sink is None:
            sink = logger.info
        for name in sorted(self._logs):
            self._logs[name].dump_log(sink)

    def close_all(self) -> None:
        for chat_log in self._logs.values():
            chat_log.close()


def _location_changed(old: LogConfiguration, new: LogConfiguration) -> bool:
    return old.output_directory != new.output_directory or old.base_name != new.base_name
