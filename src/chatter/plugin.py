# ABOUTME: Chatter plugin object that wires the clock, chat log manager and chat event adapter
# ABOUTME: Owns the plugin lifecycle from construction until dispose closes every log

import logging

from chatter.chat.chat_log import DiagnosticSink
from chatter.chat.chat_manager import ChatManager, ChatSource
from chatter.chat.clock import Clock
from chatter.chat.log_config import Configuration
from chatter.chat.log_manager import ChatLogManager

logger = logging.getLogger(__name__)


class ChatterPlugin:
    """
    The plugin instance created by the host.

    Subscribes to the host's chat stream on construction and unsubscribes
    and closes all chat logs on dispose.
    """

    def __init__(
        self,
        configuration: Configuration,
        chat_source: ChatSource,
        clock: Clock | None = None,
        default_home_world: str = "",
    ):
        self.configuration = configuration
        self.clock = clock or Clock()
        self.log_manager = ChatLogManager(configuration, self.clock)
        self.chat_manager = ChatManager(
            configuration,
            self.log_manager,
            chat_source,
            self.clock,
            default_home_world,
        )
        self._disposed = False
        logger.info(f"Chatter started with chat logs: {sorted(self.log_manager.logs)}")

    def __enter__(self) -> "ChatterPlugin":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def update_configuration(self, configuration: Configuration) -> None:
        """Apply a changed configuration to the running plugin."""
        self.configuration = configuration
        self.chat_manager.configuration = configuration
        self.log_manager.update_configuration(configuration)

    def dump_logs(self, sink: DiagnosticSink | None = None) -> None:
        self.log_manager.dump_logs(sink)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.chat_manager.dispose()
        self.log_manager.close_all()
        logger.info("Chatter stopped")
