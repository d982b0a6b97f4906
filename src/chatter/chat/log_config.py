# ABOUTME: Pydantic models for per-log and plugin-wide chat log configuration
# ABOUTME: Validates channel filters, templates, wrap settings and output locations

from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chatter.chat.chat_type import SUPPORTED_CHAT_TYPES, ChatType, parse_chat_type

ALL_LOG_NAME = "all"
# Zero padded: strftime has no portable directive for an unpadded month or day
DEFAULT_DATE_TIME_FORMAT = "%m-%d-%Y %H:%M:%S"
DEFAULT_FORMAT = "{0} {1} [{3}]: {4}"
DEFAULT_LOG_DIRECTORY = Path.home() / "Documents" / "FFXIV Chatter"


class LogConfiguration(BaseModel):
    """
    Configuration for one chat log (one output file series).

    The chat log reads this model on every call and never changes it, so
    edits made by the owner take effect on the next message.

    Attributes:
        name: Name of the log group, also the default file base name
        is_active: Inactive logs are not created by the manager
        chat_type_filter_flags: Which chat types are written; missing types are off
        debug_include_all_messages: Write every message regardless of filters
        date_time_format: strftime format for the {0} field
        format: Line template with indexed fields {0} to {5}
        directory: Output directory; inherited from the plugin configuration when unset
        file_base_name: Base name used in the file name; defaults to the log name
        include_server: Append @world to player names
        message_wrap_width: Wrap column, 0 disables wrapping
        message_wrap_indentation: Spaces in front of every continuation line
        users: Full player name (Name@World) to the name that should be logged
    """

    name: str
    is_active: bool = True
    chat_type_filter_flags: dict[ChatType, bool] = Field(default_factory=dict)
    debug_include_all_messages: bool = False
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    format: str = DEFAULT_FORMAT
    directory: Path | None = None
    file_base_name: str | None = None
    include_server: bool = False
    message_wrap_width: Annotated[int, Field(ge=0)] = 0
    message_wrap_indentation: Annotated[int, Field(ge=0)] = 0
    users: dict[str, str] = Field(default_factory=dict)

    @field_validator("chat_type_filter_flags", mode="before")
    @classmethod
    def parse_filter_keys(cls, v: Any) -> Any:
        """Accept chat type names ("Say", "tell_incoming") as well as numbers as keys."""
        if not isinstance(v, dict):
            return v
        try:
            return {parse_chat_type(key): value for key, value in v.items()}
        except ValueError as e:
            raise ValueError(f"Invalid chat type filter: {e}") from e

    @field_validator("name", "file_base_name")
    @classmethod
    def validate_file_safe(cls, v: str | None) -> str | None:
        """Names end up in file names, so they cannot be blank or contain path separators."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Name cannot be blank")
        if any(sep in v for sep in ("/", "\\")):
            raise ValueError(f"Name cannot contain path separators: {v}")
        return v

    @property
    def base_name(self) -> str:
        return self.file_base_name or self.name

    @property
    def output_directory(self) -> Path:
        return self.directory if self.directory is not None else DEFAULT_LOG_DIRECTORY

    def is_enabled(self, chat_type: ChatType) -> bool:
        return self.chat_type_filter_flags.get(chat_type, False)

    @classmethod
    def all_messages(cls, name: str = ALL_LOG_NAME, **kwargs: Any) -> "LogConfiguration":
        """Build a log configuration with every supported chat type enabled."""
        flags = {chat_type: True for chat_type in sorted(SUPPORTED_CHAT_TYPES)}
        return cls(name=name, chat_type_filter_flags=flags, **kwargs)


class Configuration(BaseModel):
    """
    Plugin-wide configuration: debug mode, default output directory and the chat logs.

    Chat logs are keyed by name. When none are configured a single "all" log
    with every supported chat type enabled is created.
    """

    is_debug: bool = False
    log_directory: Path = DEFAULT_LOG_DIRECTORY
    chat_logs: dict[str, LogConfiguration] = Field(default_factory=dict)

    @field_validator("chat_logs", mode="before")
    @classmethod
    def fill_log_names(cls, v: Any) -> Any:
        """Let log entries omit their name; the dictionary key is used instead."""
        if not isinstance(v, dict):
            return v
        filled = {}
        for key, value in v.items():
            if isinstance(value, dict) and "name" not in value:
                value = {**value, "name": key}
            filled[key] = value
        return filled

    @model_validator(mode="after")
    def apply_defaults(self) -> "Configuration":
        if not self.chat_logs:
            self.chat_logs[ALL_LOG_NAME] = LogConfiguration.all_messages()
        for log_config in self.chat_logs.values():
            if log_config.directory is None:
                log_config.directory = self.log_directory
        return self
