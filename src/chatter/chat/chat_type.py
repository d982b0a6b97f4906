# ABOUTME: The fixed catalogue of in-game chat channels and their log labels
# ABOUTME: Maps chat types to the short names written into chat log lines

from enum import IntEnum


class ChatType(IntEnum):
    """Chat channel identifiers as delivered by the host."""

    DEBUG = 0x0001
    URGENT = 0x0002
    NOTICE = 0x0003
    SAY = 0x000A
    SHOUT = 0x000B
    TELL_OUTGOING = 0x000C
    TELL_INCOMING = 0x000D
    PARTY = 0x000E
    ALLIANCE = 0x000F
    LS1 = 0x0010
    LS2 = 0x0011
    LS3 = 0x0012
    LS4 = 0x0013
    LS5 = 0x0014
    LS6 = 0x0015
    LS7 = 0x0016
    LS8 = 0x0017
    FREE_COMPANY = 0x0018
    NOVICE_NETWORK = 0x001B
    CUSTOM_EMOTE = 0x001C
    STANDARD_EMOTE = 0x001D
    YELL = 0x001E
    CROSS_PARTY = 0x0020
    PVP_TEAM = 0x0024
    CROSS_LINK_SHELL_1 = 0x0025
    ECHO = 0x0038
    SYSTEM_MESSAGE = 0x0039
    SYSTEM_ERROR = 0x003A
    GATHERING_SYSTEM_MESSAGE = 0x003B
    RETAINER_SALE = 0x0047
    CROSS_LINK_SHELL_2 = 0x0065
    CROSS_LINK_SHELL_3 = 0x0066
    CROSS_LINK_SHELL_4 = 0x0067
    CROSS_LINK_SHELL_5 = 0x0068
    CROSS_LINK_SHELL_6 = 0x0069
    CROSS_LINK_SHELL_7 = 0x006A
    CROSS_LINK_SHELL_8 = 0x006B


# Chat types the plugin listens to. Anything else is dropped before logging.
SUPPORTED_CHAT_TYPES: frozenset[ChatType] = frozenset(
    {
        ChatType.ALLIANCE,
        ChatType.CROSS_LINK_SHELL_1,
        ChatType.CROSS_LINK_SHELL_2,
        ChatType.CROSS_LINK_SHELL_3,
        ChatType.CROSS_LINK_SHELL_4,
        ChatType.CROSS_LINK_SHELL_5,
        ChatType.CROSS_LINK_SHELL_6,
        ChatType.CROSS_LINK_SHELL_7,
        ChatType.CROSS_LINK_SHELL_8,
        ChatType.CROSS_PARTY,
        ChatType.CUSTOM_EMOTE,
        ChatType.ECHO,
        ChatType.FREE_COMPANY,
        ChatType.LS1,
        ChatType.LS2,
        ChatType.LS3,
        ChatType.LS4,
        ChatType.LS5,
        ChatType.LS6,
        ChatType.LS7,
        ChatType.LS8,
        ChatType.NOTICE,
        ChatType.NOVICE_NETWORK,
        ChatType.PARTY,
        ChatType.PVP_TEAM,
        ChatType.SAY,
        ChatType.SHOUT,
        ChatType.STANDARD_EMOTE,
        ChatType.SYSTEM_ERROR,
        ChatType.SYSTEM_MESSAGE,
        ChatType.TELL_INCOMING,
        ChatType.TELL_OUTGOING,
        ChatType.URGENT,
        ChatType.YELL,
    }
)

CHAT_TYPE_LABELS: dict[ChatType, str] = {
    ChatType.ALLIANCE: "alliance",
    ChatType.CROSS_LINK_SHELL_1: "cwls1",
    ChatType.CROSS_LINK_SHELL_2: "cwls2",
    ChatType.CROSS_LINK_SHELL_3: "cwls3",
    ChatType.CROSS_LINK_SHELL_4: "cwls4",
    ChatType.CROSS_LINK_SHELL_5: "cwls5",
    ChatType.CROSS_LINK_SHELL_6: "cwls6",
    ChatType.CROSS_LINK_SHELL_7: "cwls7",
    ChatType.CROSS_LINK_SHELL_8: "cwls8",
    ChatType.CROSS_PARTY: "party",
    ChatType.CUSTOM_EMOTE: "emote",
    ChatType.ECHO: "echo",
    ChatType.FREE_COMPANY: "fc",
    ChatType.LS1: "ls1",
    ChatType.LS2: "ls2",
    ChatType.LS3: "ls3",
    ChatType.LS4: "ls4",
    ChatType.LS5: "ls5",
    ChatType.LS6: "ls6",
    ChatType.LS7: "ls7",
    ChatType.LS8: "ls8",
    ChatType.NOTICE: "notice",
    ChatType.NOVICE_NETWORK: "novice",
    ChatType.PARTY: "party",
    ChatType.PVP_TEAM: "pvp",
    ChatType.SAY: "say",
    ChatType.SHOUT: "shout",
    ChatType.STANDARD_EMOTE: "emote",
    ChatType.SYSTEM_ERROR: "error",
    ChatType.SYSTEM_MESSAGE: "system",
    ChatType.TELL_INCOMING: "tell-in",
    ChatType.TELL_OUTGOING: "tell-out",
    ChatType.URGENT: "urgent",
    ChatType.YELL: "yell",
}

_CHAT_TYPES_BY_KEY: dict[str, ChatType] = {
    name.replace("_", ""): member for name, member in ChatType.__members__.items()
}


def is_supported(chat_type: ChatType | int) -> bool:
    return chat_type in SUPPORTED_CHAT_TYPES


def type_to_name(chat_type: ChatType | int, is_debug: bool = False) -> str:
    """
    Return the label written into log lines for a chat type.

    An empty label means the type is never logged. In debug mode a type
    without a label falls back to its enum name (or number) so it still shows up.

    Args:
        chat_type: The chat type to name
        is_debug: Whether the plugin runs in debug mode

    Returns:
        The label, possibly empty
    """
    label = CHAT_TYPE_LABELS.get(chat_type)  # type: ignore[call-overload]
    if label:
        return label
    if not is_debug:
        return ""
    try:
        return ChatType(chat_type).name.lower()
    except ValueError:
        return str(int(chat_type))


def parse_chat_type(value: str | int) -> ChatType:
    """
    Parse a chat type from its name or number.

    Names are matched ignoring case, "-" and "_", so "TellIncoming",
    "tell_incoming" and "TELL-INCOMING" are all accepted.

    Raises:
        ValueError: If the value does not name a known chat type
    """
    if isinstance(value, int):
        return ChatType(value)
    key = value.strip().replace("-", "").replace("_", "").upper()
    if key.isdigit():
        return ChatType(int(key))
    if key in _CHAT_TYPES_BY_KEY:
        return _CHAT_TYPES_BY_KEY[key]
    raise ValueError(f"Unknown chat type: {value}")
