# ABOUTME: Structured chat text made of plain text and player reference items
# ABOUTME: Parses host rich-text payloads and renders them with or without home worlds

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

# The game client renders icons and decorations with glyphs in the private use area.
_SPECIAL_CHARACTERS = re.compile("[\ue000-\uf8ff]")


def clean_special_characters(text: str) -> str:
    """Remove game glyphs from a player name."""
    return _SPECIAL_CHARACTERS.sub("", text).strip()


def replace_special_characters(text: str) -> str:
    """Remove game glyphs from free text, keeping surrounding whitespace."""
    return _SPECIAL_CHARACTERS.sub("", text)


# -- Host payloads --


@dataclass(frozen=True)
class PlayerPayload:
    """A link to a player, followed in the stream by the player's name as text."""

    player_name: str
    world: str


@dataclass(frozen=True)
class TextPayload:
    text: str | None


@dataclass(frozen=True)
class AutoTranslatePayload:
    text: str | None


Payload = PlayerPayload | TextPayload | AutoTranslatePayload


# -- Chat string items --


@dataclass(frozen=True)
class PlayerItem:
    """A player's name and home world."""

    name: str
    world: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", clean_special_characters(self.name))

    def __str__(self) -> str:
        return f"{self.name}@{self.world}"

    def as_text(self, include_server: bool) -> str:
        return f"{self.name}@{self.world}" if include_server else self.name


@dataclass(frozen=True)
class TextItem:
    """A run of plain text."""

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", replace_special_characters(self.text))

    def __str__(self) -> str:
        return self.text

    def as_text(self, include_server: bool) -> str:
        return self.text


ChatItem = PlayerItem | TextItem


class _NameState(Enum):
    NOTHING = auto()
    LOOKING_FOR_NAME = auto()
    LOOKING_FOR_WORLD = auto()


class ChatString:
    """
    A string from the chat system.

    The host hands chat text over as a list of payloads: text, player links,
    auto-translate phrases and so on. A ChatString keeps only what matters for
    logging, as an ordered list of text and player items.
    """

    def __init__(self, items: Iterable[ChatItem] = ()):
        self._items: list[ChatItem] = list(items)

    @classmethod
    def from_text(cls, text: str) -> "ChatString":
        return cls([TextItem(text)])

    @classmethod
    def from_player(cls, name: str, world: str) -> "ChatString":
        return cls([PlayerItem(name, world)])

    @classmethod
    def from_payloads(cls, payloads: Iterable[Payload]) -> "ChatString":
        """
        Build a ChatString from host payloads.

        A player payload is echoed by the host as text holding the player's
        name, optionally followed by text starting with the world name. Both
        echoes are removed so the player appears only once.

        Args:
            payloads: The host payloads in stream order

        Returns:
            The parsed ChatString
        """
        items: list[ChatItem] = []
        state = _NameState.NOTHING
        player: PlayerItem | None = None

        for payload in payloads:
            if isinstance(payload, PlayerPayload):
                player = PlayerItem(payload.player_name, payload.world)
                items.append(player)
                state = _NameState.LOOKING_FOR_NAME
                continue

            if isinstance(payload, AutoTranslatePayload):
                if payload.text and payload.text.strip():
                    items.append(TextItem(payload.text))
                state = _NameState.NOTHING
                player = None
                continue

            text = payload.text or ""
            if state is _NameState.LOOKING_FOR_NAME and player is not None:
                state = _NameState.NOTHING
                # endswith: the name may be preceded by special characters
                if text == player.name or text.endswith(player.name):
                    state = _NameState.LOOKING_FOR_WORLD
                    continue
            elif state is _NameState.LOOKING_FOR_WORLD and player is not None:
                state = _NameState.NOTHING
                if text.startswith(player.world):
                    text = text[len(player.world):]
                player = None

            if text.strip():
                items.append(TextItem(text))

        return cls(items)

    @property
    def items(self) -> tuple[ChatItem, ...]:
        return tuple(self._items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"ChatString({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChatString):
            return NotImplemented
        return self._items == other._items

    def has_initial_player(self) -> bool:
        """True if the first item is a player."""
        return bool(self._items) and isinstance(self._items[0], PlayerItem)

    def get_initial_player_item(self, name: str, world: str) -> PlayerItem:
        """Return the initial player, or a new player built from the given name and world."""
        if self.has_initial_player():
            return self._items[0]  # type: ignore[return-value]
        return PlayerItem(name, world)

    def as_text(self, include_server: bool) -> str:
        """Concatenate all items, appending @world to players when include_server is set."""
        return "".join(item.as_text(include_server) for item in self._items)
