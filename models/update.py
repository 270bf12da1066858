"""
models/update.py
----------------
Inbound updates, already classified by the transport.

The transport converts every raw platform update into exactly one of the
variants below; handlers never see platform objects directly.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from telegram import InlineKeyboardMarkup


@dataclass(frozen=True)
class CommandUpdate:
    """
    A `/command args` message.

    Attributes:
        chat_id: Chat the command was sent in.
        user_id: Telegram ID of the sender.
        name: Command name without the slash and bot mention.
        args: Everything after the command, stripped.
        first_name, last_name, username, language_code, is_bot:
            Sender profile fields, used by /info.
    """
    chat_id: int
    user_id: int
    name: str
    args: str = ""
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    language_code: str = ""
    is_bot: bool = False


@dataclass(frozen=True)
class CallbackUpdate:
    """
    A tap on an inline button.

    `current_text` and `current_keyboard` describe the message the button
    belongs to, as it looked at the time of the tap.
    """
    id: str
    chat_id: int
    user_id: int
    message_id: int
    data: str
    current_text: str = ""
    current_keyboard: Optional[InlineKeyboardMarkup] = field(default=None, compare=False)


@dataclass(frozen=True)
class TextUpdate:
    """A plain text message (including reply-keyboard taps)."""
    chat_id: int
    user_id: int
    text: str


@dataclass(frozen=True)
class OtherUpdate:
    """Anything the bot does not handle (stickers, edits, joins...)."""


Update = Union[CommandUpdate, CallbackUpdate, TextUpdate, OtherUpdate]


def chat_key(update: Update) -> Optional[int]:
    """Return the chat an update belongs to, or None for OtherUpdate."""
    if isinstance(update, OtherUpdate):
        return None
    return update.chat_id
