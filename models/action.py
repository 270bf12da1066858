"""
models/action.py
----------------
Outbound actions produced by handlers and executed by the transport.
"""

from dataclasses import dataclass
from typing import Optional, Union

from telegram import InlineKeyboardMarkup, ReplyKeyboardMarkup

Keyboard = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup]


@dataclass(frozen=True)
class SendMessage:
    """Send a new message, optionally with a keyboard."""
    chat_id: int
    text: str
    keyboard: Optional[Keyboard] = None
    parse_mode: Optional[str] = None


@dataclass(frozen=True)
class EditMessage:
    """Replace text and inline keyboard of an existing message.

    A `keyboard` of None removes the inline keyboard.
    """
    chat_id: int
    message_id: int
    text: str
    keyboard: Optional[InlineKeyboardMarkup] = None


@dataclass(frozen=True)
class RemoveReplyKeyboard:
    """Send `text` and hide the reply keyboard."""
    chat_id: int
    text: str


@dataclass(frozen=True)
class AckCallback:
    """Answer a callback query; a non-empty notice is shown as a toast."""
    callback_id: str
    notice: str = ""


Action = Union[SendMessage, EditMessage, RemoveReplyKeyboard, AckCallback]
