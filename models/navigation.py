"""
models/navigation.py
--------------------
Snapshot of a displayed screen, used by the "back" button.
"""

from dataclasses import dataclass
from typing import Optional

from telegram import InlineKeyboardMarkup


@dataclass(frozen=True)
class NavState:
    """
    Everything needed to re-render a screen.

    Attributes:
        text: Message text of the screen.
        keyboard: Inline keyboard of the screen, if any.
        message_id: Message the screen was displayed in.
    """
    text: str
    keyboard: Optional[InlineKeyboardMarkup]
    message_id: int
