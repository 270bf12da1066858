"""
repositories/navigation_repo.py
-------------------------------
Per-chat navigation history powering the universal "back" button.
"""

import threading
from typing import Optional

from models.navigation import NavState
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 32


class NavigationRepository:
    """
    Stack of previously displayed screens for every chat.

    The top of a chat's stack is the screen the user was looking at before
    the last transition. One lock guards the whole mapping and is held only
    for the duration of a single push, pop or clear.
    """

    def __init__(self, max_depth: int = MAX_DEPTH):
        self.max_depth = max_depth
        self._stacks: dict[int, list[NavState]] = {}
        self._lock = threading.Lock()

    def push(self, chat_id: int, state: NavState) -> None:
        """Append `state`; the oldest frame is dropped beyond `max_depth`."""
        with self._lock:
            stack = self._stacks.setdefault(chat_id, [])
            stack.append(state)
            if len(stack) > self.max_depth:
                del stack[: len(stack) - self.max_depth]

    def pop(self, chat_id: int) -> Optional[NavState]:
        """
        Remove and return the most recent frame of a chat.

        The chat's entry is deleted once its stack becomes empty.

        Returns:
            The popped NavState, or None when there is no history.
        """
        with self._lock:
            stack = self._stacks.get(chat_id)
            if not stack:
                self._stacks.pop(chat_id, None)
                return None
            state = stack.pop()
            if not stack:
                del self._stacks[chat_id]
            return state

    def depth(self, chat_id: int) -> int:
        with self._lock:
            return len(self._stacks.get(chat_id, ()))

    def clear(self, chat_id: int) -> None:
        with self._lock:
            self._stacks.pop(chat_id, None)
        logger.debug(f"chat {chat_id}: navigation history cleared")
