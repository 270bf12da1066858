"""
transport/base.py
-----------------
Abstract messaging transport consumed by the update processing loop.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from models.action import Action
from models.update import Update


class Transport(ABC):
    """
    Source of updates and sink of actions.

    Implementations deliver updates in platform order and raise
    TransportSendError when a single action cannot be delivered.
    """

    @abstractmethod
    def poll(self) -> AsyncIterator[Update]:
        """Yield updates until the transport is closed or fails."""

    @abstractmethod
    async def send(self, action: Action) -> Optional[int]:
        """
        Execute one action.

        Returns:
            The id of the sent or edited message, or None for callback answers.

        Raises:
            TransportSendError: If the platform rejected the request.
        """

    @abstractmethod
    async def ack(self, callback_id: str, notice: str = "") -> None:
        """Answer a callback query, optionally with a toast."""

    @abstractmethod
    def close(self) -> None:
        """Stop polling; `poll()` ends after the request in flight."""
