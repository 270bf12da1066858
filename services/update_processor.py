"""
services/update_processor.py
----------------------------
The update processing loop.

Responsibilities:
    - Pull updates from the transport in platform order.
    - Route each update to its handler and deliver the resulting actions.
    - Keep actions of one chat in update order while different chats are
      processed concurrently.
    - Log and skip failures so one bad update never stops the loop.
"""

import asyncio
from typing import Optional

from handlers.router import UpdateRouter
from models.action import Action
from models.errors import BotError, TransportSendError
from models.update import Update, chat_key
from transport.base import Transport
from utils.logger import get_logger

logger = get_logger(__name__)


class UpdateProcessor:
    """
    Drives a Transport with an UpdateRouter.

    Each update runs in its own task. Tasks of the same chat take that chat's
    lock in creation order (asyncio locks are FIFO), so a chat's actions reach
    the transport in the order its updates arrived.
    """

    def __init__(self, transport: Transport, router: UpdateRouter):
        self.transport = transport
        self.router = router
        self._chat_locks: dict[Optional[int], asyncio.Lock] = {}
        # tasks holding or waiting for each chat lock
        self._chat_users: dict[Optional[int], int] = {}
        self._tasks: set[asyncio.Task] = set()

    async def run(self) -> None:
        """Process updates until the transport's stream ends, then drain."""
        logger.info("Processing updates...")
        async for update in self.transport.poll():
            task = asyncio.create_task(self.process(update))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        await self.drain()
        logger.info("Update stream closed.")

    async def drain(self) -> None:
        """Wait for every in-flight update to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def process(self, update: Update) -> None:
        """Route one update and deliver its actions under the chat's lock."""
        key = chat_key(update)
        lock = self._chat_locks.get(key)
        if lock is None:
            lock = self._chat_locks[key] = asyncio.Lock()
        self._chat_users[key] = self._chat_users.get(key, 0) + 1
        try:
            async with lock:
                await self._handle(update, key)
        finally:
            self._chat_users[key] -= 1
            if not self._chat_users[key]:
                del self._chat_users[key]
                del self._chat_locks[key]

    async def _handle(self, update: Update, key: Optional[int]) -> None:
        try:
            actions = self.router.route(update)
        except BotError as e:
            logger.error(f"Failed to handle update for chat {key}: {e}", exc_info=e)
            return
        except Exception:
            logger.exception(f"Unexpected error while handling update for chat {key}")
            return

        for action in actions:
            await self.deliver(action, key)

    async def deliver(self, action: Action, chat_id: Optional[int]) -> None:
        """Send one action; delivery failures are logged and swallowed."""
        try:
            await self.transport.send(action)
        except TransportSendError as e:
            logger.error(f"Failed to send {type(action).__name__} to chat {e.chat_id or chat_id}: {e}")
