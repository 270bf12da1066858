"""
handlers/router.py
------------------
Top-level router: sends each classified update to the handler for its kind.
"""

from handlers.callback_router import CallbackRouter
from handlers.dispatcher import Dispatcher
from handlers.message_handler import MessageHandler
from models.action import Action
from models.update import CallbackUpdate, CommandUpdate, TextUpdate, Update
from utils.logger import get_logger

logger = get_logger(__name__)


class UpdateRouter:
    """Command → Dispatcher, Callback → CallbackRouter, Text → MessageHandler."""

    def __init__(self, dispatcher: Dispatcher, callbacks: CallbackRouter, messages: MessageHandler):
        self.dispatcher = dispatcher
        self.callbacks = callbacks
        self.messages = messages

    def route(self, update: Update) -> list[Action]:
        if isinstance(update, CommandUpdate):
            logger.debug(f"chat {update.chat_id}: command /{update.name}")
            return self.dispatcher.route(update)
        if isinstance(update, CallbackUpdate):
            logger.debug(f"chat {update.chat_id}: callback {update.data!r}")
            return self.callbacks.route(update)
        if isinstance(update, TextUpdate):
            logger.debug(f"chat {update.chat_id}: text message")
            return self.messages.handle(update)
        logger.debug("Ignoring unsupported update")
        return []
