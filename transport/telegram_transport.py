"""
transport/telegram_transport.py
-------------------------------
Telegram Bot API transport built on python-telegram-bot's `telegram.Bot`.

Long-polls `getUpdates`, converts every raw update into a models.update
variant and maps actions onto sendMessage / editMessageText /
answerCallbackQuery.
"""

import asyncio
from typing import AsyncIterator, Optional

import telegram
from telegram import InlineKeyboardMarkup, ReplyKeyboardRemove
from telegram.error import (
    BadRequest,
    Forbidden,
    InvalidToken,
    NetworkError,
    RetryAfter,
    TelegramError,
    TimedOut,
)

from models.action import Action, AckCallback, EditMessage, RemoveReplyKeyboard, SendMessage
from models.errors import TransportAuthError, TransportSendError
from models.profile import BotProfile
from models.update import CallbackUpdate, CommandUpdate, OtherUpdate, TextUpdate, Update
from transport.base import Transport
from utils.logger import get_logger

logger = get_logger(__name__)

ALLOWED_UPDATES = ["message", "callback_query"]
RETRY_DELAY_SECONDS = 3.0


def parse_command(text: str) -> Optional[tuple[str, str, str]]:
    """
    Split a `/command@bot args` message.

    Returns:
        (name, mention, args), or None if `text` is not a command.
    """
    if not text.startswith("/"):
        return None
    parts = text.split(maxsplit=1)
    head = parts[0][1:]
    args = parts[1].strip() if len(parts) > 1 else ""
    name, _, mention = head.partition("@")
    if not name:
        return None
    return name, mention, args


def convert_update(raw: telegram.Update, bot_username: str = "") -> Update:
    """
    Classify a raw Telegram update.

    Commands addressed to another bot (`/start@other_bot`) are ignored.
    """
    query = raw.callback_query
    if query is not None:
        message = query.message
        if message is None or query.data is None:
            return OtherUpdate()
        # inaccessible (old) messages carry no text or markup
        keyboard = getattr(message, "reply_markup", None)
        return CallbackUpdate(
            id=query.id,
            chat_id=message.chat.id,
            user_id=query.from_user.id,
            message_id=message.message_id,
            data=query.data,
            current_text=getattr(message, "text", None) or "",
            current_keyboard=keyboard if isinstance(keyboard, InlineKeyboardMarkup) else None,
        )

    message = raw.message
    if message is None or message.text is None:
        return OtherUpdate()

    user = message.from_user
    user_id = user.id if user else message.chat.id

    command = parse_command(message.text)
    if command is None:
        return TextUpdate(chat_id=message.chat.id, user_id=user_id, text=message.text)

    name, mention, args = command
    if mention and bot_username and mention.lower() != bot_username.lower():
        return OtherUpdate()
    return CommandUpdate(
        chat_id=message.chat.id,
        user_id=user_id,
        name=name,
        args=args,
        first_name=user.first_name if user else "",
        last_name=(user.last_name or "") if user else "",
        username=(user.username or "") if user else "",
        language_code=(user.language_code or "") if user else "",
        is_bot=user.is_bot if user else False,
    )


class TelegramTransport(Transport):
    """
    Transport over the Telegram Bot API.

    Usage:
        async with TelegramTransport(token, timeout=60) as transport:
            async for update in transport.poll():
                ...

    Entering the context authorizes the bot (`getMe`) and fills `profile`.
    """

    def __init__(self, token: str, timeout: int = 60, bot: Optional[telegram.Bot] = None):
        """
        Args:
            token: Bot token from @BotFather.
            timeout: Long-poll timeout in seconds.
            bot: Pre-built client, mainly for tests.

        Raises:
            TransportAuthError: If the client cannot be created from `token`.
        """
        try:
            self.bot = bot or telegram.Bot(token)
        except InvalidToken as e:
            raise TransportAuthError(f"Invalid bot token: {e}") from e
        self.timeout = timeout
        self.profile: Optional[BotProfile] = None
        self._offset: Optional[int] = None
        self._closed = False

    async def __aenter__(self) -> "TelegramTransport":
        try:
            await self.bot.initialize()
        except TelegramError as e:
            raise TransportAuthError(f"Failed to authorize the bot: {e}") from e
        me = self.bot.bot
        self.profile = BotProfile(id=me.id, first_name=me.first_name, username=me.username or "")
        logger.info(f"Authorized as @{self.profile.username}")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
        await self._confirm_handled()
        await self.bot.shutdown()

    async def _confirm_handled(self) -> None:
        """
        Tell Telegram the last polled batch was handled.

        getUpdates only confirms updates below the offset it is called with,
        so without this call the last batch is delivered again after a restart.
        """
        if self._offset is None:
            return
        try:
            await self.bot.get_updates(offset=self._offset, timeout=0, allowed_updates=ALLOWED_UPDATES)
        except TelegramError as e:
            logger.warning(f"Could not confirm updates below {self._offset}: {e}")

    def close(self) -> None:
        self._closed = True

    async def poll(self) -> AsyncIterator[Update]:
        username = self.profile.username if self.profile else ""
        while not self._closed:
            try:
                raw_updates = await self.bot.get_updates(
                    offset=self._offset,
                    timeout=self.timeout,
                    allowed_updates=ALLOWED_UPDATES,
                )
            except TimedOut:
                continue
            except (BadRequest, Forbidden, InvalidToken) as e:
                logger.error(f"Polling stopped: {e}")
                break
            except (NetworkError, RetryAfter) as e:
                logger.warning(f"Polling failed, retrying in {RETRY_DELAY_SECONDS:.0f}s: {e}")
                await asyncio.sleep(RETRY_DELAY_SECONDS)
                continue
            except TelegramError as e:
                logger.error(f"Polling stopped: {e}")
                break

            for raw in raw_updates:
                self._offset = raw.update_id + 1
                yield convert_update(raw, username)

    async def send(self, action: Action) -> Optional[int]:
        if isinstance(action, AckCallback):
            await self.ack(action.callback_id, action.notice)
            return None

        chat_id = action.chat_id
        try:
            if isinstance(action, SendMessage):
                message = await self.bot.send_message(
                    chat_id=chat_id,
                    text=action.text,
                    reply_markup=action.keyboard,
                    parse_mode=action.parse_mode,
                )
                return message.message_id

            if isinstance(action, EditMessage):
                await self.bot.edit_message_text(
                    text=action.text,
                    chat_id=chat_id,
                    message_id=action.message_id,
                    reply_markup=action.keyboard,
                )
                return action.message_id

            if isinstance(action, RemoveReplyKeyboard):
                message = await self.bot.send_message(
                    chat_id=chat_id,
                    text=action.text,
                    reply_markup=ReplyKeyboardRemove(),
                )
                return message.message_id
        except BadRequest as e:
            # re-rendering an unchanged screen (e.g. "courses_info") is harmless
            if "message is not modified" in str(e).lower():
                logger.debug(f"chat {chat_id}: message {getattr(action, 'message_id', '?')} unchanged")
                return getattr(action, "message_id", None)
            raise TransportSendError(f"Telegram rejected {type(action).__name__}: {e}", chat_id) from e
        except TelegramError as e:
            raise TransportSendError(f"Failed to deliver {type(action).__name__}: {e}", chat_id) from e

        raise TypeError(f"Unsupported action: {action!r}")

    async def ack(self, callback_id: str, notice: str = "") -> None:
        try:
            await self.bot.answer_callback_query(callback_query_id=callback_id, text=notice or None)
        except TelegramError as e:
            raise TransportSendError(f"Failed to answer callback {callback_id}: {e}") from e
