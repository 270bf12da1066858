"""
handlers/start_handler.py
--------------------------
Handles the public commands: /start, /help, /info, /echo and /language.
"""

from telegram.constants import ParseMode

from handlers.dispatcher import Command
from keyboards.reply import language_reply_keyboard, main_reply_keyboard
from models.action import Action, SendMessage
from models.update import CommandUpdate
from repositories.navigation_repo import NavigationRepository
from services.screens import GREETING_TEXT, HELP_TEXT
from utils.logger import get_logger

logger = get_logger(__name__)

ECHO_USAGE_TEXT = "Пожалуйста, укажите текст для повторения. Использование: /echo <текст>"
LANGUAGE_PROMPT_TEXT = "🌐 Выберите язык интерфейса:"


class StartCommand(Command):
    """Greet the user, show the main reply keyboard and start a fresh history."""

    def __init__(self, navigation: NavigationRepository):
        self.navigation = navigation

    def name(self) -> str:
        return "start"

    def handle(self, cmd: CommandUpdate) -> list[Action]:
        logger.info(f"User {cmd.user_id} ({cmd.first_name or '-'}) started the bot.")
        self.navigation.clear(cmd.chat_id)
        return [SendMessage(cmd.chat_id, GREETING_TEXT, keyboard=main_reply_keyboard())]


class HelpCommand(Command):
    """Show the command list; also brings the reply keyboard back."""

    def name(self) -> str:
        return "help"

    def handle(self, cmd: CommandUpdate) -> list[Action]:
        return [
            SendMessage(
                cmd.chat_id,
                HELP_TEXT,
                keyboard=main_reply_keyboard(),
                parse_mode=ParseMode.HTML,
            )
        ]


class InfoCommand(Command):
    def name(self) -> str:
        return "info"

    def handle(self, cmd: CommandUpdate) -> list[Action]:
        """Describe the calling user as Telegram reported them."""
        lines = [
            "Информация о вас:\n",
            f"ID: {cmd.user_id}",
            f"Имя: {cmd.first_name}",
        ]
        if cmd.last_name:
            lines.append(f"Фамилия: {cmd.last_name}")
        if cmd.username:
            lines.append(f"Username: @{cmd.username}")
        lines.append(f"Язык: {cmd.language_code}")
        lines.append(f"Бот: {'да' if cmd.is_bot else 'нет'}")
        return [SendMessage(cmd.chat_id, "\n".join(lines))]


class EchoCommand(Command):
    """
    Repeat the command arguments back.

    Usage:
        /echo привет → привет
    """

    def name(self) -> str:
        return "echo"

    def handle(self, cmd: CommandUpdate) -> list[Action]:
        if not cmd.args:
            return [SendMessage(cmd.chat_id, ECHO_USAGE_TEXT)]
        return [SendMessage(cmd.chat_id, cmd.args)]


class LanguageCommand(Command):
    """Offer the language reply keyboard (🇷🇺 Русский / 🇬🇧 English)."""

    def name(self) -> str:
        return "language"

    def handle(self, cmd: CommandUpdate) -> list[Action]:
        return [SendMessage(cmd.chat_id, LANGUAGE_PROMPT_TEXT, keyboard=language_reply_keyboard())]
