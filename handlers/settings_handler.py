"""
handlers/settings_handler.py
-----------------------------
Handles the admin-only /settings command.
"""

from typing import Iterable

from handlers.dispatcher import Command
from models.action import Action, SendMessage
from models.update import CommandUpdate
from security.auth import admin_only


class SettingsCommand(Command):
    """
    Show the running bot configuration to admins.

    Args:
        admin_ids: Telegram IDs allowed to run the command.
        debug: Configured debug flag.
        timeout: Configured long-poll timeout in seconds.
    """

    def __init__(self, admin_ids: Iterable[int], debug: bool, timeout: int):
        self.admin_ids = tuple(admin_ids)
        self.debug = debug
        self.timeout = timeout

    def name(self) -> str:
        return "settings"

    @admin_only
    def handle(self, cmd: CommandUpdate) -> list[Action]:
        text = (
            "Настройки бота:\n"
            f"Режим отладки: {'true' if self.debug else 'false'}\n"
            f"Таймаут: {self.timeout} секунд"
        )
        return [SendMessage(cmd.chat_id, text)]
