"""
security/auth.py
-----------------
Access control for privileged bot commands.
Only users whose Telegram ID is in the configured admin list may use them.
"""

from functools import wraps
from typing import Callable, Iterable

from models.action import SendMessage
from models.update import CommandUpdate
from utils.logger import get_logger

logger = get_logger(__name__)

ADMIN_ONLY_TEXT = "Эта команда доступна только администраторам"


def is_admin(user_id: int, admin_ids: Iterable[int]) -> bool:
    """Return True if `user_id` is one of `admin_ids`."""
    for admin_id in admin_ids:
        if admin_id == user_id:
            return True
    return False


def admin_only(func: Callable):
    """
    Decorator that restricts a command's `handle` method to admins.

    Usage:
        class SettingsCommand(Command):
            def __init__(self, admin_ids, ...):
                self.admin_ids = admin_ids

            @admin_only
            def handle(self, cmd):
                ...

    Behavior:
        - The owning command must expose `admin_ids`.
        - Non-admins get a refusal message; the wrapped method is not called.
        - Refused attempts are logged.
    """
    @wraps(func)
    def wrapper(self, cmd: CommandUpdate, *args, **kwargs):
        if not is_admin(cmd.user_id, self.admin_ids):
            logger.warning(
                f"🚫 Refused /{cmd.name}: user_id={cmd.user_id}, "
                f"username={cmd.username or '-'}, chat_id={cmd.chat_id}"
            )
            return [SendMessage(cmd.chat_id, ADMIN_ONLY_TEXT)]
        return func(self, cmd, *args, **kwargs)

    return wrapper
