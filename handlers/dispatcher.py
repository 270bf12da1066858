"""
handlers/dispatcher.py
----------------------
Routes `/command` messages to the registered command handlers.
"""

from abc import ABC, abstractmethod

from models.action import Action, SendMessage
from models.errors import DispatchError
from models.update import CommandUpdate
from utils.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_COMMAND_TEXT = "Неизвестная команда. Используйте /help для списка команд."


class Command(ABC):
    """A bot command such as /start."""

    @abstractmethod
    def name(self) -> str:
        """Command name without the leading slash."""

    @abstractmethod
    def handle(self, cmd: CommandUpdate) -> list[Action]:
        """Handle one invocation and return the actions to send."""


class Dispatcher:
    """
    Name → Command registry.

    Commands are registered during startup; `freeze()` closes registration
    before updates start flowing.
    """

    def __init__(self):
        self._commands: dict[str, Command] = {}
        self._frozen = False

    def register(self, command: Command) -> "Dispatcher":
        """
        Add a command.

        Raises:
            ValueError: If the name is taken or registration is closed.
        """
        name = command.name()
        if self._frozen:
            raise ValueError(f"Cannot register /{name}: dispatcher is frozen")
        if name in self._commands:
            raise ValueError(f"Command /{name} is already registered")
        self._commands[name] = command
        logger.debug(f"Registered command /{name}")
        return self

    def freeze(self) -> None:
        self._frozen = True

    def commands(self) -> list[str]:
        return list(self._commands)

    def route(self, cmd: CommandUpdate) -> list[Action]:
        """
        Run the command named by `cmd.name`.

        Unknown commands get a generic hint instead of an error.

        Raises:
            DispatchError: If the command handler itself raised.
        """
        command = self._commands.get(cmd.name)
        if command is None:
            logger.info(f"Unknown command /{cmd.name} from chat {cmd.chat_id}")
            return [SendMessage(cmd.chat_id, UNKNOWN_COMMAND_TEXT)]

        try:
            return list(command.handle(cmd))
        except Exception as e:
            raise DispatchError(cmd.name, e) from e
