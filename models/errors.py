"""
models/errors.py
----------------
Error hierarchy of the bot.

Startup errors (ConfigError, TransportAuthError) are fatal. Everything else is
raised while processing a single update and is logged by the processing loop.
"""


class BotError(Exception):
    """Base class for all bot errors."""


class ConfigError(BotError):
    """Missing or malformed configuration at startup."""


class TransportAuthError(BotError):
    """The transport client could not be created or authorized."""


class TransportSendError(BotError):
    """A send, edit or callback answer failed at runtime."""

    def __init__(self, message: str, chat_id: int | None = None):
        super().__init__(message)
        self.chat_id = chat_id


class DispatchError(BotError):
    """A command handler raised while handling a command."""

    def __init__(self, command: str, cause: Exception):
        super().__init__(f"Handler for /{command} failed: {cause}")
        self.command = command
        self.cause = cause


class CallbackParseError(BotError):
    """Callback data carries a malformed suffix (e.g. a non-numeric page)."""


class CourseNotFoundError(BotError):
    """No course in the catalog has the requested id."""

    def __init__(self, course_id: int):
        super().__init__(f"Course {course_id} not found")
        self.course_id = course_id


class InvalidLanguageError(BotError, ValueError):
    """Attempt to store a language code outside the supported set."""
