"""
main.py
-------
Entry point for the menu bot.

Responsibilities:
    - Load configuration.
    - Authorize the Telegram transport.
    - Register command handlers and build the update router.
    - Run the update processing loop until the stream closes.

Exit codes: 0 on clean shutdown, 2 on configuration errors, 3 when the bot
cannot be authorized.
"""

import asyncio
import signal
import sys

from config import BotConfig, load_config
from handlers.callback_router import CallbackRouter
from handlers.dispatcher import Dispatcher
from handlers.message_handler import MessageHandler
from handlers.router import UpdateRouter
from handlers.settings_handler import SettingsCommand
from handlers.start_handler import EchoCommand, HelpCommand, InfoCommand, LanguageCommand, StartCommand
from models.errors import ConfigError, TransportAuthError
from models.profile import BotProfile
from repositories.navigation_repo import NavigationRepository
from repositories.preference_repo import PreferenceRepository
from services.course_service import CourseService
from services.update_processor import UpdateProcessor
from transport.telegram_transport import TelegramTransport
from utils.logger import get_logger, set_debug

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_AUTH_ERROR = 3


def build_router(config: BotConfig, bot: BotProfile) -> UpdateRouter:
    """
    Wire repositories, services and handlers into an UpdateRouter.

    All per-user state starts empty.
    """
    courses = CourseService()
    preferences = PreferenceRepository(total_pages=courses.total_pages)
    navigation = NavigationRepository()

    # ── Register command handlers ─────────────────────────
    dispatcher = Dispatcher()
    dispatcher.register(StartCommand(navigation))
    dispatcher.register(HelpCommand())
    dispatcher.register(InfoCommand())
    dispatcher.register(SettingsCommand(config.admin_ids, debug=config.debug, timeout=config.timeout))
    dispatcher.register(EchoCommand())
    dispatcher.register(LanguageCommand())
    dispatcher.freeze()

    return UpdateRouter(
        dispatcher=dispatcher,
        callbacks=CallbackRouter(preferences, navigation, courses, bot),
        messages=MessageHandler(preferences, bot),
    )


async def run(config: BotConfig) -> None:
    """Authorize the bot and process updates until shutdown."""
    async with TelegramTransport(config.token, timeout=config.timeout) as transport:
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGTERM, transport.close)
        except (NotImplementedError, RuntimeError):
            # not available on Windows event loops
            pass

        router = build_router(config, transport.profile)
        logger.info(f"Registered commands: {', '.join('/' + c for c in router.dispatcher.commands())}")
        await UpdateProcessor(transport, router).run()


def main() -> int:
    """Run the bot and return the process exit code."""

    # ── 1. Configuration ──────────────────────────────────
    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR
    set_debug(config.debug)

    # ── 2. Start polling ──────────────────────────────────
    logger.info("🚀 Starting the bot. Press Ctrl+C to stop.")
    try:
        asyncio.run(run(config))
    except TransportAuthError as e:
        logger.error(f"Authorization failed: {e}")
        return EXIT_AUTH_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    logger.info("Bot stopped.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
