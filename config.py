"""
config.py
---------
Central configuration module. Loads the bot settings from environment
variables (optionally from a .env file) into a typed BotConfig.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from models.errors import ConfigError

DEFAULT_TIMEOUT = 60

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class BotConfig:
    """
    Bot settings consumed at startup.

    Attributes:
        token: Telegram bot token (required).
        debug: Verbose transport logging.
        timeout: Long-poll timeout in seconds.
        admin_ids: Telegram user IDs allowed to use admin commands.
    """
    token: str
    debug: bool = False
    timeout: int = DEFAULT_TIMEOUT
    admin_ids: tuple[int, ...] = field(default_factory=tuple)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_timeout(raw: str) -> int:
    try:
        timeout = int(raw.strip())
    except ValueError:
        raise ConfigError(f"BOT_TIMEOUT must be an integer, got {raw!r}") from None
    if timeout < 0:
        raise ConfigError(f"BOT_TIMEOUT must not be negative, got {timeout}")
    return timeout


def _parse_admin_ids(raw: str) -> tuple[int, ...]:
    ids = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            ids.append(int(chunk))
        except ValueError:
            raise ConfigError(f"BOT_ADMIN_IDS contains a non-numeric id: {chunk!r}") from None
    return tuple(ids)


def load_config(env_path: str | os.PathLike[str] | None = ".env") -> BotConfig:
    """
    Build a BotConfig from the environment.

    Args:
        env_path: Optional .env file. Variables already present in the
            process environment win over the file.

    Returns:
        The loaded BotConfig.

    Raises:
        ConfigError: If BOT_TOKEN is missing or a value is malformed.
    """
    if env_path is not None:
        load_dotenv(env_path, override=False)

    # ── Telegram ──────────────────────────────────────────────
    token = os.getenv("BOT_TOKEN", "").strip()
    if not token:
        raise ConfigError("BOT_TOKEN is not defined. Add it to the environment or the .env file.")

    debug = _parse_bool("BOT_DEBUG", os.getenv("BOT_DEBUG", "false"))
    timeout = _parse_timeout(os.getenv("BOT_TIMEOUT", str(DEFAULT_TIMEOUT)))

    # ── Security ──────────────────────────────────────────────
    admin_ids = _parse_admin_ids(os.getenv("BOT_ADMIN_IDS", ""))

    return BotConfig(token=token, debug=debug, timeout=timeout, admin_ids=admin_ids)
