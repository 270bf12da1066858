"""
models/profile.py
-----------------
Identity of the bot account itself, as reported by the platform after login.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BotProfile:
    """The bot account (`getMe`)."""
    id: int
    first_name: str
    username: str
