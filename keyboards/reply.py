"""
keyboards/reply.py
------------------
Reply keyboards shown under the chat input. Taps arrive as plain text
messages carrying the button label.
"""

from telegram import KeyboardButton, ReplyKeyboardMarkup

PROFILE_LABEL = "👤 Профиль"
SETTINGS_LABEL = "⚙️ Настройки"
MENU_LABEL = "📋 Меню"
HIDE_LABEL = "🔽 Скрыть"

RUSSIAN_LABEL = "🇷🇺 Русский"
ENGLISH_LABEL = "🇬🇧 English"


def main_reply_keyboard() -> ReplyKeyboardMarkup:
    """Main menu: Profile, Settings, Menu, Hide in two rows."""
    return ReplyKeyboardMarkup(
        [
            [KeyboardButton(PROFILE_LABEL), KeyboardButton(SETTINGS_LABEL)],
            [KeyboardButton(MENU_LABEL), KeyboardButton(HIDE_LABEL)],
        ],
        resize_keyboard=True,
    )


def language_reply_keyboard() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        [[KeyboardButton(RUSSIAN_LABEL), KeyboardButton(ENGLISH_LABEL)]],
        resize_keyboard=True,
    )
