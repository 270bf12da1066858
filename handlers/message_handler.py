"""
handlers/message_handler.py
----------------------------
Handles plain text messages: reply-keyboard captions first, then a keyword
check, then an echo.
"""

from keyboards.reply import (
    ENGLISH_LABEL,
    HIDE_LABEL,
    MENU_LABEL,
    PROFILE_LABEL,
    RUSSIAN_LABEL,
    SETTINGS_LABEL,
    main_reply_keyboard,
)
from models.action import Action, RemoveReplyKeyboard, SendMessage
from models.profile import BotProfile
from models.update import TextUpdate
from repositories.preference_repo import PreferenceRepository
from services.screens import (
    GREETING_TEXT,
    LANGUAGE_TOASTS,
    SUBSCRIPTION_TEXT,
    main_menu_screen,
    profile_screen,
    settings_screen,
)
from utils.logger import get_logger

logger = get_logger(__name__)

SUBSCRIPTION_KEYWORD = "подпис"

_LANGUAGE_LABELS = {
    RUSSIAN_LABEL: "ru",
    ENGLISH_LABEL: "en",
}


class MessageHandler:
    """
    Text message handler.

    Args:
        preferences: Preference store; the language reply labels write to it.
        bot: The bot's own profile, shown on the profile screen.
    """

    def __init__(self, preferences: PreferenceRepository, bot: BotProfile):
        self.preferences = preferences
        self.bot = bot

    def handle(self, msg: TextUpdate) -> list[Action]:
        chat_id = msg.chat_id
        text = msg.text.strip()

        if text == PROFILE_LABEL:
            screen = profile_screen(chat_id, self.bot)
            return [SendMessage(chat_id, screen.text, keyboard=screen.keyboard)]

        if text == SETTINGS_LABEL:
            screen = settings_screen()
            return [SendMessage(chat_id, screen.text, keyboard=screen.keyboard)]

        if text == MENU_LABEL:
            screen = main_menu_screen()
            return [SendMessage(chat_id, screen.text, keyboard=screen.keyboard)]

        if text == HIDE_LABEL:
            return [RemoveReplyKeyboard(chat_id, GREETING_TEXT)]

        if text in _LANGUAGE_LABELS:
            language = _LANGUAGE_LABELS[text]
            self.preferences.set_language(chat_id, language)
            logger.info(f"Chat {chat_id} switched language to {language}")
            return [SendMessage(chat_id, LANGUAGE_TOASTS[language], keyboard=main_reply_keyboard())]

        if SUBSCRIPTION_KEYWORD in text.lower():
            return [SendMessage(chat_id, SUBSCRIPTION_TEXT, keyboard=main_reply_keyboard())]

        reply = f"Вы написали: {text}\n\nИспользуйте меню для навигации."
        return [SendMessage(chat_id, reply, keyboard=main_reply_keyboard())]
