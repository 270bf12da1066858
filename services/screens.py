"""
services/screens.py
-------------------
Texts and keyboards of every screen the bot can display.

A Screen is what an inline message shows: its text and its inline keyboard.
Every navigable screen carries the "back" button.
"""

from dataclasses import dataclass
from typing import Optional

from telegram import InlineKeyboardMarkup

from keyboards.inline import (
    add_back_button,
    confirm_keyboard,
    course_details_keyboard,
    language_keyboard,
    main_menu_inline_keyboard,
    notification_keyboard,
    settings_keyboard,
)
from models.course import Course
from models.profile import BotProfile


@dataclass(frozen=True)
class Screen:
    text: str
    keyboard: Optional[InlineKeyboardMarkup] = None


LANGUAGE_NAMES = {
    "ru": "🇷🇺 Русский",
    "en": "🇬🇧 English",
    "zh": "🇨🇳 中文",
}

LANGUAGE_CHANGED = {
    "ru": "🇷🇺 Язык изменён на русский",
    "en": "🇬🇧 Language changed to English",
    "zh": "🇨🇳 语言已更改为中文",
}

LANGUAGE_TOASTS = {
    "ru": "✅ Язык изменён на русский",
    "en": "✅ Language changed to English",
    "zh": "✅ 语言已更改为中文",
}

NOTIFICATION_TOASTS = {
    True: "🔔 Уведомления включены",
    False: "🔕 Уведомления выключены",
}

COURSE_NOT_FOUND_TEXT = "❌ Курс не найден"
NAVIGATION_ERROR_NOTICE = "❌ Ошибка навигации"
UNKNOWN_CALLBACK_NOTICE = "Неизвестная команда"

GREETING_TEXT = (
    "Привет! Я тестовый бот.\n\n"
    "Я могу помочь вам с различными задачами.\n\n"
    "Доступные команды:\n"
    "/start - начать работу\n"
    "/help - помощь\n"
    "/info - информация о вас"
)

HELP_TEXT = (
    "Это справочная информация.\n\n"
    "<b>Доступные команды:</b>\n\n"
    "/start - начать работу с ботом\n"
    "/info - информация о вашем профиле\n"
    "/echo &lt;текст&gt; - повторить текст\n"
    "/language - выбрать язык интерфейса\n"
    "/settings - настройки бота (только для администраторов)\n\n"
    "<b>Текстовые команды:</b>\n"
    "подписка - информация о подписке\n\n"
    "<b>Важно:</b> Если вы нажали на кнопку \"🔽 Скрыть\" и клавиатура исчезла, "
    "нажмите /start - начать работу с ботом, и клавиатура снова появится."
)

SUBSCRIPTION_TEXT = "Напишите администратору @Alex152197 — он с радостью вам поможет! 😊"


def main_menu_screen() -> Screen:
    text = (
        "📋 Главное меню:\n\n"
        "Доступные разделы:\n"
        "• Профиль - информация о вас\n"
        "• Настройки - настройки бота\n"
        "• Меню - это сообщение\n"
        "• Курсы - список доступных курсов"
    )
    return Screen(text, add_back_button(main_menu_inline_keyboard()))


def profile_screen(chat_id: int, bot: BotProfile) -> Screen:
    """Profile card with a delete-profile confirmation keyboard."""
    text = (
        "👤 Ваш профиль:\n\n"
        f"ID: {chat_id}\n"
        f"Имя: {bot.first_name}\n"
        f"Username: @{bot.username}\n\n"
        "Хотите удалить профиль?"
    )
    return Screen(text, add_back_button(confirm_keyboard("delete_profile")))


def settings_screen() -> Screen:
    text = "⚙️ Настройки:\n\nВыберите настройку для изменения:"
    return Screen(text, add_back_button(settings_keyboard()))


def notification_screen(enabled: bool) -> Screen:
    status = "Включены ✅" if enabled else "Выключены ❌"
    text = (
        "🔔 Настройки уведомлений:\n\n"
        f"Статус: {status}\n\n"
        "Нажмите кнопку, чтобы изменить:"
    )
    return Screen(text, add_back_button(notification_keyboard(enabled)))


def language_screen(language: str, changed: bool = False) -> Screen:
    """
    Language picker.

    Args:
        language: Currently selected language code.
        changed: True right after the user picked `language`; the screen then
            confirms the change instead of just naming the current language.
    """
    if changed:
        status = LANGUAGE_CHANGED[language]
    else:
        status = f"Текущий язык: {LANGUAGE_NAMES[language]}"
    text = f"🌐 Выбор языка:\n\n{status}\n\nВыберите язык:"
    return Screen(text, add_back_button(language_keyboard(language)))


def delete_profile_screen(confirmed: bool) -> Screen:
    # the keyboard is dropped so the question cannot be answered twice
    if confirmed:
        return Screen("🗑 Ваш профиль удалён.")
    return Screen("❌ Удаление профиля отменено.")


def course_details_screen(course: Course, page: int) -> Screen:
    text = (
        f"📘 {course.title}\n\n"
        f"{course.description}\n\n"
        f"ID курса: {course.id}"
    )
    return Screen(text, add_back_button(course_details_keyboard(page)))


def course_not_found_screen(page: int) -> Screen:
    return Screen(COURSE_NOT_FOUND_TEXT, add_back_button(course_details_keyboard(page)))
