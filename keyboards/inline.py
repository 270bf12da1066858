"""
keyboards/inline.py
-------------------
Inline keyboards attached to bot messages. Button taps come back as
callback data handled by handlers/callback_router.py.
"""

from typing import Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models.course import Course, clamp_page, page_count

BACK_DATA = "nav_back"

_LANGUAGE_BUTTONS = (
    ("ru", "🇷🇺 Русский"),
    ("en", "🇬🇧 English"),
    ("zh", "🇨🇳 中文"),
)


def add_back_button(keyboard: InlineKeyboardMarkup | None = None) -> InlineKeyboardMarkup:
    """
    Return a copy of `keyboard` with a "back" button in its own bottom row.

    Args:
        keyboard: Keyboard to extend. None gives a keyboard with only "back".
    """
    rows = [list(row) for row in keyboard.inline_keyboard] if keyboard else []
    rows.append([InlineKeyboardButton("⬅️", callback_data=BACK_DATA)])
    return InlineKeyboardMarkup(rows)


def confirm_keyboard(data_prefix: str) -> InlineKeyboardMarkup:
    """Yes/No keyboard producing `<prefix>_yes` and `<prefix>_no`."""
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("✅ Да", callback_data=f"{data_prefix}_yes"),
        InlineKeyboardButton("❌ Нет", callback_data=f"{data_prefix}_no"),
    ]])


def notification_keyboard(enabled: bool) -> InlineKeyboardMarkup:
    """
    Single toggle button for notifications.

    The button shows the current state and, when tapped, switches to the
    opposite one.
    """
    if enabled:
        button = InlineKeyboardButton("🔔 Уведомления: Вкл", callback_data="notif_off")
    else:
        button = InlineKeyboardButton("🔕 Уведомления: Выкл", callback_data="notif_on")
    return InlineKeyboardMarkup([[button]])


def language_keyboard(current: str) -> InlineKeyboardMarkup:
    """Language picker with a tick on the `current` language."""
    buttons = []
    for code, label in _LANGUAGE_BUTTONS:
        if code == current:
            label = f"✅ {label}"
        buttons.append(InlineKeyboardButton(label, callback_data=f"lang_{code}"))
    return InlineKeyboardMarkup([buttons])


def main_menu_inline_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([
        [
            InlineKeyboardButton("👤 Профиль", callback_data="menu_profile"),
            InlineKeyboardButton("⚙️ Настройки", callback_data="menu_settings"),
        ],
        [
            InlineKeyboardButton("📋 Меню", callback_data="menu_menu"),
            InlineKeyboardButton("📚 Курсы", callback_data="menu_courses"),
        ],
    ])


def settings_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("🔔 Уведомления", callback_data="settings_notif"),
        InlineKeyboardButton("🌐 Язык", callback_data="settings_lang"),
    ]])


def courses_keyboard(courses: Sequence[Course], page: int, per_page: int) -> InlineKeyboardMarkup:
    """
    One button per course on `page`, then a navigation row.

    `page` is clamped into the valid range. The navigation row holds
    "previous", "<page>/<total>" and "next" buttons where they apply and is
    omitted when empty.
    """
    total_pages = page_count(len(courses), per_page)
    page = clamp_page(page, total_pages)

    start = page * per_page
    end = min(start + per_page, len(courses))

    rows = [
        [InlineKeyboardButton(f"{i + 1}. {courses[i].title}", callback_data=f"course_{courses[i].id}")]
        for i in range(start, end)
    ]

    nav_row = []
    if page > 0:
        nav_row.append(InlineKeyboardButton("⬅️ Назад", callback_data=f"courses_page_{page - 1}"))
    if total_pages > 1:
        nav_row.append(InlineKeyboardButton(f"{page + 1}/{total_pages}", callback_data="courses_info"))
    if page < total_pages - 1:
        nav_row.append(InlineKeyboardButton("Вперёд ➡️", callback_data=f"courses_page_{page + 1}"))
    if nav_row:
        rows.append(nav_row)

    return InlineKeyboardMarkup(rows)


def course_details_keyboard(page: int) -> InlineKeyboardMarkup:
    """Link from a course card back to the list page it was opened from."""
    return InlineKeyboardMarkup([[
        InlineKeyboardButton("📚 К списку курсов", callback_data=f"courses_page_{page}"),
    ]])
