from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from keyboards import inline, reply
from conftest import button_texts, callback_data


def test_add_back_button_appends_its_own_row():
    keyboard = InlineKeyboardMarkup([[InlineKeyboardButton("a", callback_data="a")]])

    extended = inline.add_back_button(keyboard)

    assert callback_data(extended) == [["a"], ["nav_back"]]
    assert button_texts(extended)[-1] == ["⬅️"]
    assert callback_data(keyboard) == [["a"]]


def test_add_back_button_without_keyboard():
    assert callback_data(inline.add_back_button()) == [["nav_back"]]


def test_confirm_keyboard():
    keyboard = inline.confirm_keyboard("delete_profile")
    assert callback_data(keyboard) == [["delete_profile_yes", "delete_profile_no"]]
    assert button_texts(keyboard) == [["✅ Да", "❌ Нет"]]


def test_notification_keyboard_toggles_to_opposite_state():
    assert callback_data(inline.notification_keyboard(True)) == [["notif_off"]]
    assert button_texts(inline.notification_keyboard(True)) == [["🔔 Уведомления: Вкл"]]
    assert callback_data(inline.notification_keyboard(False)) == [["notif_on"]]
    assert button_texts(inline.notification_keyboard(False)) == [["🔕 Уведомления: Выкл"]]


def test_language_keyboard_ticks_current_language():
    keyboard = inline.language_keyboard("en")

    assert callback_data(keyboard) == [["lang_ru", "lang_en", "lang_zh"]]
    assert button_texts(keyboard) == [["🇷🇺 Русский", "✅ 🇬🇧 English", "🇨🇳 中文"]]


def test_main_menu_inline_keyboard():
    assert callback_data(inline.main_menu_inline_keyboard()) == [
        ["menu_profile", "menu_settings"],
        ["menu_menu", "menu_courses"],
    ]


def test_keyboards_compare_by_content():
    assert inline.language_keyboard("ru") == inline.language_keyboard("ru")
    assert inline.language_keyboard("ru") != inline.language_keyboard("zh")


def test_main_reply_keyboard_labels():
    keyboard = reply.main_reply_keyboard()

    assert [[button.text for button in row] for row in keyboard.keyboard] == [
        ["👤 Профиль", "⚙️ Настройки"],
        ["📋 Меню", "🔽 Скрыть"],
    ]
    assert keyboard.resize_keyboard is True


def test_language_reply_keyboard_labels():
    keyboard = reply.language_reply_keyboard()
    assert [[button.text for button in row] for row in keyboard.keyboard] == [["🇷🇺 Русский", "🇬🇧 English"]]
