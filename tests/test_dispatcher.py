import pytest

from handlers.dispatcher import UNKNOWN_COMMAND_TEXT, Command, Dispatcher
from handlers.settings_handler import SettingsCommand
from keyboards.reply import language_reply_keyboard, main_reply_keyboard
from models.action import SendMessage
from models.errors import DispatchError
from models.update import CommandUpdate
from security.auth import ADMIN_ONLY_TEXT, is_admin
from conftest import make_callback


def command(name, args="", chat_id=5, user_id=7, **profile):
    return CommandUpdate(chat_id=chat_id, user_id=user_id, name=name, args=args, **profile)


class _Boom(Command):
    def name(self):
        return "boom"

    def handle(self, cmd):
        raise RuntimeError("kaboom")


def test_registered_commands(router):
    assert set(router.dispatcher.commands()) == {"start", "help", "info", "settings", "echo", "language"}


def test_unknown_command(router):
    assert router.route(command("nope")) == [SendMessage(5, UNKNOWN_COMMAND_TEXT)]
    assert UNKNOWN_COMMAND_TEXT == "Неизвестная команда. Используйте /help для списка команд."


def test_duplicate_registration_is_rejected():
    dispatcher = Dispatcher().register(_Boom())
    with pytest.raises(ValueError):
        dispatcher.register(_Boom())


def test_registration_closes_after_freeze():
    dispatcher = Dispatcher()
    dispatcher.freeze()
    with pytest.raises(ValueError):
        dispatcher.register(_Boom())


def test_handler_failure_becomes_dispatch_error():
    dispatcher = Dispatcher().register(_Boom())

    with pytest.raises(DispatchError) as excinfo:
        dispatcher.route(command("boom"))

    assert excinfo.value.command == "boom"
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_start_shows_main_reply_keyboard(router):
    [action] = router.route(command("start"))
    assert action.chat_id == 5
    assert action.text.startswith("Привет!")
    assert action.keyboard == main_reply_keyboard()


def test_help_uses_html(router):
    [action] = router.route(command("help"))
    assert action.parse_mode == "HTML"
    assert "<b>Доступные команды:</b>" in action.text
    assert action.keyboard == main_reply_keyboard()


def test_settings_refused_for_non_admin(router):
    actions = router.route(command("settings", chat_id=70, user_id=7))
    assert actions == [SendMessage(70, "Эта команда доступна только администраторам")]
    assert ADMIN_ONLY_TEXT == "Эта команда доступна только администраторам"


def test_settings_for_admin_shows_configuration(router):
    [action] = router.route(command("settings", user_id=2))
    assert action.text == "Настройки бота:\nРежим отладки: false\nТаймаут: 60 секунд"


def test_settings_reflects_debug_flag():
    handler = SettingsCommand([1], debug=True, timeout=30)
    [action] = handler.handle(command("settings", user_id=1))
    assert "Режим отладки: true" in action.text
    assert "Таймаут: 30 секунд" in action.text


def test_is_admin():
    assert is_admin(2, [1, 2])
    assert not is_admin(3, [1, 2])
    assert not is_admin(1, [])


def test_echo(router):
    assert router.route(command("echo", args="привет мир")) == [SendMessage(5, "привет мир")]
    [usage] = router.route(command("echo"))
    assert "/echo <текст>" in usage.text


def test_info_lists_optional_fields_only_when_present(router):
    [full] = router.route(command("info", first_name="Ann", last_name="Lee", username="ann", language_code="en"))
    [bare] = router.route(command("info", first_name="Bob"))

    assert full.text == (
        "Информация о вас:\n\nID: 7\nИмя: Ann\nФамилия: Lee\nUsername: @ann\nЯзык: en\nБот: нет"
    )
    assert "Фамилия" not in bare.text
    assert "Username" not in bare.text


def test_language_command_offers_reply_keyboard(router):
    [action] = router.route(command("language"))
    assert action.keyboard == language_reply_keyboard()


def test_start_resets_navigation_history(router):
    navigation = router.callbacks.navigation
    router.route(make_callback("menu_settings", chat_id=5, text="root"))
    router.route(make_callback("menu_settings", chat_id=6, text="root"))

    router.route(command("start"))

    assert navigation.depth(5) == 0
    assert navigation.depth(6) == 1
