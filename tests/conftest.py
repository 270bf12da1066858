import pytest

from config import BotConfig
from handlers.callback_router import CallbackRouter
from handlers.message_handler import MessageHandler
from main import build_router
from models.profile import BotProfile
from models.update import CallbackUpdate
from repositories.navigation_repo import NavigationRepository
from repositories.preference_repo import PreferenceRepository
from services.course_service import CourseService


@pytest.fixture
def bot_profile():
    return BotProfile(id=1000, first_name="MenuBot", username="menu_test_bot")


@pytest.fixture
def courses():
    return CourseService()


@pytest.fixture
def preferences(courses):
    return PreferenceRepository(total_pages=courses.total_pages)


@pytest.fixture
def navigation():
    return NavigationRepository()


@pytest.fixture
def callback_router(preferences, navigation, courses, bot_profile):
    return CallbackRouter(preferences, navigation, courses, bot_profile)


@pytest.fixture
def message_handler(preferences, bot_profile):
    return MessageHandler(preferences, bot_profile)


@pytest.fixture
def config():
    return BotConfig(token="123:abc", debug=False, timeout=60, admin_ids=(1, 2))


@pytest.fixture
def router(config, bot_profile):
    return build_router(config, bot_profile)


def make_callback(data, chat_id=9, message_id=100, callback_id="cb1", text="", keyboard=None, user_id=None):
    return CallbackUpdate(
        id=callback_id,
        chat_id=chat_id,
        user_id=chat_id if user_id is None else user_id,
        message_id=message_id,
        data=data,
        current_text=text,
        current_keyboard=keyboard,
    )


def callback_data(keyboard):
    return [[button.callback_data for button in row] for row in keyboard.inline_keyboard]


def button_texts(keyboard):
    return [[button.text for button in row] for row in keyboard.inline_keyboard]
