"""
handlers/callback_router.py
----------------------------
Routes inline-button callbacks by callback-data prefix.

Every matched callback is processed in the same order:
    1. acknowledge the callback immediately (empty answer),
    2. remember the screen the user is leaving (except for "back"),
    3. apply the preference change, if any,
    4. edit the message into the new screen,
    5. show a toast, if the action has one.
Preference changes show their toast before the edit instead of after it.
Rejected callbacks (bad suffix, unknown course) skip steps 2 and 3.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from models.action import Action, AckCallback, EditMessage
from models.errors import CallbackParseError, CourseNotFoundError
from models.navigation import NavState
from models.preferences import LANGUAGES
from models.profile import BotProfile
from models.update import CallbackUpdate
from repositories.navigation_repo import NavigationRepository
from repositories.preference_repo import PreferenceRepository
from services.course_service import CourseService
from services.screens import (
    LANGUAGE_TOASTS,
    NAVIGATION_ERROR_NOTICE,
    NOTIFICATION_TOASTS,
    UNKNOWN_CALLBACK_NOTICE,
    Screen,
    course_details_screen,
    course_not_found_screen,
    delete_profile_screen,
    language_screen,
    main_menu_screen,
    notification_screen,
    profile_screen,
    settings_screen,
)
from utils.logger import get_logger

logger = get_logger(__name__)

_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass
class CallbackOutcome:
    """
    What a callback action wants done.

    Attributes:
        screen: Screen to edit the message into.
        commit: Preference change, applied after the history push.
        notice: Toast text shown after the edit.
        notice_first: Show the toast before the edit instead of after it.
        record_history: Push the screen being left onto the history stack.
    """
    screen: Screen
    commit: Optional[Callable[[], None]] = None
    notice: str = ""
    notice_first: bool = False
    record_history: bool = True


ActionHandler = Callable[[CallbackUpdate, str], Optional[CallbackOutcome]]


def _parse_number(suffix: str) -> int:
    if not _NUMBER_RE.fullmatch(suffix):
        raise CallbackParseError(f"Expected a non-negative number, got {suffix!r}")
    try:
        return int(suffix)
    except ValueError as e:
        # longer than the interpreter's int conversion limit
        raise CallbackParseError(f"Number too long: {len(suffix)} digits") from e


class CallbackRouter:
    """
    Longest-prefix router over callback data.

    Action handlers return a CallbackOutcome, or None when the suffix is not
    one they understand.
    """

    def __init__(
        self,
        preferences: PreferenceRepository,
        navigation: NavigationRepository,
        courses: CourseService,
        bot: BotProfile,
    ):
        self.preferences = preferences
        self.navigation = navigation
        self.courses = courses
        self.bot = bot

        # (prefix, handler, exact)
        routes: list[tuple[str, ActionHandler, bool]] = [
            ("delete_profile_", self._delete_profile, False),
            ("notif_", self._toggle_notifications, False),
            ("lang_", self._change_language, False),
            ("settings_", self._settings_menu, False),
            ("menu_", self._main_menu, False),
            ("courses_page_", self._courses_page, False),
            ("courses_info", self._courses_info, True),
            ("course_", self._course_details, False),
            ("nav_back", self._back, True),
        ]
        self._routes = sorted(routes, key=lambda route: len(route[0]), reverse=True)

    def match(self, data: str) -> Optional[tuple[str, ActionHandler]]:
        """Return the (prefix, handler) with the longest prefix matching `data`."""
        for prefix, handler, exact in self._routes:
            if (data == prefix) if exact else data.startswith(prefix):
                return prefix, handler
        return None

    def route(self, cb: CallbackUpdate) -> list[Action]:
        """
        Process one callback and return the actions to send, in order.

        The result always contains at least one AckCallback for `cb.id`.
        """
        matched = self.match(cb.data)
        if matched is None:
            logger.info(f"Unknown callback {cb.data!r} from chat {cb.chat_id}")
            return [AckCallback(cb.id, UNKNOWN_CALLBACK_NOTICE)]

        prefix, handler = matched
        actions: list[Action] = [AckCallback(cb.id)]

        try:
            outcome = handler(cb, cb.data[len(prefix):])
        except CallbackParseError as e:
            logger.warning(f"Bad callback {cb.data!r} from chat {cb.chat_id}: {e}")
            actions.append(AckCallback(cb.id, NAVIGATION_ERROR_NOTICE))
            return actions
        except CourseNotFoundError as e:
            logger.info(f"Chat {cb.chat_id} asked for a missing course: {e}")
            screen = course_not_found_screen(self.preferences.get_course_page(cb.chat_id))
            actions.append(EditMessage(cb.chat_id, cb.message_id, screen.text, screen.keyboard))
            actions.append(AckCallback(cb.id, screen.text))
            return actions

        if outcome is None:
            logger.info(f"Unknown callback suffix {cb.data!r} from chat {cb.chat_id}")
            actions.append(AckCallback(cb.id, UNKNOWN_CALLBACK_NOTICE))
            return actions

        if outcome.record_history:
            self.navigation.push(
                cb.chat_id,
                NavState(text=cb.current_text, keyboard=cb.current_keyboard, message_id=cb.message_id),
            )
        if outcome.commit is not None:
            outcome.commit()

        edit = EditMessage(cb.chat_id, cb.message_id, outcome.screen.text, outcome.screen.keyboard)
        if outcome.notice and outcome.notice_first:
            actions.append(AckCallback(cb.id, outcome.notice))
            actions.append(edit)
        else:
            actions.append(edit)
            if outcome.notice:
                actions.append(AckCallback(cb.id, outcome.notice))
        return actions

    # ── Action handlers ───────────────────────────────────

    def _delete_profile(self, cb: CallbackUpdate, suffix: str) -> Optional[CallbackOutcome]:
        # Cosmetic only: nothing is actually deleted.
        if suffix not in ("yes", "no"):
            return None
        return CallbackOutcome(delete_profile_screen(confirmed=suffix == "yes"))

    def _toggle_notifications(self, cb: CallbackUpdate, suffix: str) -> Optional[CallbackOutcome]:
        if suffix not in ("on", "off"):
            return None
        enabled = suffix == "on"
        return CallbackOutcome(
            notification_screen(enabled),
            commit=lambda: self.preferences.set_notifications(cb.chat_id, enabled),
            notice=NOTIFICATION_TOASTS[enabled],
            notice_first=True,
        )

    def _change_language(self, cb: CallbackUpdate, suffix: str) -> Optional[CallbackOutcome]:
        if suffix not in LANGUAGES:
            return None
        return CallbackOutcome(
            language_screen(suffix, changed=True),
            commit=lambda: self.preferences.set_language(cb.chat_id, suffix),
            notice=LANGUAGE_TOASTS[suffix],
            notice_first=True,
        )

    def _settings_menu(self, cb: CallbackUpdate, suffix: str) -> Optional[CallbackOutcome]:
        if suffix == "notif":
            return CallbackOutcome(notification_screen(self.preferences.get_notifications(cb.chat_id)))
        if suffix == "lang":
            return CallbackOutcome(language_screen(self.preferences.get_language(cb.chat_id)))
        return None

    def _main_menu(self, cb: CallbackUpdate, suffix: str) -> Optional[CallbackOutcome]:
        if suffix == "profile":
            return CallbackOutcome(profile_screen(cb.chat_id, self.bot))
        if suffix == "settings":
            return CallbackOutcome(settings_screen())
        if suffix == "courses":
            return self._show_courses(cb, self.preferences.get_course_page(cb.chat_id))
        if suffix == "menu":
            return CallbackOutcome(main_menu_screen())
        return None

    def _courses_page(self, cb: CallbackUpdate, suffix: str) -> CallbackOutcome:
        return self._show_courses(cb, _parse_number(suffix))

    def _courses_info(self, cb: CallbackUpdate, suffix: str) -> CallbackOutcome:
        page = self.courses.render_page(self.preferences.get_course_page(cb.chat_id))
        return CallbackOutcome(
            Screen(page.text, page.keyboard),
            notice=f"Страница {page.page + 1} из {page.total_pages}",
        )

    def _show_courses(self, cb: CallbackUpdate, page_number: int) -> CallbackOutcome:
        page = self.courses.render_page(page_number)
        return CallbackOutcome(
            Screen(page.text, page.keyboard),
            commit=lambda: self.preferences.set_course_page(cb.chat_id, page.page),
        )

    def _course_details(self, cb: CallbackUpdate, suffix: str) -> CallbackOutcome:
        course = self.courses.find(_parse_number(suffix))
        page = self.preferences.get_course_page(cb.chat_id)
        return CallbackOutcome(course_details_screen(course, page))

    def _back(self, cb: CallbackUpdate, suffix: str) -> CallbackOutcome:
        """
        Return to the screen the user was on before the last transition.

        With no history left the root main menu is shown.
        """
        state = self.navigation.pop(cb.chat_id)
        if state is None:
            return CallbackOutcome(main_menu_screen(), record_history=False)
        return CallbackOutcome(Screen(state.text, state.keyboard), record_history=False)
