"""
repositories/preference_repo.py
-------------------------------
In-memory store of per-user preferences (notifications, language, course page).
"""

import threading

from models.errors import InvalidLanguageError
from models.preferences import (
    DEFAULT_COURSE_PAGE,
    DEFAULT_LANGUAGE,
    DEFAULT_NOTIFICATIONS,
    LANGUAGES,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class PreferenceRepository:
    """
    Per-chat preferences with read-default-on-miss semantics.

    Each attribute lives in its own mapping guarded by its own lock, so a
    language change never waits for a notification toggle. Locks are held only
    for a single dictionary lookup or assignment.
    """

    def __init__(self, total_pages: int = 1):
        """
        Args:
            total_pages: Number of course list pages; course pages are clamped
                into [0, total_pages - 1].
        """
        self.total_pages = max(1, total_pages)
        self._notifications: dict[int, bool] = {}
        self._languages: dict[int, str] = {}
        self._course_pages: dict[int, int] = {}
        self._notifications_lock = threading.Lock()
        self._languages_lock = threading.Lock()
        self._course_pages_lock = threading.Lock()

    def _clamp(self, page: int) -> int:
        return min(max(page, 0), self.total_pages - 1)

    # ── Notifications ─────────────────────────────────────

    def get_notifications(self, chat_id: int) -> bool:
        """Return whether notifications are on (default: True)."""
        with self._notifications_lock:
            return self._notifications.get(chat_id, DEFAULT_NOTIFICATIONS)

    def set_notifications(self, chat_id: int, enabled: bool) -> None:
        with self._notifications_lock:
            self._notifications[chat_id] = bool(enabled)
        logger.debug(f"chat {chat_id}: notifications={enabled}")

    # ── Language ──────────────────────────────────────────

    def get_language(self, chat_id: int) -> str:
        """Return the interface language code (default: 'ru')."""
        with self._languages_lock:
            return self._languages.get(chat_id, DEFAULT_LANGUAGE)

    def set_language(self, chat_id: int, language: str) -> None:
        """
        Store the interface language of a chat.

        Raises:
            InvalidLanguageError: If `language` is not one of LANGUAGES.
        """
        if language not in LANGUAGES:
            raise InvalidLanguageError(f"Unsupported language: {language!r}")
        with self._languages_lock:
            self._languages[chat_id] = language
        logger.debug(f"chat {chat_id}: language={language}")

    # ── Course page ───────────────────────────────────────

    def get_course_page(self, chat_id: int) -> int:
        """Return the last viewed course page, clamped (default: 0)."""
        with self._course_pages_lock:
            page = self._course_pages.get(chat_id, DEFAULT_COURSE_PAGE)
        return self._clamp(page)

    def set_course_page(self, chat_id: int, page: int) -> int:
        """
        Store the course page of a chat after clamping it.

        Returns:
            The page actually stored.
        """
        page = self._clamp(page)
        with self._course_pages_lock:
            self._course_pages[chat_id] = page
        return page
