"""
models/preferences.py
---------------------
Per-user preferences consulted and changed by the menu handlers.
"""

LANGUAGES: tuple[str, ...] = ("ru", "en", "zh")
DEFAULT_LANGUAGE = "ru"
DEFAULT_NOTIFICATIONS = True
DEFAULT_COURSE_PAGE = 0
