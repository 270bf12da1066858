"""
models/course.py
----------------
Domain model for courses and the static catalog shown by the bot.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Course:
    """
    A course from the catalog.

    Attributes:
        id: Stable identifier used in `course_<id>` callback data.
        title: Short title shown in the list.
        description: One-line description.
    """
    id: int
    title: str
    description: str


COURSES: tuple[Course, ...] = (
    Course(1, "Основы Python", "Синтаксис, типы данных и управляющие конструкции"),
    Course(2, "Go для начинающих", "Горутины, каналы и стандартная библиотека"),
    Course(3, "Алгоритмы и структуры данных", "Сортировки, деревья, графы и оценка сложности"),
    Course(4, "Базы данных и SQL", "Проектирование схем, запросы и индексы"),
    Course(5, "Веб-разработка", "HTTP, REST API и основы фронтенда"),
    Course(6, "Docker и Kubernetes", "Контейнеры, оркестрация и деплой"),
    Course(7, "Машинное обучение", "Регрессия, классификация и оценка моделей"),
    Course(8, "Linux для разработчиков", "Командная строка, процессы и скрипты"),
    Course(9, "Git и командная работа", "Ветвление, ревью кода и CI"),
    Course(10, "Разработка Telegram-ботов", "Bot API, клавиатуры и обработка обновлений"),
)


def page_count(total_items: int, per_page: int) -> int:
    """Number of pages needed for `total_items`; never less than one."""
    return max(1, (total_items + per_page - 1) // per_page)


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp a 0-based page number into [0, total_pages - 1]."""
    return min(max(page, 0), total_pages - 1)
