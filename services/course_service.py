"""
services/course_service.py
--------------------------
Pagination over the static course catalog.
"""

from dataclasses import dataclass
from typing import Sequence

from telegram import InlineKeyboardMarkup

from keyboards.inline import add_back_button, courses_keyboard
from models.course import COURSES, Course, clamp_page, page_count
from models.errors import CourseNotFoundError

PAGE_SIZE = 3


@dataclass(frozen=True)
class CoursePage:
    """
    One rendered page of the course list.

    Attributes:
        page: 0-based page number after clamping.
        total_pages: Number of pages in the catalog.
        text: Message text listing the courses of the page.
        keyboard: Course buttons, navigation row and "back".
    """
    page: int
    total_pages: int
    text: str
    keyboard: InlineKeyboardMarkup


class CourseService:
    """Read-only access to the course catalog."""

    def __init__(self, courses: Sequence[Course] = COURSES, page_size: int = PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.courses = tuple(courses)
        self.page_size = page_size

    @property
    def total_pages(self) -> int:
        return page_count(len(self.courses), self.page_size)

    def render_page(self, page: int) -> CoursePage:
        """
        Render page `page` of the catalog.

        Out-of-range pages are clamped to the first or last page.

        Returns:
            CoursePage with the clamped page number.
        """
        total_pages = self.total_pages
        page = clamp_page(page, total_pages)

        start = page * self.page_size
        end = min(start + self.page_size, len(self.courses))

        lines = [f"📚 Доступные курсы (страница {page + 1}/{total_pages}):\n\n"]
        for index in range(start, end):
            course = self.courses[index]
            lines.append(f"{index + 1}. {course.title}\n{course.description}\n\n")
        if start == end:
            lines.append("Курсов пока нет.")

        keyboard = add_back_button(courses_keyboard(self.courses, page, self.page_size))
        return CoursePage(page=page, total_pages=total_pages, text="".join(lines), keyboard=keyboard)

    def find(self, course_id: int) -> Course:
        """
        Look a course up by id.

        Raises:
            CourseNotFoundError: If no course has that id.
        """
        for course in self.courses:
            if course.id == course_id:
                return course
        raise CourseNotFoundError(course_id)
