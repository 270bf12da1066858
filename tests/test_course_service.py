import pytest

from models.course import COURSES, Course
from models.errors import CourseNotFoundError
from services.course_service import PAGE_SIZE, CourseService
from conftest import button_texts, callback_data


def test_catalog_has_ten_courses():
    assert len(COURSES) == 10
    assert len({course.id for course in COURSES}) == 10


def test_total_pages(courses):
    assert PAGE_SIZE == 3
    assert courses.total_pages == 4


@pytest.mark.parametrize("requested", [0, 1, 2, 3, 4, 7, 1000])
def test_page_shows_the_expected_slice(courses, requested):
    page = courses.render_page(requested)

    expected_page = min(requested, 3)
    start = expected_page * 3
    end = min(start + 3, 10)
    assert page.page == expected_page
    for index in range(10):
        line = f"{index + 1}. {COURSES[index].title}\n{COURSES[index].description}\n\n"
        assert (line in page.text) == (start <= index < end)


def test_negative_page_is_clamped(courses):
    assert courses.render_page(-5).page == 0


def test_page_two_keyboard(courses):
    page = courses.render_page(2)

    assert callback_data(page.keyboard) == [
        ["course_7"],
        ["course_8"],
        ["course_9"],
        ["courses_page_1", "courses_info", "courses_page_3"],
        ["nav_back"],
    ]
    assert button_texts(page.keyboard)[3] == ["⬅️ Назад", "3/4", "Вперёд ➡️"]
    assert button_texts(page.keyboard)[0] == ["7. " + COURSES[6].title]


def test_first_and_last_page_navigation_rows(courses):
    first = callback_data(courses.render_page(0).keyboard)
    last = callback_data(courses.render_page(3).keyboard)

    assert first[-2] == ["courses_info", "courses_page_1"]
    assert last[0] == ["course_10"]
    assert last[-2] == ["courses_page_2", "courses_info"]


def test_single_page_catalog_has_no_navigation_row():
    service = CourseService(COURSES[:2])
    page = service.render_page(0)

    assert service.total_pages == 1
    assert callback_data(page.keyboard) == [["course_1"], ["course_2"], ["nav_back"]]


def test_empty_catalog_renders_one_empty_page():
    service = CourseService(())
    page = service.render_page(3)

    assert page.page == 0
    assert page.total_pages == 1
    assert "Курсов пока нет." in page.text


def test_find(courses):
    assert courses.find(4) == COURSES[3]

    with pytest.raises(CourseNotFoundError) as excinfo:
        courses.find(99)
    assert excinfo.value.course_id == 99


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        CourseService([Course(1, "a", "b")], page_size=0)
