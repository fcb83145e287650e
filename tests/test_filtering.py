# /tests/test_filtering.py

import itertools

import pytest

from school_admin.controllers.course_controller import CourseController
from school_admin.controllers.list_helpers.filtering import (
    FilterCriteria,
    StatusFilter,
    apply_filters,
    distinct_values,
)
from school_admin.controllers.student_controller import StudentController
from school_admin.models.course_model import Course
from school_admin.models.student_model import Student

STUDENT_FILTERS = StudentController.filter_spec


@pytest.fixture
def students():
    return [
        Student(id=1, code="S001", firstName="Ann", lastName="Lee", email="ann@x.com", mobile="9999999999",
                branchCode="CSE", currentSemester=1, isActive=True),
        Student(id=2, code="S002", firstName="Ravi", lastName="Kumar", email="ravi@y.org", mobile="8888888888",
                branchCode="ECE", currentSemester=3, isActive=False),
        Student(id=3, code="S003", firstName="Meera", lastName="Annand", email="meera@x.com", mobile="7777777777",
                branchCode="cse", currentSemester=3, isActive=True),
        Student(id=4, code="S004", firstName="Joe", lastName="Park", email="joe@z.net", mobile="6666666666",
                branchCode="ME", currentSemester=1, isActive=None),
    ]


CRITERIA = [
    FilterCriteria(),
    FilterCriteria(search="ann"),
    FilterCriteria(search="X.COM"),
    FilterCriteria(search="8888"),
    FilterCriteria(search="s00"),
    FilterCriteria(semester=3),
    FilterCriteria(department="CSE"),
    FilterCriteria(status=StatusFilter.ACTIVE),
    FilterCriteria(status=StatusFilter.INACTIVE),
    FilterCriteria(search="ann", semester=3, department="cse", status=StatusFilter.ACTIVE),
    FilterCriteria(search="nobody"),
]


def test_no_criteria_yields_full_collection(students):
    assert apply_filters(students, FilterCriteria(), STUDENT_FILTERS) == students


@pytest.mark.parametrize("criteria", CRITERIA)
def test_filtered_view_is_subset_and_idempotent(students, criteria):
    once = apply_filters(students, criteria, STUDENT_FILTERS)
    twice = apply_filters(once, criteria, STUDENT_FILTERS)

    assert all(record in students for record in once)
    assert twice == once


def test_search_is_case_insensitive_and_ored_across_fields(students):
    # "ann" hits Ann's first name and Meera Annand's last name.
    result = apply_filters(students, FilterCriteria(search="ANN"), STUDENT_FILTERS)
    assert [s.id for s in result] == [1, 3]


def test_structured_filters_are_anded_with_search(students):
    criteria = FilterCriteria(search="x.com", semester=3)
    assert [s.id for s in apply_filters(students, criteria, STUDENT_FILTERS)] == [3]


def test_department_match_is_exact_ignoring_case(students):
    assert [s.id for s in apply_filters(students, FilterCriteria(department="CSE"), STUDENT_FILTERS)] == [1, 3]
    assert apply_filters(students, FilterCriteria(department="CS"), STUDENT_FILTERS) == []


def test_status_is_tri_state(students):
    active = apply_filters(students, FilterCriteria(status=StatusFilter.ACTIVE), STUDENT_FILTERS)
    inactive = apply_filters(students, FilterCriteria(status=StatusFilter.INACTIVE), STUDENT_FILTERS)
    everyone = apply_filters(students, FilterCriteria(status=StatusFilter.ALL), STUDENT_FILTERS)

    assert [s.id for s in active] == [1, 3]
    # An unset flag is neither active nor inactive.
    assert [s.id for s in inactive] == [2]
    assert len(everyone) == 4


def test_filtering_does_not_mutate_input(students):
    before = list(students)
    apply_filters(students, FilterCriteria(search="joe"), STUDENT_FILTERS)
    assert students == before


def test_every_combination_stays_within_collection(students):
    for search, semester, status in itertools.product(["", "a", "zz"], [None, 1, 3], list(StatusFilter)):
        criteria = FilterCriteria(search=search, semester=semester, status=status)
        result = apply_filters(students, criteria, STUDENT_FILTERS)
        assert {s.id for s in result} <= {s.id for s in students}


def test_course_search_covers_department_and_departments_are_distinct():
    courses = [
        Course(id=1, code="CS101", name="Intro", department="CS"),
        Course(id=2, code="MA201", name="Algebra", department="Math"),
        Course(id=3, code="CS202", name="Systems", department="CS"),
    ]
    result = apply_filters(courses, FilterCriteria(search="math"), CourseController.filter_spec)

    assert [c.id for c in result] == [2]
    assert distinct_values(courses, "department") == ["CS", "Math"]
