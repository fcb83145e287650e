# /tests/test_services.py

"""Each service function must map its arguments onto exactly one request."""

import pytest

from school_admin.models.attendance_model import AttendanceDraft
from school_admin.models.course_model import CourseDraft
from school_admin.models.student_model import StudentDraft
from school_admin.services import (
    attendance_service,
    course_service,
    grade_service,
    student_service,
    teacher_service,
)

ROUTES = [
    (lambda c: student_service.get_all_students(c), "GET", "/api/student", {}),
    (lambda c: student_service.get_student_by_id(4, c), "GET", "/api/student/4", {}),
    (lambda c: student_service.get_student_by_code("S001", c), "GET", "/api/student/code/S001", {}),
    (lambda c: student_service.get_students_by_semester(3, c), "GET", "/api/student/semester/3", {}),
    (lambda c: student_service.get_students_by_branch("CSE", c), "GET", "/api/student/branch/CSE", {}),
    (lambda c: student_service.get_active_students(c), "GET", "/api/student/active", {}),
    (lambda c: student_service.search_students({"name": "ann"}, c), "GET", "/api/student/search", {"name": "ann"}),
    (lambda c: student_service.get_student_performance(2, "ECE", c), "GET", "/api/student/performance", {"semester": "2", "branchCode": "ECE"}),
    (lambda c: student_service.deactivate_student(4, c), "PUT", "/api/student/4/deactivate", {}),
    (lambda c: student_service.delete_student(4, c), "DELETE", "/api/student/4", {}),
    (lambda c: course_service.get_active_courses(c), "GET", "/api/course/active/list", {}),
    (lambda c: course_service.get_course_by_code("CS101", c), "GET", "/api/course/code/CS101", {}),
    (lambda c: course_service.get_courses_by_department("CS", c), "GET", "/api/course/department/CS", {}),
    (lambda c: course_service.search_courses("intro", c), "GET", "/api/course/search", {"name": "intro"}),
    (lambda c: course_service.deactivate_course(9, c), "PUT", "/api/course/9/deactivate", {}),
    (lambda c: teacher_service.get_active_teachers(c), "GET", "/api/teacher/active/list", {}),
    (lambda c: teacher_service.get_teachers_by_department("Math", c), "GET", "/api/teacher/department/Math", {}),
    (lambda c: teacher_service.search_teachers("rao", c), "GET", "/api/teacher/search", {"name": "rao"}),
    (lambda c: teacher_service.deactivate_teacher(2, c), "PUT", "/api/teacher/2/deactivate", {}),
    (lambda c: grade_service.get_grades_by_student("S001", c), "GET", "/api/grade/student/S001", {}),
    (lambda c: grade_service.get_grades_by_student_and_semester("S001", 2, c), "GET", "/api/grade/student/S001/semester/2", {}),
    (lambda c: grade_service.get_grades_by_course("CS101", c), "GET", "/api/grade/course/CS101", {}),
    (lambda c: grade_service.get_grades_by_course_and_semester("CS101", 5, c), "GET", "/api/grade/course/CS101/semester/5", {}),
    (lambda c: grade_service.get_student_average_grade("S001", c), "GET", "/api/grade/student/S001/average", {}),
    (lambda c: grade_service.get_student_gpa("S001", 4, c), "GET", "/api/grade/student/S001/gpa", {"semester": "4"}),
    (lambda c: grade_service.delete_grade(11, c), "DELETE", "/api/grade/11", {}),
    (lambda c: attendance_service.get_attendance_by_student_and_semester("S001", 1, c), "GET", "/api/attendance/student/S001/semester/1", {}),
    (lambda c: attendance_service.get_attendance_by_course_and_semester("CS101", 1, c), "GET", "/api/attendance/course/CS101/semester/1", {}),
    (lambda c: attendance_service.get_attendance_by_semester(6, c), "GET", "/api/attendance/semester/6", {}),
    (lambda c: attendance_service.get_attendance_percentage("S001", 6, c), "GET", "/api/attendance/student/S001/percentage", {"semester": "6"}),
    (
        lambda c: attendance_service.get_attendance_by_date_range("2024-01-01", "2024-01-31", 1, c),
        "GET", "/api/attendance/date-range",
        {"startDate": "2024-01-01", "endDate": "2024-01-31", "semester": "1"},
    ),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("call, method, path, params", ROUTES)
async def test_service_builds_expected_request(recording_client, recorder, call, method, path, params):
    await call(recording_client)

    request = recorder.last
    assert request.method == method
    assert request.url.path == path
    assert dict(request.url.params) == params


@pytest.mark.asyncio
async def test_codes_are_escaped_as_single_segments(recording_client, recorder):
    await student_service.get_student_by_code("CSE/24 01", recording_client)

    assert recorder.last.url.raw_path.decode() == "/api/student/code/CSE%2F24%2001"


@pytest.mark.asyncio
async def test_create_sends_draft_without_unset_fields(recording_client, recorder):
    draft = StudentDraft(firstName="Ann", lastName="Lee", admissionYear=2024)
    await student_service.create_student(draft, recording_client)

    body = recorder.last_json()
    assert recorder.last.method == "POST"
    assert recorder.last.url.path == "/api/student"
    assert body["firstName"] == "Ann"
    assert "isActive" not in body
    assert "id" not in body


@pytest.mark.asyncio
async def test_update_puts_to_id_scoped_path(recording_client, recorder):
    await course_service.update_course(12, CourseDraft(code="CS101", name="Intro"), recording_client)

    assert recorder.last.method == "PUT"
    assert recorder.last.url.path == "/api/course/12"
    assert recorder.last_json()["code"] == "CS101"


@pytest.mark.asyncio
async def test_attendance_date_is_sent_as_iso_string(recording_client, recorder):
    draft = AttendanceDraft(studentCode="S001", courseCode="CS101", attendanceDate="2024-03-05", status="ABSENT")
    await attendance_service.record_attendance(draft, recording_client)

    body = recorder.last_json()
    assert body["attendanceDate"] == "2024-03-05"
    assert body["status"] == "ABSENT"


@pytest.mark.asyncio
async def test_service_returns_envelope_untouched(recording_client, recorder):
    recorder.body = {"data": {"id": 3, "code": "S003"}, "message": "ok", "total": 1}

    envelope = await student_service.get_student_by_id(3, recording_client)

    assert envelope.data == {"id": 3, "code": "S003"}
    assert envelope.message == "ok"
    assert envelope.total == 1
