# /school_admin/controllers/list_helpers/validation.py

"""
Form validation as pure functions: each takes a draft and returns a mapping
of field name to message. An empty mapping means the draft may be submitted.
"""

from typing import Dict

from pydantic import EmailStr, TypeAdapter, ValidationError

from ...models.attendance_model import AttendanceDraft, AttendanceStatus
from ...models.course_model import CourseDraft
from ...models.grade_model import GradeDraft, MAX_EXTERNAL_MARKS, MAX_INTERNAL_MARKS
from ...models.teacher_model import TeacherDraft

FieldErrors = Dict[str, str]

EMAIL_ADAPTER = TypeAdapter(EmailStr)
MAX_COURSE_NAME_LENGTH = 100
MAX_COURSE_DESCRIPTION_LENGTH = 500
MIN_CREDITS, MAX_CREDITS = 1, 6


def _blank(value) -> bool:
    return value is None or not str(value).strip()


def _is_email(value: str) -> bool:
    try:
        EMAIL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


def validate_course(draft: CourseDraft) -> FieldErrors:
    errors: FieldErrors = {}

    if _blank(draft.code):
        errors["code"] = "Course code is required"

    if _blank(draft.name):
        errors["name"] = "Course name is required"
    elif len(draft.name) > MAX_COURSE_NAME_LENGTH:
        errors["name"] = f"Course name cannot exceed {MAX_COURSE_NAME_LENGTH} characters"

    if _blank(draft.department):
        errors["department"] = "Department is required"

    if draft.credits is None or not MIN_CREDITS <= draft.credits <= MAX_CREDITS:
        errors["credits"] = f"Credits must be between {MIN_CREDITS} and {MAX_CREDITS}"

    if draft.totalSemesters is None or draft.totalSemesters < 1:
        errors["totalSemesters"] = "Total semesters must be at least 1"

    if draft.description and len(draft.description) > MAX_COURSE_DESCRIPTION_LENGTH:
        errors["description"] = f"Description cannot exceed {MAX_COURSE_DESCRIPTION_LENGTH} characters"

    return errors


def validate_teacher(draft: TeacherDraft) -> FieldErrors:
    errors: FieldErrors = {}

    if _blank(draft.name):
        errors["name"] = "Name is required"

    if _blank(draft.email):
        errors["email"] = "Email is required"
    elif not _is_email(draft.email):
        errors["email"] = "Invalid email format"

    if _blank(draft.phone):
        errors["phone"] = "Phone is required"

    if _blank(draft.department):
        errors["department"] = "Department is required"

    return errors


def validate_grade(draft: GradeDraft) -> FieldErrors:
    """Codes are required, marks are range-bound per component."""
    errors: FieldErrors = {}

    if _blank(draft.studentCode) and draft.studentId is None:
        errors["studentCode"] = "Student code is required"
    if _blank(draft.courseCode) and draft.courseId is None:
        errors["courseCode"] = "Course code is required"

    if draft.semester is None or draft.semester < 1:
        errors["semester"] = "Semester must be at least 1"

    if draft.internalMarks is None or not 0 <= draft.internalMarks <= MAX_INTERNAL_MARKS:
        errors["internalMarks"] = f"Internal marks must be between 0 and {MAX_INTERNAL_MARKS}"
    if draft.externalMarks is None or not 0 <= draft.externalMarks <= MAX_EXTERNAL_MARKS:
        errors["externalMarks"] = f"External marks must be between 0 and {MAX_EXTERNAL_MARKS}"

    return errors


def validate_attendance(draft: AttendanceDraft) -> FieldErrors:
    errors: FieldErrors = {}

    if _blank(draft.studentCode) and draft.studentId is None:
        errors["studentCode"] = "Student code is required"
    if _blank(draft.courseCode) and draft.courseId is None:
        errors["courseCode"] = "Course code is required"

    if draft.attendanceDate is None:
        errors["attendanceDate"] = "Date is required"

    allowed = [status.value for status in AttendanceStatus]
    if draft.status not in allowed:
        errors["status"] = f"Status must be one of {', '.join(allowed)}"

    if draft.semester is None or draft.semester < 1:
        errors["semester"] = "Semester must be at least 1"

    return errors
