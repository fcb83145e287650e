# /school_admin/controllers/grade_controller.py

import logging
from enum import Enum
from typing import Optional

from ..models.envelope_model import ApiEnvelope
from ..models.grade_model import Grade, GradeDraft
from ..services import grade_service
from ..services.api_client import ApiError
from .linked_controller import LinkedRecordController
from .list_controller import describe_error
from .list_helpers.filtering import FilterSpec
from .list_helpers.validation import FieldErrors, validate_grade

logger = logging.getLogger(__name__)


class GradeBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    PASS = "pass"
    FAIL = "fail"
    NONE = "none"


def grade_band(total_marks: Optional[float]) -> GradeBand:
    """Buckets a total out of 100 for display."""
    if not total_marks:
        return GradeBand.NONE
    if total_marks >= 90:
        return GradeBand.EXCELLENT
    if total_marks >= 75:
        return GradeBand.GOOD
    if total_marks >= 60:
        return GradeBand.AVERAGE
    if total_marks >= 40:
        return GradeBand.PASS
    return GradeBand.FAIL


class GradeController(LinkedRecordController[Grade, GradeDraft]):
    record_model = Grade
    draft_model = GradeDraft
    entity_name = "grade"
    entity_plural = "grades"
    filter_spec = FilterSpec(
        search_fields=("studentCode", "courseCode", "remarks"),
        semester_field="semester",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.student_average: Optional[str] = None
        self.student_gpa: Optional[str] = None

    def validate_draft(self, draft: GradeDraft) -> FieldErrors:
        return validate_grade(draft)

    async def fetch(self) -> ApiEnvelope:
        student_code = self.query.studentCode.strip()
        course_code = self.query.courseCode.strip()
        semester = self.query.semester

        if student_code and semester is not None:
            return await grade_service.get_grades_by_student_and_semester(student_code, semester, self.client)
        if student_code:
            return await grade_service.get_grades_by_student(student_code, self.client)
        if semester is not None:
            return await grade_service.get_grades_by_course_and_semester(course_code, semester, self.client)
        return await grade_service.get_grades_by_course(course_code, self.client)

    async def create_record(self, draft: GradeDraft) -> ApiEnvelope:
        return await grade_service.create_grade(draft, self.client)

    async def update_record(self, record_id: int, draft: GradeDraft) -> ApiEnvelope:
        return await grade_service.update_grade(record_id, draft, self.client)

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        return await grade_service.delete_grade(record_id, self.client)

    async def load_analytics(self, student_code: str, semester: Optional[int] = None) -> bool:
        """Loads a student's average marks, plus the GPA when a semester is given."""
        if not student_code.strip():
            self.messages.post_error("Please enter Student Code for analytics")
            return False

        self.student_average = None
        self.student_gpa = None

        try:
            average = await grade_service.get_student_average_grade(student_code, self.client)
            self.student_average = average.metric("averageMarks")
            if semester is not None:
                gpa = await grade_service.get_student_gpa(student_code, semester, self.client)
                self.student_gpa = gpa.metric("gpa")
        except ApiError as e:
            logger.error("Failed to fetch grade analytics for %s: %s", student_code, e)
            self.messages.post_error(describe_error(e, "Failed to fetch analytics"))
            return False

        self.messages.post_success("Analytics loaded successfully")
        return True
