# /school_admin/controllers/attendance_controller.py

import logging
from datetime import date
from typing import Optional

from ..models.attendance_model import Attendance, AttendanceDraft
from ..models.envelope_model import ApiEnvelope
from ..services import attendance_service
from ..services.api_client import ApiError
from .linked_controller import LinkedQuery, LinkedRecordController
from .list_controller import describe_error
from .list_helpers.filtering import FilterSpec
from .list_helpers.validation import FieldErrors, validate_attendance

logger = logging.getLogger(__name__)


class AttendanceQuery(LinkedQuery):
    """Attendance can also be searched by semester alone or by a date range."""
    startDate: Optional[date] = None
    endDate: Optional[date] = None

    def has_date_range(self) -> bool:
        return self.startDate is not None and self.endDate is not None

    def is_searchable(self) -> bool:
        return super().is_searchable() or self.semester is not None or self.has_date_range()


class AttendanceController(LinkedRecordController[Attendance, AttendanceDraft]):
    record_model = Attendance
    draft_model = AttendanceDraft
    entity_name = "attendance record"
    entity_plural = "attendance records"
    query_model = AttendanceQuery
    missing_query_message = "Please enter Student Code, Course Code, Semester or Date Range to search"
    filter_spec = FilterSpec(
        search_fields=("studentCode", "courseCode", "status", "remarks"),
        semester_field="semester",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.attendance_percentage: Optional[str] = None

    def validate_draft(self, draft: AttendanceDraft) -> FieldErrors:
        return validate_attendance(draft)

    async def fetch(self) -> ApiEnvelope:
        query = self.query
        student_code = query.studentCode.strip()
        course_code = query.courseCode.strip()

        if query.has_date_range():
            return await attendance_service.get_attendance_by_date_range(
                query.startDate.isoformat(), query.endDate.isoformat(), query.semester, self.client
            )
        if student_code and query.semester is not None:
            return await attendance_service.get_attendance_by_student_and_semester(student_code, query.semester, self.client)
        if student_code:
            return await attendance_service.get_attendance_by_student(student_code, self.client)
        if course_code and query.semester is not None:
            return await attendance_service.get_attendance_by_course_and_semester(course_code, query.semester, self.client)
        if course_code:
            return await attendance_service.get_attendance_by_course(course_code, self.client)
        return await attendance_service.get_attendance_by_semester(query.semester, self.client)

    async def create_record(self, draft: AttendanceDraft) -> ApiEnvelope:
        return await attendance_service.record_attendance(draft, self.client)

    async def update_record(self, record_id: int, draft: AttendanceDraft) -> ApiEnvelope:
        return await attendance_service.update_attendance(record_id, draft, self.client)

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        return await attendance_service.delete_attendance(record_id, self.client)

    async def load_percentage(self, student_code: str, semester: int) -> bool:
        if not student_code.strip():
            self.messages.post_error("Please enter Student Code for analytics")
            return False
        try:
            envelope = await attendance_service.get_attendance_percentage(student_code, semester, self.client)
        except ApiError as e:
            logger.error("Failed to fetch attendance percentage for %s: %s", student_code, e)
            self.messages.post_error(describe_error(e, "Failed to fetch attendance percentage"))
            return False
        self.attendance_percentage = envelope.metric("percentage")
        return True
