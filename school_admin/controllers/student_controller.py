# /school_admin/controllers/student_controller.py

import logging
from typing import List

from pydantic import ValidationError

from ..models.envelope_model import ApiEnvelope
from ..models.student_model import Student, StudentDraft, StudentPerformance
from ..services import student_service
from ..services.api_client import ApiError
from .list_controller import ActivatableListController, describe_error
from .list_helpers.filtering import FilterSpec

logger = logging.getLogger(__name__)


class StudentController(ActivatableListController[Student, StudentDraft]):
    """The student list. Students have no declared form rules."""

    record_model = Student
    draft_model = StudentDraft
    entity_name = "student"
    entity_plural = "students"
    filter_spec = FilterSpec(
        search_fields=("firstName", "lastName", "email", "mobile", "code"),
        semester_field="currentSemester",
        department_field="branchCode",
        status_field="isActive",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.performance: List[StudentPerformance] = []

    async def fetch(self) -> ApiEnvelope:
        return await student_service.get_all_students(self.client)

    async def create_record(self, draft: StudentDraft) -> ApiEnvelope:
        return await student_service.create_student(draft, self.client)

    async def update_record(self, record_id: int, draft: StudentDraft) -> ApiEnvelope:
        return await student_service.update_student(record_id, draft, self.client)

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        return await student_service.delete_student(record_id, self.client)

    async def deactivate_record(self, record_id: int) -> ApiEnvelope:
        return await student_service.deactivate_student(record_id, self.client)

    async def load_performance(self, semester: int, branch_code: str) -> bool:
        """Loads the per-student performance rows for one semester of a branch."""
        if not branch_code.strip():
            self.messages.post_error("Please enter Branch Code for analytics")
            return False

        try:
            envelope = await student_service.get_student_performance(semester, branch_code, self.client)
            rows = [StudentPerformance.model_validate(item) for item in envelope.items()]
        except ValidationError as exc:
            logger.error("Malformed performance data for %s semester %s: %s", branch_code, semester, exc)
            self.messages.post_error("Failed to fetch performance analytics")
            return False
        except ApiError as e:
            logger.error("Failed to fetch performance for %s semester %s: %s", branch_code, semester, e)
            self.messages.post_error(describe_error(e, "Failed to fetch performance analytics"))
            return False

        self.performance = rows
        return True
