# /school_admin/controllers/course_controller.py

from typing import List

from ..models.course_model import Course, CourseDraft
from ..models.envelope_model import ApiEnvelope
from ..services import course_service
from .list_controller import ActivatableListController
from .list_helpers.filtering import FilterSpec, distinct_values
from .list_helpers.validation import FieldErrors, validate_course


class CourseController(ActivatableListController[Course, CourseDraft]):
    record_model = Course
    draft_model = CourseDraft
    entity_name = "course"
    entity_plural = "courses"
    filter_spec = FilterSpec(
        search_fields=("name", "code", "department"),
        department_field="department",
        status_field="isActive",
    )

    @property
    def departments(self) -> List[str]:
        return distinct_values(self.records, "department")

    def validate_draft(self, draft: CourseDraft) -> FieldErrors:
        return validate_course(draft)

    async def fetch(self) -> ApiEnvelope:
        return await course_service.get_all_courses(self.client)

    async def create_record(self, draft: CourseDraft) -> ApiEnvelope:
        return await course_service.create_course(draft, self.client)

    async def update_record(self, record_id: int, draft: CourseDraft) -> ApiEnvelope:
        return await course_service.update_course(record_id, draft, self.client)

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        return await course_service.delete_course(record_id, self.client)

    async def deactivate_record(self, record_id: int) -> ApiEnvelope:
        return await course_service.deactivate_course(record_id, self.client)
