# /school_admin/controllers/teacher_controller.py

from typing import List

from ..models.envelope_model import ApiEnvelope
from ..models.teacher_model import Teacher, TeacherDraft
from ..services import teacher_service
from .list_controller import ActivatableListController
from .list_helpers.filtering import FilterSpec, distinct_values
from .list_helpers.validation import FieldErrors, validate_teacher


class TeacherController(ActivatableListController[Teacher, TeacherDraft]):
    record_model = Teacher
    draft_model = TeacherDraft
    entity_name = "teacher"
    entity_plural = "teachers"
    filter_spec = FilterSpec(
        search_fields=("name", "code", "email", "phone"),
        department_field="department",
        status_field="isActive",
    )

    @property
    def departments(self) -> List[str]:
        return distinct_values(self.records, "department")

    def validate_draft(self, draft: TeacherDraft) -> FieldErrors:
        return validate_teacher(draft)

    async def fetch(self) -> ApiEnvelope:
        return await teacher_service.get_all_teachers(self.client)

    async def create_record(self, draft: TeacherDraft) -> ApiEnvelope:
        return await teacher_service.create_teacher(draft, self.client)

    async def update_record(self, record_id: int, draft: TeacherDraft) -> ApiEnvelope:
        return await teacher_service.update_teacher(record_id, draft, self.client)

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        return await teacher_service.delete_teacher(record_id, self.client)

    async def deactivate_record(self, record_id: int) -> ApiEnvelope:
        return await teacher_service.deactivate_teacher(record_id, self.client)
