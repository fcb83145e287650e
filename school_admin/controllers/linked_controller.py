# /school_admin/controllers/linked_controller.py

"""
Base for the views whose records link a student to a course (grades and
attendance).

These views have no "list everything" endpoint: they load by running a
search built from the entered student code, course code and semester. New
records are entered with human codes, which are resolved to ids before the
create call; if either code has no match the save is aborted with a field
error and nothing is created.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel

from .list_controller import DraftT, ListController, RecordT
from .list_helpers.lookup import resolve_codes

logger = logging.getLogger(__name__)


class LinkedQuery(BaseModel):
    studentCode: str = ""
    courseCode: str = ""
    semester: Optional[int] = None

    def is_searchable(self) -> bool:
        return bool(self.studentCode.strip() or self.courseCode.strip())


class LinkedRecordController(ListController[RecordT, DraftT]):
    query_model = LinkedQuery
    missing_query_message = "Please enter Student Code or Course Code to search"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.query = self.query_model()

    def set_query(self, **changes: Any):
        self.query = self.query_model.model_validate({**self.query.model_dump(), **changes})
        return self.query

    async def load(self) -> bool:
        if not self.query.is_searchable():
            self.messages.post_error(self.missing_query_message)
            return False
        loaded = await super().load()
        if loaded:
            self.messages.post_success(f"Found {len(self.records)} {self.entity_plural}")
        return loaded

    async def prepare_create(self, draft: DraftT) -> Optional[DraftT]:
        student, course = await resolve_codes(draft.studentCode, draft.courseCode, self.client)

        errors = {}
        if student is None and draft.studentCode:
            errors["studentCode"] = f"No student found with code {draft.studentCode}"
        if course is None and draft.courseCode:
            errors["courseCode"] = f"No course found with code {draft.courseCode}"
        if errors:
            logger.info("Aborting %s create: %s", self.entity_name, errors)
            self.validation_errors = errors
            return None

        updates = {}
        if student is not None:
            updates["studentId"] = student.id
        if course is not None:
            updates["courseId"] = course.id
        return draft.model_copy(update=updates)

    async def refresh_after_save(self) -> None:
        if self.query.is_searchable():
            await self.load()

    async def refresh_after_delete(self, record_id: int) -> None:
        if self.query.is_searchable():
            await self.load()
        else:
            self.remove_local(record_id)
