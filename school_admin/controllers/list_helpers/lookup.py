# /school_admin/controllers/list_helpers/lookup.py

import asyncio
from typing import Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...models.course_model import Course
from ...models.envelope_model import ApiEnvelope
from ...models.student_model import Student
from ...services import course_service, student_service
from ...services.api_client import ApiClient, ApiError

ModelT = TypeVar("ModelT", bound=BaseModel)


def _record_or_none(result, model: Type[ModelT]) -> Optional[ModelT]:
    # A 404 from a by-code lookup means "no such code"; any other failure
    # is a real error for the caller to report.
    if isinstance(result, ApiError):
        if result.is_not_found:
            return None
        raise result
    if isinstance(result, BaseException):
        raise result
    item = result.first()
    if not item:
        return None
    try:
        return model.model_validate(item)
    except ValidationError as exc:
        raise ApiError(None, payload=item, description=f"Malformed {model.__name__} record") from exc


async def _no_lookup() -> ApiEnvelope:
    return ApiEnvelope()


async def resolve_codes(
    student_code: Optional[str],
    course_code: Optional[str],
    client: ApiClient,
) -> Tuple[Optional[Student], Optional[Course]]:
    """
    Resolves a student code and a course code to their records, running both
    lookups concurrently. A blank code resolves to None without a request.
    """
    student_code = (student_code or "").strip()
    course_code = (course_code or "").strip()

    student_result, course_result = await asyncio.gather(
        student_service.get_student_by_code(student_code, client) if student_code else _no_lookup(),
        course_service.get_course_by_code(course_code, client) if course_code else _no_lookup(),
        return_exceptions=True,
    )
    return _record_or_none(student_result, Student), _record_or_none(course_result, Course)
