# /school_admin/controllers/list_helpers/filtering.py

"""
Client-side filtering of a loaded collection.

`apply_filters` is a pure function: it never mutates its input and returns a
new list holding a subset of the given records, in their original order.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class StatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


class FilterCriteria(BaseModel):
    """
    What the user has typed or picked in a list view's filter bar. The
    defaults mean "no criterion".
    """
    search: str = ""
    semester: Optional[int] = None
    department: Optional[str] = None
    status: StatusFilter = StatusFilter.ALL

    def is_empty(self) -> bool:
        return (
            not self.search.strip()
            and self.semester is None
            and not (self.department or "").strip()
            and self.status == StatusFilter.ALL
        )


class FilterSpec(BaseModel):
    """Which record fields each criterion applies to, per entity."""
    search_fields: Tuple[str, ...] = ()
    semester_field: Optional[str] = None
    department_field: Optional[str] = None
    status_field: Optional[str] = None


def _matches_search(record: BaseModel, term: str, fields: Sequence[str]) -> bool:
    for field in fields:
        value = getattr(record, field, None)
        if value is not None and term in str(value).lower():
            return True
    return False


def apply_filters(records: Sequence[RecordT], criteria: FilterCriteria, spec: FilterSpec) -> List[RecordT]:
    """
    Returns the records matching every set criterion.

    The search term is a case-insensitive substring match ORed across the
    FilterSpec's search fields. Semester, department and status are exact matches
    (department ignores case) ANDed with the search. A criterion whose field
    the FilterSpec leaves unset is ignored.
    """
    filtered = list(records)

    term = criteria.search.strip().lower()
    if term and spec.search_fields:
        filtered = [r for r in filtered if _matches_search(r, term, spec.search_fields)]

    if criteria.semester is not None and spec.semester_field:
        filtered = [r for r in filtered if getattr(r, spec.semester_field, None) == criteria.semester]

    department = (criteria.department or "").strip().lower()
    if department and spec.department_field:
        filtered = [
            r for r in filtered
            if (getattr(r, spec.department_field, None) or "").lower() == department
        ]

    if spec.status_field:
        if criteria.status == StatusFilter.ACTIVE:
            filtered = [r for r in filtered if getattr(r, spec.status_field, None) is True]
        elif criteria.status == StatusFilter.INACTIVE:
            filtered = [r for r in filtered if getattr(r, spec.status_field, None) is False]

    return filtered


def distinct_values(records: Sequence[BaseModel], field: str) -> List[str]:
    """The distinct non-empty values of one field, in first-seen order."""
    seen: List[str] = []
    for record in records:
        value = getattr(record, field, None)
        if value and value not in seen:
            seen.append(value)
    return seen
