# /school_admin/models/grade_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict, computed_field
from typing import Optional

# --- Constants ---
MAX_INTERNAL_MARKS = 40
MAX_EXTERNAL_MARKS = 60

# --- Model Definitions ---

class GradeBase(BaseModel):
    """
    A grade links a student to a course for one semester. Students and
    courses are referenced by id and by code, never embedded.
    """
    studentId: Optional[int] = None
    studentCode: Optional[str] = ""
    courseId: Optional[int] = None
    courseCode: Optional[str] = ""
    semester: Optional[int] = 1
    internalMarks: Optional[float] = Field(default=0, description="Valid range is 0 to 40.")
    externalMarks: Optional[float] = Field(default=0, description="Valid range is 0 to 60.")
    remarks: Optional[str] = ""

class GradeDraft(GradeBase):
    """
    The grade form. The total is always derived from the two mark components
    and cannot be set independently.
    """

    @computed_field
    @property
    def totalMarks(self) -> float:
        return (self.internalMarks or 0) + (self.externalMarks or 0)

class Grade(GradeBase):
    """A stored grade. `totalMarks` and `gradePoint` are computed by the server."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    totalMarks: Optional[float] = None
    gradePoint: Optional[float] = None
