# /school_admin/models/course_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

# --- Model Definitions ---

class CourseBase(BaseModel):
    """The fields of the course form, shared by the draft and the record."""
    code: Optional[str] = ""
    name: Optional[str] = ""
    department: Optional[str] = ""
    credits: Optional[int] = Field(default=3, description="Valid range is 1 to 6.")
    totalSemesters: Optional[int] = Field(default=1, description="Must be at least 1.")
    description: Optional[str] = Field(default="", description="At most 500 characters.")
    isActive: Optional[bool] = None

class CourseDraft(CourseBase):
    pass

class Course(CourseBase):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
