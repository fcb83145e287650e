# /school_admin/models/attendance_model.py

# --- Core Imports ---
from datetime import date
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

# --- Enumerations ---
class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"

# --- Model Definitions ---

class AttendanceBase(BaseModel):
    studentId: Optional[int] = None
    studentCode: Optional[str] = ""
    courseId: Optional[int] = None
    courseCode: Optional[str] = ""
    attendanceDate: Optional[date] = Field(default_factory=date.today)
    semester: Optional[int] = 1
    remarks: Optional[str] = ""

class AttendanceDraft(AttendanceBase):
    """
    The attendance form. `status` is kept as free text so that an invalid
    entry can be held in the form and reported by validation.
    """
    status: Optional[str] = AttendanceStatus.PRESENT.value

class Attendance(AttendanceBase):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    status: Optional[AttendanceStatus] = None
