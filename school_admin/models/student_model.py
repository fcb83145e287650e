# /school_admin/models/student_model.py

# --- Core Imports ---
from datetime import date
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains the fields shown in the student
    form, which are common to the editable draft and the stored record.
    """
    code: Optional[str] = Field(default="", description="The human-readable student code, e.g. S001.")
    firstName: Optional[str] = ""
    lastName: Optional[str] = ""
    email: Optional[str] = ""
    mobile: Optional[str] = ""
    admissionYear: Optional[int] = Field(default_factory=lambda: date.today().year)
    branchCode: Optional[str] = ""
    course: Optional[str] = ""
    currentSemester: Optional[int] = 1
    dateOfBirth: Optional[str] = None
    address: Optional[str] = ""
    city: Optional[str] = ""
    state: Optional[str] = ""
    zipCode: Optional[str] = ""
    isActive: Optional[bool] = Field(default=None, description="Left unset on creation; the server decides.")

class StudentDraft(StudentBase):
    """The in-progress student form. Holds no id; the id travels in the URL."""
    pass

class Student(StudentBase):
    """
    The full representation of a Student resource, as returned by the
    backend.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, description="The server-assigned identifier.")
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

class StudentPerformance(BaseModel):
    """One row of the student performance analytics endpoint."""
    studentId: Optional[int] = None
    name: Optional[str] = None
    gpa: Optional[float] = None
    attendancePercentage: Optional[float] = None
    averageGrade: Optional[float] = None
