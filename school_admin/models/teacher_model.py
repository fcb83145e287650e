# /school_admin/models/teacher_model.py

# --- Core Imports ---
from pydantic import BaseModel, ConfigDict
from typing import Optional

# --- Model Definitions ---

class TeacherBase(BaseModel):
    code: Optional[str] = ""
    name: Optional[str] = ""
    email: Optional[str] = ""
    phone: Optional[str] = ""
    department: Optional[str] = ""
    qualifications: Optional[str] = ""
    isActive: Optional[bool] = None

class TeacherDraft(TeacherBase):
    pass

class Teacher(TeacherBase):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
