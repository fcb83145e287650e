# /school_admin/models/dashboard_model.py

# --- Core Imports ---
# Import the necessary components from Pydantic for data modeling.
from pydantic import BaseModel, Field

# --- Model Definition ---

class DashboardStats(BaseModel):
    """
    Defines the data contract for the dashboard summary. This model holds
    the counts shown on the dashboard's stat cards and the ratios derived
    from them.
    """

    totalStudents: int = Field(default=0, description="All students known to the backend.", examples=[120])
    activeStudents: int = Field(default=0, description="Students whose isActive flag is set.", examples=[110])
    inactiveStudents: int = Field(default=0, description="totalStudents - activeStudents.")

    totalCourses: int = Field(default=0, examples=[24])
    activeCourses: int = Field(default=0, examples=[20])
    inactiveCourses: int = Field(default=0)

    totalTeachers: int = Field(default=0, examples=[12])
    activeTeachers: int = Field(default=0, examples=[11])
    inactiveTeachers: int = Field(default=0)

    enrollmentRate: float = Field(
        default=0.0,
        description="Active students as a percentage of all students. 0 when there are no students."
    )
    courseActivityRate: float = Field(
        default=0.0,
        description="Active courses as a percentage of all courses. 0 when there are no courses."
    )
    studentsPerTeacher: float = Field(
        default=0.0,
        description="totalStudents / totalTeachers. 0 when there are no teachers."
    )
