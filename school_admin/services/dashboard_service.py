# /school_admin/services/dashboard_service.py

# --- Core Imports ---
import asyncio
import logging

# Import the Pydantic model to ensure our output matches the data contract.
from ..models.dashboard_model import DashboardStats
from . import course_service, student_service, teacher_service
from .api_client import ApiClient

logger = logging.getLogger(__name__)


# --- Helper Functions ---

def safe_ratio(numerator: int, denominator: int, scale: float = 1.0) -> float:
    """Divides, treating a zero denominator as a ratio of 0 instead of an error."""
    if not denominator:
        return 0.0
    return round(numerator / denominator * scale, 1)


def build_stats(
    total_students: int,
    active_students: int,
    total_courses: int,
    active_courses: int,
    total_teachers: int,
    active_teachers: int,
) -> DashboardStats:
    """Derives the inactive counts and the ratios from the six raw counts."""
    return DashboardStats(
        totalStudents=total_students,
        activeStudents=active_students,
        inactiveStudents=total_students - active_students,
        totalCourses=total_courses,
        activeCourses=active_courses,
        inactiveCourses=total_courses - active_courses,
        totalTeachers=total_teachers,
        activeTeachers=active_teachers,
        inactiveTeachers=total_teachers - active_teachers,
        enrollmentRate=safe_ratio(active_students, total_students, 100),
        courseActivityRate=safe_ratio(active_courses, total_courses, 100),
        studentsPerTeacher=safe_ratio(total_students, total_teachers),
    )


# --- Core Public Function ---

async def get_summary_data(client: ApiClient) -> DashboardStats:
    """
    Calculates the dashboard summary statistics by issuing the six list
    requests (all and active, per entity) concurrently and aggregating the
    counts they report.

    Args:
        client: The shared ApiClient.

    Returns:
        A DashboardStats Pydantic object containing the counts and ratios.

    Raises:
        ApiError: If any of the six requests fails. Partial results are not
            reported.
    """
    # 1. DELEGATE DATA RETRIEVAL: all six requests are in flight together.
    (
        all_students,
        active_students,
        all_courses,
        active_courses,
        all_teachers,
        active_teachers,
    ) = await asyncio.gather(
        student_service.get_all_students(client),
        student_service.get_active_students(client),
        course_service.get_all_courses(client),
        course_service.get_active_courses(client),
        teacher_service.get_all_teachers(client),
        teacher_service.get_active_teachers(client),
    )

    # 2. PERFORM BUSINESS LOGIC: counts come from `total`, else from `data`.
    stats = build_stats(
        total_students=all_students.count(),
        active_students=active_students.count(),
        total_courses=all_courses.count(),
        active_courses=active_courses.count(),
        total_teachers=all_teachers.count(),
        active_teachers=active_teachers.count(),
    )
    logger.info(
        "Dashboard summary: %d students, %d courses, %d teachers",
        stats.totalStudents, stats.totalCourses, stats.totalTeachers,
    )
    return stats
