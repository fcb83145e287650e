# /school_admin/services/grade_service.py

"""
Pass-through functions for the `/grade` endpoint family.

Students and courses are addressed by their human-readable codes. The two
analytics reads return a string-typed metric on the envelope:
`averageMarks` for the average and `gpa` for the semester GPA.
"""

from ..models.envelope_model import ApiEnvelope
from ..models.grade_model import GradeDraft
from .api_client import ApiClient, segment

BASE_PATH = "/grade"


# --- CRUD Operations ---

async def create_grade(data: GradeDraft, client: ApiClient) -> ApiEnvelope:
    return await client.post(BASE_PATH, json=data)

async def update_grade(grade_id: int, data: GradeDraft, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(grade_id)}", json=data)

async def delete_grade(grade_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.delete(f"{BASE_PATH}/{segment(grade_id)}")

async def get_grade_by_id(grade_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/{segment(grade_id)}")


# --- Filtered Reads ---

async def get_grades_by_student(student_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/student/{segment(student_code)}")

async def get_grades_by_student_and_semester(student_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/student/{segment(student_code)}/semester/{segment(semester)}")

async def get_grades_by_course(course_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/course/{segment(course_code)}")

async def get_grades_by_course_and_semester(course_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/course/{segment(course_code)}/semester/{segment(semester)}")


# --- Analytics ---

async def get_student_average_grade(student_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/student/{segment(student_code)}/average")

async def get_student_gpa(student_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(
        f"{BASE_PATH}/student/{segment(student_code)}/gpa",
        params={"semester": semester},
    )
