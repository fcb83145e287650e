# /school_admin/services/student_service.py

"""
Thin pass-through functions for the `/student` endpoint family.

Each function only builds the URL (path segments and query parameters) and
returns the backend's envelope untouched. Nothing is validated here.
"""

from typing import Dict

from ..models.envelope_model import ApiEnvelope
from ..models.student_model import StudentDraft
from .api_client import ApiClient, segment

BASE_PATH = "/student"


# --- CRUD Operations ---

async def create_student(data: StudentDraft, client: ApiClient) -> ApiEnvelope:
    return await client.post(BASE_PATH, json=data)

async def update_student(student_id: int, data: StudentDraft, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(student_id)}", json=data)

async def delete_student(student_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.delete(f"{BASE_PATH}/{segment(student_id)}")


# --- Retrieve Operations ---

async def get_all_students(client: ApiClient) -> ApiEnvelope:
    return await client.get(BASE_PATH)

async def get_student_by_id(student_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/{segment(student_id)}")

async def get_student_by_code(code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/code/{segment(code)}")


# --- Filter & Search Operations ---

async def search_students(params: Dict[str, str], client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/search", params=params)

async def get_students_by_semester(semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/semester/{segment(semester)}")

async def get_students_by_branch(branch_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/branch/{segment(branch_code)}")

async def get_active_students(client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/active")


# --- Analytics & Status Operations ---

async def get_student_performance(semester: int, branch_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(
        f"{BASE_PATH}/performance",
        params={"semester": semester, "branchCode": branch_code},
    )

async def deactivate_student(student_id: int, client: ApiClient) -> ApiEnvelope:
    """Flips `isActive` to false without deleting the record."""
    return await client.put(f"{BASE_PATH}/{segment(student_id)}/deactivate")
