# /school_admin/services/teacher_service.py

from ..models.envelope_model import ApiEnvelope
from ..models.teacher_model import TeacherDraft
from .api_client import ApiClient, segment

BASE_PATH = "/teacher"


async def create_teacher(data: TeacherDraft, client: ApiClient) -> ApiEnvelope:
    return await client.post(BASE_PATH, json=data)

async def update_teacher(teacher_id: int, data: TeacherDraft, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(teacher_id)}", json=data)

async def delete_teacher(teacher_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.delete(f"{BASE_PATH}/{segment(teacher_id)}")

async def get_teacher_by_id(teacher_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/{segment(teacher_id)}")

async def get_all_teachers(client: ApiClient) -> ApiEnvelope:
    return await client.get(BASE_PATH)

async def get_active_teachers(client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/active/list")

async def get_teachers_by_department(department: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/department/{segment(department)}")

async def search_teachers(name: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/search", params={"name": name})

async def deactivate_teacher(teacher_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(teacher_id)}/deactivate")
