# /school_admin/services/course_service.py

from ..models.course_model import CourseDraft
from ..models.envelope_model import ApiEnvelope
from .api_client import ApiClient, segment

BASE_PATH = "/course"


async def create_course(data: CourseDraft, client: ApiClient) -> ApiEnvelope:
    return await client.post(BASE_PATH, json=data)

async def update_course(course_id: int, data: CourseDraft, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(course_id)}", json=data)

async def delete_course(course_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.delete(f"{BASE_PATH}/{segment(course_id)}")

async def get_course_by_id(course_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/{segment(course_id)}")

async def get_course_by_code(code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/code/{segment(code)}")

async def get_all_courses(client: ApiClient) -> ApiEnvelope:
    return await client.get(BASE_PATH)

async def get_active_courses(client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/active/list")

async def get_courses_by_department(department: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/department/{segment(department)}")

async def search_courses(name: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/search", params={"name": name})

async def deactivate_course(course_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(course_id)}/deactivate")
