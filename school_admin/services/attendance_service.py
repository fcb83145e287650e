# /school_admin/services/attendance_service.py

"""
Pass-through functions for the `/attendance` endpoint family. The
percentage read returns its metric as `percentage` on the envelope.
"""

from ..models.attendance_model import AttendanceDraft
from ..models.envelope_model import ApiEnvelope
from .api_client import ApiClient, segment

BASE_PATH = "/attendance"


async def record_attendance(data: AttendanceDraft, client: ApiClient) -> ApiEnvelope:
    return await client.post(BASE_PATH, json=data)

async def update_attendance(attendance_id: int, data: AttendanceDraft, client: ApiClient) -> ApiEnvelope:
    return await client.put(f"{BASE_PATH}/{segment(attendance_id)}", json=data)

async def delete_attendance(attendance_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.delete(f"{BASE_PATH}/{segment(attendance_id)}")

async def get_attendance_by_id(attendance_id: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/{segment(attendance_id)}")

async def get_attendance_by_student(student_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/student/{segment(student_code)}")

async def get_attendance_by_student_and_semester(student_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/student/{segment(student_code)}/semester/{segment(semester)}")

async def get_attendance_by_course(course_code: str, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/course/{segment(course_code)}")

async def get_attendance_by_course_and_semester(course_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/course/{segment(course_code)}/semester/{segment(semester)}")

async def get_attendance_by_semester(semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(f"{BASE_PATH}/semester/{segment(semester)}")

async def get_attendance_percentage(student_code: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(
        f"{BASE_PATH}/student/{segment(student_code)}/percentage",
        params={"semester": semester},
    )

async def get_attendance_by_date_range(start_date: str, end_date: str, semester: int, client: ApiClient) -> ApiEnvelope:
    return await client.get(
        f"{BASE_PATH}/date-range",
        params={"startDate": start_date, "endDate": end_date, "semester": semester},
    )
