# /tests/test_console.py

import httpx
import pytest

from school_admin.console import AdminConsole
from school_admin.controllers.dashboard_controller import DashboardController
from school_admin.controllers.grade_controller import GradeController
from school_admin.controllers.list_controller import ViewStatus
from school_admin.controllers.student_controller import StudentController

from .conftest import BASE_URL


@pytest.mark.asyncio
async def test_navigation_builds_fresh_views(backend):
    backend.seed("student", code="S001", firstName="Ann")

    async with AdminConsole(BASE_URL, transport=httpx.ASGITransport(app=backend.app)) as console:
        students = await console.navigate("students")
        assert isinstance(students, StudentController)
        assert students.status == ViewStatus.LOADED
        students.set_filters(search="ann")

        dashboard = await console.navigate("dashboard")
        assert isinstance(dashboard, DashboardController)
        assert dashboard.stats.totalStudents == 1

        again = await console.navigate("students")
        assert again is not students
        assert again.criteria.is_empty()
        assert console.current is again


@pytest.mark.asyncio
async def test_search_driven_views_open_empty(backend):
    async with AdminConsole(BASE_URL, transport=httpx.ASGITransport(app=backend.app)) as console:
        grades = await console.navigate("grades")

    assert isinstance(grades, GradeController)
    assert grades.status == ViewStatus.IDLE
    assert backend.calls == []


@pytest.mark.asyncio
async def test_unknown_view_is_rejected(backend):
    async with AdminConsole(BASE_URL, transport=httpx.ASGITransport(app=backend.app)) as console:
        with pytest.raises(ValueError):
            await console.navigate("library")
