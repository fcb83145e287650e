# /school_admin/console.py

"""
The navigation shell of the admin console.

`AdminConsole` owns the one shared `ApiClient` and hands out a freshly built
controller each time a view is opened. The previous view's controller, with
its loaded records, filters and draft, is dropped on navigation.
"""

import logging
from typing import Dict, Optional, Type, Union

import httpx

from .controllers.attendance_controller import AttendanceController
from .controllers.course_controller import CourseController
from .controllers.dashboard_controller import DashboardController
from .controllers.grade_controller import GradeController
from .controllers.linked_controller import LinkedRecordController
from .controllers.list_controller import ConfirmFn, ListController
from .controllers.student_controller import StudentController
from .controllers.teacher_controller import TeacherController
from .services.api_client import ApiClient

logger = logging.getLogger(__name__)

View = Union[DashboardController, ListController]

# --- View Registry ---
LIST_VIEWS: Dict[str, Type[ListController]] = {
    "students": StudentController,
    "courses": CourseController,
    "teachers": TeacherController,
    "grades": GradeController,
    "attendance": AttendanceController,
}
VIEW_NAMES = ("dashboard", *LIST_VIEWS)


class AdminConsole:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        confirm: Optional[ConfirmFn] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cookies: Optional[Dict[str, str]] = None,
        message_timeout: Optional[float] = None,
    ):
        self.client = ApiClient(base_url, transport=transport, cookies=cookies)
        self.confirm = confirm
        self.message_timeout = message_timeout
        self.current_name: Optional[str] = None
        self.current: Optional[View] = None

    async def __aenter__(self) -> "AdminConsole":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.client.aclose()

    async def navigate(self, name: str) -> View:
        """
        Opens a view and runs its initial load. Search-driven views (grades,
        attendance) open empty and wait for a query.
        """
        if name not in VIEW_NAMES:
            raise ValueError(f"Unknown view '{name}'. Expected one of: {', '.join(VIEW_NAMES)}")

        if name == "dashboard":
            view: View = DashboardController(self.client)
        else:
            view = LIST_VIEWS[name](
                self.client, confirm=self.confirm, message_timeout=self.message_timeout
            )

        logger.info("Navigating from %s to %s", self.current_name or "nowhere", name)
        self.current_name = name
        self.current = view

        if not isinstance(view, LinkedRecordController):
            await view.load()
        return view
