# /school_admin/controllers/dashboard_controller.py

import logging
from typing import Optional

from ..models.dashboard_model import DashboardStats
from ..services import dashboard_service
from ..services.api_client import ApiClient, ApiError
from .list_controller import ViewStatus, describe_error

logger = logging.getLogger(__name__)


class DashboardController:
    """Holds the dashboard's stats and its loading/error state."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.status = ViewStatus.IDLE
        self.stats = DashboardStats()
        self.error: Optional[str] = None
        self._load_generation = 0

    @property
    def loading(self) -> bool:
        return self.status == ViewStatus.LOADING

    async def load(self) -> bool:
        self._load_generation += 1
        generation = self._load_generation
        self.status = ViewStatus.LOADING
        try:
            stats = await dashboard_service.get_summary_data(self.client)
        except ApiError as e:
            if generation != self._load_generation:
                return False
            logger.error("Failed to load dashboard statistics: %s", e)
            self.status = ViewStatus.ERRORED
            self.error = describe_error(e, "Failed to load dashboard statistics")
            return False

        if generation != self._load_generation:
            logger.debug("Dropping response of superseded dashboard load #%d", generation)
            return False
        self.stats = stats
        self.error = None
        self.status = ViewStatus.LOADED
        return True
