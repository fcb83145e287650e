# /school_admin/controllers/list_controller.py

"""
The fetch -> filter -> render -> mutate -> refetch cycle shared by every
list view.

A controller owns the state a list screen renders: the loaded collection,
the filter criteria and the filtered view derived from them, the form
draft, the dialog state, per-field validation errors and a transient
error/success message. Entity controllers subclass `ListController` and
supply the service calls through a handful of hooks.

View status moves `IDLE -> LOADING -> LOADED | ERRORED`. Each load is
stamped with a generation number; when a newer load has been issued, the
older one's outcome is dropped instead of overwriting newer state.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..models.envelope_model import ApiEnvelope
from ..services.api_client import ApiClient, ApiError
from .list_helpers.filtering import FilterCriteria, FilterSpec, apply_filters
from .list_helpers.messages import MessageBoard
from .list_helpers.validation import FieldErrors

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
DraftT = TypeVar("DraftT", bound=BaseModel)

ConfirmFn = Callable[[str], bool]


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class DialogMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


def describe_error(error: ApiError, fallback: str) -> str:
    """The server's message when it sent one, else the per-action fallback."""
    return error.message or fallback


class ListController(Generic[RecordT, DraftT]):
    """
    Generic list view controller.

    Args:
        client: The shared ApiClient every service call goes through.
        confirm: Asked before a delete; returning False cancels it.
        message_timeout: Seconds before a message auto-clears. Defaults to
            `SCHOOL_API_MESSAGE_TIMEOUT`.
    """

    record_model: Type[RecordT]
    draft_model: Type[DraftT]
    entity_name = "record"
    entity_plural = "records"
    filter_spec = FilterSpec()

    def __init__(
        self,
        client: ApiClient,
        *,
        confirm: Optional[ConfirmFn] = None,
        message_timeout: Optional[float] = None,
    ):
        self.client = client
        self.confirm = confirm
        self.messages = MessageBoard(message_timeout)

        self.status = ViewStatus.IDLE
        self.records: List[RecordT] = []
        self.criteria = FilterCriteria()

        self.dialog_open = False
        self.dialog_mode: Optional[DialogMode] = None
        self.editing_id: Optional[int] = None
        self.draft: DraftT = self.new_draft()
        self.validation_errors: FieldErrors = {}

        self._load_generation = 0

    # --- Service Hooks (implemented per entity) ---

    async def fetch(self) -> ApiEnvelope:
        raise NotImplementedError

    async def create_record(self, draft: DraftT) -> ApiEnvelope:
        raise NotImplementedError

    async def update_record(self, record_id: int, draft: DraftT) -> ApiEnvelope:
        raise NotImplementedError

    async def delete_record(self, record_id: int) -> ApiEnvelope:
        raise NotImplementedError

    def parse_records(self, envelope: ApiEnvelope) -> List[RecordT]:
        """Validates every row. A row the record model rejects fails the whole load."""
        try:
            return [self.record_model.model_validate(item) for item in envelope.items()]
        except ValidationError as exc:
            raise ApiError(
                None,
                payload=envelope.model_dump(),
                description=f"Malformed {self.entity_name} data: {exc.error_count()} error(s)",
            ) from exc

    def new_draft(self) -> DraftT:
        return self.draft_model()

    def validate_draft(self, draft: DraftT) -> FieldErrors:
        return {}

    async def prepare_create(self, draft: DraftT) -> Optional[DraftT]:
        """Last step before a create call. Returning None aborts the save."""
        return draft

    async def refresh_after_save(self) -> None:
        await self.load()

    async def refresh_after_delete(self, record_id: int) -> None:
        await self.load()

    # --- Derived State ---

    @property
    def filtered(self) -> List[RecordT]:
        return apply_filters(self.records, self.criteria, self.filter_spec)

    @property
    def loading(self) -> bool:
        return self.status == ViewStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self.messages.error

    @property
    def success(self) -> Optional[str]:
        return self.messages.success

    # --- Filters ---

    def set_filters(self, **changes: Any) -> FilterCriteria:
        self.criteria = FilterCriteria.model_validate({**self.criteria.model_dump(), **changes})
        return self.criteria

    def reset_filters(self) -> None:
        self.criteria = FilterCriteria()

    # --- Load ---

    async def load(self) -> bool:
        """
        Fetches the collection. On success it replaces `records` and clears
        any error; on failure it posts an error and keeps the old records.
        Returns False on failure and when a newer load superseded this one.
        """
        self._load_generation += 1
        generation = self._load_generation
        self.status = ViewStatus.LOADING

        try:
            envelope = await self.fetch()
            records = self.parse_records(envelope)
        except ApiError as e:
            if generation != self._load_generation:
                logger.debug("Dropping failure of superseded %s load #%d", self.entity_name, generation)
                return False
            logger.error("Failed to load %s: %s", self.entity_plural, e)
            self.status = ViewStatus.ERRORED
            self.messages.post_error(describe_error(e, f"Failed to load {self.entity_plural}"))
            return False

        if generation != self._load_generation:
            logger.debug("Dropping response of superseded %s load #%d", self.entity_name, generation)
            return False

        self.records = records
        self.status = ViewStatus.LOADED
        self.messages.clear_error()
        return True

    # --- Dialog ---

    def open_create(self) -> None:
        self.draft = self.new_draft()
        self.editing_id = None
        self.dialog_mode = DialogMode.CREATE
        self.validation_errors = {}
        self.dialog_open = True

    def open_edit(self, record: RecordT) -> None:
        self.draft = self.draft_model.model_validate(record.model_dump(mode="json"))
        self.editing_id = getattr(record, "id", None)
        self.dialog_mode = DialogMode.EDIT
        self.validation_errors = {}
        self.dialog_open = True

    def close_dialog(self) -> None:
        self.dialog_open = False
        self.dialog_mode = None
        self.editing_id = None
        self.validation_errors = {}
        self.draft = self.new_draft()

    def update_draft(self, **changes: Any) -> DraftT:
        self.draft = self.draft_model.model_validate({**self.draft.model_dump(mode="json"), **changes})
        return self.draft

    # --- Mutations ---

    async def save(self) -> bool:
        """
        Validates the draft, then creates or updates depending on whether a
        record is being edited. On success the collection is reloaded and
        the dialog closed; on failure the dialog stays open.
        """
        errors = self.validate_draft(self.draft)
        self.validation_errors = errors
        if errors:
            return False

        try:
            if self.editing_id is not None:
                await self.update_record(self.editing_id, self.draft)
                verb = "updated"
            else:
                draft = await self.prepare_create(self.draft)
                if draft is None:
                    return False
                await self.create_record(draft)
                verb = "created"
        except ApiError as e:
            logger.error("Failed to save %s: %s", self.entity_name, e)
            self.messages.post_error(describe_error(e, f"Failed to save {self.entity_name}"))
            return False

        self.messages.post_success(f"{self.entity_name.capitalize()} {verb} successfully!")
        await self.refresh_after_save()
        self.close_dialog()
        return True

    async def delete(self, record_id: int, confirm: Optional[ConfirmFn] = None) -> bool:
        """Deletes one record after the user confirms. Declining sends nothing."""
        confirm = confirm or self.confirm
        if confirm is None:
            raise ValueError("Deleting requires a confirm callback.")
        if not confirm(f"Are you sure you want to delete this {self.entity_name}?"):
            return False

        try:
            await self.delete_record(record_id)
        except ApiError as e:
            logger.error("Failed to delete %s %s: %s", self.entity_name, record_id, e)
            self.messages.post_error(describe_error(e, f"Failed to delete {self.entity_name}"))
            return False

        self.messages.post_success(f"{self.entity_name.capitalize()} deleted successfully!")
        await self.refresh_after_delete(record_id)
        return True

    def remove_local(self, record_id: int) -> None:
        self.records = [r for r in self.records if getattr(r, "id", None) != record_id]


class ActivatableListController(ListController[RecordT, DraftT]):
    """
    A list controller for entities carrying an `isActive` flag (students,
    courses, teachers). Status changes are not confirmed, unlike deletes.
    """

    async def deactivate_record(self, record_id: int) -> ApiEnvelope:
        raise NotImplementedError

    async def deactivate(self, record_id: int) -> bool:
        try:
            await self.deactivate_record(record_id)
        except ApiError as e:
            logger.error("Failed to deactivate %s %s: %s", self.entity_name, record_id, e)
            self.messages.post_error(describe_error(e, f"Failed to deactivate {self.entity_name}"))
            return False
        await self.load()
        return True

    async def activate(self, record: RecordT) -> bool:
        """
        Sets `isActive` back to true. The backend has no activate endpoint, so
        this sends an update of the record with only the flag changed.
        """
        payload: Dict[str, Any] = {**record.model_dump(mode="json"), "isActive": True}
        draft = self.draft_model.model_validate(payload)
        try:
            await self.update_record(record.id, draft)
        except ApiError as e:
            logger.error("Failed to activate %s %s: %s", self.entity_name, record.id, e)
            self.messages.post_error(describe_error(e, f"Failed to activate {self.entity_name}"))
            return False
        await self.load()
        return True

    async def toggle_active(self, record: RecordT) -> bool:
        if record.isActive:
            return await self.deactivate(record.id)
        return await self.activate(record)
