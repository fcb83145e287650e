# /school_admin/controllers/list_helpers/messages.py

"""
The transient error/success banner of a view.

Only one message is shown at a time. Each posted message gets a new
generation number and schedules its own expiry; an expiry only clears the
message it was scheduled for, so a later message is never cut short by an
earlier timer.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ... import config

logger = logging.getLogger(__name__)


class MessageKind(str, Enum):
    ERROR = "error"
    SUCCESS = "success"


class Message(BaseModel):
    kind: MessageKind
    text: str
    generation: int


class MessageBoard:
    def __init__(self, timeout: Optional[float] = None):
        self.timeout = config.MESSAGE_TIMEOUT_SECONDS if timeout is None else timeout
        self.current: Optional[Message] = None
        self._generation = 0

    @property
    def error(self) -> Optional[str]:
        if self.current and self.current.kind == MessageKind.ERROR:
            return self.current.text
        return None

    @property
    def success(self) -> Optional[str]:
        if self.current and self.current.kind == MessageKind.SUCCESS:
            return self.current.text
        return None

    def post(self, kind: MessageKind, text: str) -> int:
        """Shows a message and schedules its expiry. Returns its generation."""
        self._generation += 1
        self.current = Message(kind=kind, text=text, generation=self._generation)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Outside an event loop there is nothing to schedule on; the
            # message stays until replaced or cleared.
            logger.debug("No running loop; message %d will not auto-clear", self._generation)
        else:
            loop.call_later(self.timeout, self.expire, self._generation)
        return self._generation

    def post_error(self, text: str) -> int:
        return self.post(MessageKind.ERROR, text)

    def post_success(self, text: str) -> int:
        return self.post(MessageKind.SUCCESS, text)

    def expire(self, generation: int) -> bool:
        """Clears the current message only if it is the one `generation` names."""
        if self.current is not None and self.current.generation == generation:
            self.current = None
            return True
        return False

    def clear(self) -> None:
        self.current = None

    def clear_error(self) -> None:
        if self.current is not None and self.current.kind == MessageKind.ERROR:
            self.current = None
