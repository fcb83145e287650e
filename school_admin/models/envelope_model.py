# /school_admin/models/envelope_model.py

# --- Core Imports ---
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

# --- Model Definition ---

class ApiEnvelope(BaseModel):
    """
    The response envelope returned by every backend endpoint.

    The backend wraps its payload as `{ data, message?, total?, ... }`. `data`
    is a list for collection endpoints, a single object for by-id/by-code
    endpoints, and may be missing entirely. Analytics endpoints add their own
    top-level fields (e.g. `averageMarks`, `gpa`, `percentage`), which are
    kept as extra attributes.
    """
    model_config = ConfigDict(extra="allow")

    data: Any = Field(default=None, description="A single record, a list of records, or nothing.")
    message: Optional[str] = Field(default=None, description="A human-readable server message.")
    total: Optional[int] = Field(default=None, description="The size of the collection, when reported.")

    def items(self) -> List[Dict[str, Any]]:
        """Normalizes `data` to a list, whatever shape the endpoint returned."""
        if self.data is None:
            return []
        if isinstance(self.data, list):
            return self.data
        return [self.data]

    def first(self) -> Optional[Dict[str, Any]]:
        items = self.items()
        return items[0] if items else None

    def count(self) -> int:
        """The reported `total`, falling back to the number of items in `data`."""
        if self.total is not None:
            return self.total
        return len(self.items())

    def metric(self, name: str) -> Optional[str]:
        """Reads a string-typed analytic field such as `gpa` or `averageMarks`."""
        value = (self.model_extra or {}).get(name)
        if value is None:
            return None
        return str(value)
