# /school_admin/services/api_client.py

"""
The single request layer every domain service goes through.

`ApiClient` is configured once with the backend's base URL, a cookie jar for
the session credentials, and a uniform JSON content type. Every request either
returns the parsed `ApiEnvelope` or raises `ApiError`; failures are logged
here (the global error hook) and never retried.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .. import config
from ..models.envelope_model import ApiEnvelope

logger = logging.getLogger(__name__)


# --- Errors ---

class ApiError(Exception):
    """
    Raised for every failed request, whether it never reached the server or
    the server answered with an error status.
    """

    def __init__(
        self,
        message: Optional[str],
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
        description: Optional[str] = None,
    ):
        super().__init__(description or message or f"Request failed with status {status_code}")
        self.message = message
        self.status_code = status_code
        self.payload = payload or {}

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @classmethod
    def from_httpx(cls, exc: httpx.HTTPError) -> "ApiError":
        if isinstance(exc, httpx.HTTPStatusError):
            payload = _parse_body(exc.response)
            message = payload.get("message") or payload.get("detail")
            if message is not None and not isinstance(message, str):
                message = str(message)
            return cls(message, status_code=exc.response.status_code, payload=payload)
        # No server answered, so there is no server message to surface.
        return cls(None, description=str(exc) or type(exc).__name__)


def _parse_body(response: httpx.Response) -> Dict[str, Any]:
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text}
    if isinstance(body, dict):
        return body
    return {"data": body}


def _to_json(body: Any) -> Any:
    """Serializes pydantic drafts; dicts and None pass through untouched."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


# --- Client ---

class ApiClient:
    """
    An async client bound to one backend. Use it as an async context manager
    or call `aclose()` when done.

    Args:
        base_url: Overrides `SCHOOL_API_URL`.
        transport: An httpx transport, used by tests to mount a fake backend.
        cookies: Session cookies to send with every request.
        headers: Extra headers merged over the JSON defaults.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cookies: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        default_headers = {"Content-Type": "application/json", "Accept": "application/json"}
        default_headers.update(headers or {})
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=default_headers,
            cookies=cookies,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiEnvelope:
        """
        Sends one request to `base_url + path` and returns the parsed envelope.

        Raises:
            ApiError: On a transport failure, a non-2xx status or a body that
                is not a valid envelope. The error is logged before it is raised.
        """
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            response = await self._client.request(
                method, path, json=_to_json(json), params=params or None
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = ApiError.from_httpx(exc)
            logger.error(
                "API Error: %s %s -> %s (%s)",
                method, path, error.status_code or "no response", error,
            )
            raise error from exc

        body = _parse_body(response)
        try:
            return ApiEnvelope.model_validate(body)
        except ValidationError as exc:
            error = ApiError(None, status_code=response.status_code, payload=body,
                             description=f"Malformed response body: {exc.error_count()} error(s)")
            logger.error("API Error: %s %s -> %s (%s)", method, path, response.status_code, error)
            raise error from exc

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> ApiEnvelope:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> ApiEnvelope:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> ApiEnvelope:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> ApiEnvelope:
        return await self.request("DELETE", path)


def segment(value: Any) -> str:
    """Escapes one path segment, e.g. a student code that contains a slash."""
    return quote(str(value), safe="")
