"""
Console API Client - thin REST collaborator used by every page.

Wraps a shared requests.Session with the backend base URL, bearer token and
JSON handling. The backend answers with an envelope of the form
``{"success": bool, "data": ..., "message": str}``; the verb helpers unwrap
it and raise ApiError when the call did not succeed.
"""
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from .config import get_settings
from .exceptions import ApiError
from .utils.logger import get_logger

logger = get_logger(__name__)


class ApiClient:
    """
    Client for the console REST backend.

    Provides one method per HTTP verb:
    - get(path, params=None)
    - post(path, body=None)
    - put(path, body=None)
    - patch(path, body=None)
    - delete(path, body=None)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Backend root URL (defaults to BIZ_API_BASE_URL)
            token: Bearer token (defaults to BIZ_API_TOKEN)
            timeout: Per-request timeout in seconds
            session: Pre-built requests.Session (a new one is created if omitted)
        """
        settings = get_settings()
        base = base_url or settings.api_base_url
        # urljoin drops the last path segment unless the base ends with "/"
        self.base_url = base if base.endswith("/") else base + "/"
        self.token = token if token is not None else settings.api_token
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

        if not self.token:
            logger.warning("No API token configured; requests will be sent unauthenticated")

    def _get_headers(self) -> dict:
        """Get headers for API requests."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def url_for(self, path: str) -> str:
        return urljoin(self.base_url, path.lstrip("/"))

    @staticmethod
    def _error_message(response: requests.Response, default: str) -> str:
        """Best-effort extraction of the server's error message."""
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict):
            return body.get("message") or body.get("error") or default
        return default

    @staticmethod
    def unwrap(payload: Any) -> Any:
        """
        Strip the success envelope from a decoded response.

        Payloads without a ``success`` key are returned untouched.

        Raises:
            ApiError: if the envelope reports failure
        """
        if isinstance(payload, dict) and "success" in payload:
            if not payload.get("success"):
                raise ApiError(payload.get("message") or "Request was not successful", payload=payload)
            return payload.get("data")
        return payload

    def request(self, method: str, path: str, **kwargs) -> Any:
        """
        Make an API request and return the unwrapped JSON data.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Path relative to the base URL
            **kwargs: Additional arguments for requests

        Returns:
            Envelope data (or the raw JSON when the backend sends no envelope)
        """
        url = self.url_for(path)
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(method, url, headers=self._get_headers(), **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Could not reach server: {exc}") from exc

        if not response.ok:
            message = self._error_message(response, response.reason or "Request failed")
            logger.warning("%s %s -> %s %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiError("Server returned invalid JSON", status_code=response.status_code) from exc

        return self.unwrap(payload)

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, json=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, json=body)

    def patch(self, path: str, body: Any = None) -> Any:
        return self.request("PATCH", path, json=body)

    def delete(self, path: str, body: Any = None) -> Any:
        return self.request("DELETE", path, json=body)
