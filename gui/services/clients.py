"""Client factories for the GUI layer."""

from __future__ import annotations

from typing import Any, List, Optional

from bizconsole.api_client import ApiClient


def get_api_client(base_url: Optional[str] = None, token: Optional[str] = None) -> ApiClient:
    """Return a console API client."""

    return ApiClient(base_url=base_url, token=token)


def as_list(data: Any, *keys: str) -> List[Any]:
    """Pull a row list out of a response that may or may not wrap it.

    The backend is not consistent: some endpoints return a bare list, others
    nest it under a key such as ``employees`` or ``data``.
    """

    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in keys:
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []
