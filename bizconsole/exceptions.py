"""Exception types shared by the console layers."""

from typing import Any, Optional


class BizConsoleError(Exception):
    """Base class for errors raised by bizconsole."""


class ApiError(BizConsoleError):
    """A backend call failed.

    Raised for transport errors, non-2xx responses and for responses whose
    envelope reports ``success: false``.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message
