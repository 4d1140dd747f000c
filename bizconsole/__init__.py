"""
bizconsole - Business management console

Page view models, dialog lifecycle and REST collaborator for the
accounting / payroll / task tracking console.
"""

__version__ = "1.0.0"

from .api_client import ApiClient
from .config import Settings, get_settings
from .exceptions import ApiError, BizConsoleError

__all__ = [
    "ApiClient",
    "ApiError",
    "BizConsoleError",
    "Settings",
    "get_settings",
]
