from . import (  # noqa: F401
    attendance_service,
    employee_service,
    leave_service,
    task_service,
    tickets_service,
)
from .clients import as_list, get_api_client

__all__ = ["as_list", "get_api_client"]
