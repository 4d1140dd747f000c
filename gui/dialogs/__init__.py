from .form_flow import ConfirmDialogFlow, DialogFlow, FormDialogFlow
from .lifecycle import DialogLifecycleController, DialogPhase, DialogState, ExitTransition

__all__ = [
    "ConfirmDialogFlow",
    "DialogFlow",
    "DialogLifecycleController",
    "DialogPhase",
    "DialogState",
    "ExitTransition",
    "FormDialogFlow",
]
