"""Form and confirmation dialog flows.

These wire a page's create/update/delete request through a
``DialogLifecycleController``:

1. Add/Edit fills the draft, Delete stores the pending selection, then the
   dialog opens.
2. Submit validates locally; an invalid draft keeps the dialog open with an
   inline error and the typed values intact.
3. A valid submit issues the request and disables further submits until it
   completes.
4. Success mutates the page list first, posts the optional success notice,
   then closes the dialog.
5. Failure shows an inline error and re-enables submit. If the user already
   closed the dialog, the message goes to the page's notifier instead.

The list mutation never depends on whether the dialog is still visible, and
a completing request never writes into the draft.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bizconsole.exceptions import ApiError
from bizconsole.models.schemas import first_error_message
from gui.dialogs.lifecycle import DialogLifecycleController, ExitTransition
from gui.utils.async_tasks import UiEventLoop, run_async
from gui.utils.logging import logger

DraftT = TypeVar("DraftT", bound=BaseModel)
Notifier = Callable[[str], Any]


class DialogFlow:
    """Shared request/close bookkeeping for one dialog."""

    def __init__(
        self,
        name: str,
        loop: Optional[UiEventLoop] = None,
        transition_ms: int = 0,
        notify: Optional[Notifier] = None,
        notify_info: Optional[Notifier] = None,
    ):
        self.name = name
        self.loop = loop
        self.notify = notify
        self.notify_info = notify_info
        self.error: Optional[str] = None
        self.controller = DialogLifecycleController(name, on_reset=self._reset)
        self.transition = ExitTransition(self.controller, loop, transition_ms)
        # remount token of the session whose request is outstanding
        self._in_flight: Optional[int] = None

    @property
    def visible(self) -> bool:
        return self.controller.visible

    @property
    def submitting(self) -> bool:
        return self._in_flight is not None and self._in_flight == self.controller.remount_token

    def close(self) -> bool:
        """Cancel button, overlay click, Escape: all end up here."""
        return self.transition.close()

    def after_close(self, token: Optional[int] = None) -> bool:
        """Exit-transition hook for hosts that signal it themselves."""
        return self.controller.after_close(token)

    def _reset(self) -> None:
        self.error = None

    def _dispatch(
        self,
        request: Callable[[], Any],
        on_success: Callable[[Any], Any],
        on_error: Callable[[ApiError], Any],
        done_message: Optional[str] = None,
    ) -> None:
        session = self.controller.remount_token
        self._in_flight = session
        self.error = None

        def _ok(result: Any) -> None:
            self._settle(session)
            on_success(result)
            if done_message and self.notify_info is not None:
                self.notify_info(done_message)
            if self.controller.visible and self.controller.remount_token == session:
                self.transition.close()

        def _fail(exc: ApiError) -> None:
            self._settle(session)
            message = on_error(exc)
            if self.controller.visible and self.controller.remount_token == session:
                self.error = message
            else:
                logger.warning("%s failed after dialog closed: %s", self.name, message)
                if self.notify is not None:
                    self.notify(message)

        if self.loop is not None:
            self.loop.submit_request(request, _ok, _fail, errors=(ApiError,))
            return
        try:
            result = run_async(request)
        except ApiError as exc:
            _fail(exc)
        else:
            _ok(result)

    def _settle(self, session: int) -> None:
        if self._in_flight == session:
            self._in_flight = None


class FormDialogFlow(DialogFlow, Generic[DraftT]):
    """Add/edit dialog backed by a pydantic draft schema.

    Args:
        schema: Draft model used to validate ``draft`` on submit.
        save: ``save(validated, editing)`` performs the create or update and
            returns the stored row. ``editing`` is None when adding.
        on_saved: ``on_saved(row, editing)`` applies the row to the page list.
        defaults: Empty draft values restored after every close.
        success_message: Notice sent after a row is created.
        updated_message: Notice sent after a row is updated; falls back to
            ``success_message``.
    """

    def __init__(
        self,
        name: str,
        schema: Type[DraftT],
        save: Callable[[DraftT, Optional[Any]], Any],
        on_saved: Callable[[Any, Optional[Any]], Any],
        defaults: Optional[Dict[str, Any]] = None,
        failure_message: str = "Could not save. Please try again.",
        success_message: Optional[str] = None,
        updated_message: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(name, **kwargs)
        self.schema = schema
        self.save = save
        self.on_saved = on_saved
        self.defaults = dict(defaults or {})
        self.failure_message = failure_message
        self.success_message = success_message
        self.updated_message = updated_message or success_message
        self.draft: Dict[str, Any] = dict(self.defaults)
        self.editing: Optional[Any] = None

    @property
    def mode(self) -> str:
        return "add" if self.editing is None else "edit"

    def open_add(self, **values: Any) -> int:
        self.editing = None
        self.draft = {**self.defaults, **values}
        self.error = None
        return self.controller.open()

    def open_edit(self, record: Any, values: Dict[str, Any]) -> int:
        self.editing = record
        self.draft = {**self.defaults, **values}
        self.error = None
        return self.controller.open(record)

    def set_field(self, name: str, value: Any) -> None:
        self.draft[name] = value

    def update(self, **values: Any) -> None:
        self.draft.update(values)

    def submit(self) -> bool:
        """Validate and send. Returns True when a request was issued."""
        if not self.controller.visible or self.submitting:
            return False
        try:
            validated = self.schema.model_validate(self.draft)
        except ValidationError as exc:
            self.error = first_error_message(exc)
            return False

        editing = self.editing

        def _failed(exc: ApiError) -> str:
            logger.error("%s save failed: %s", self.name, exc)
            return f"{self.failure_message} ({exc.message})"

        self._dispatch(
            lambda: self.save(validated, editing),
            lambda row: self.on_saved(row, editing),
            _failed,
            self.success_message if editing is None else self.updated_message,
        )
        return True

    def _reset(self) -> None:
        super()._reset()
        self.draft = dict(self.defaults)
        self.editing = None


class ConfirmDialogFlow(DialogFlow):
    """Delete confirmation acting on a pending selection.

    Args:
        action: ``action(record)`` performs the delete.
        on_done: ``on_done(record)`` removes the record from the page list.
    """

    def __init__(
        self,
        name: str,
        action: Callable[[Any], Any],
        on_done: Callable[[Any], Any],
        failure_message: str = "Could not delete. Please try again.",
        success_message: Optional[str] = None,
        **kwargs: Any,
    ):
        super().__init__(name, **kwargs)
        self.action = action
        self.on_done = on_done
        self.failure_message = failure_message
        self.success_message = success_message
        self.selection: Optional[Any] = None

    def open_for(self, record: Any) -> int:
        self.selection = record
        self.error = None
        return self.controller.open(record)

    def confirm(self) -> bool:
        if not self.controller.visible or self.submitting or self.selection is None:
            return False
        record = self.selection

        def _failed(exc: ApiError) -> str:
            logger.error("%s delete failed: %s", self.name, exc)
            return f"{self.failure_message} ({exc.message})"

        self._dispatch(
            lambda: self.action(record),
            lambda _: self.on_done(record),
            _failed,
            self.success_message,
        )
        return True

    def _reset(self) -> None:
        super()._reset()
        self.selection = None
