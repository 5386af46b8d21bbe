"""
task_service.py - Task service layer
Single responsibility: apply user intents to the task list and keep
selection/status in step with it.
"""
import logging

from todo_app.config import (
    MSG_CONFIRM_DELETE,
    MSG_CONFIRM_EXIT,
    STATUS_ADD_FAILED,
    STATUS_ADDED,
    STATUS_DELETED,
)
from todo_app.domain.errors import TaskValidationError
from todo_app.ui_state import AppState

logger = logging.getLogger(__name__)


def add_task(state: AppState, raw: str | None) -> str:
    """Add a task and select it. Validation errors are re-raised."""
    try:
        task = state.tasks.add(raw)
    except TaskValidationError as exc:
        state.status_text = STATUS_ADD_FAILED.format(reason=exc)
        logger.info("Rejected task %r: %s", raw, exc)
        raise
    state.select_only(len(state.tasks) - 1)
    state.status_text = STATUS_ADDED
    logger.info("Task added: %r (total %d)", task, len(state.tasks))
    return task


def needs_delete_confirmation(state: AppState) -> bool:
    return len(state.selected) > 1


def delete_confirmation_message(count: int) -> str:
    return MSG_CONFIRM_DELETE.format(count=count)


def selected_tasks(state: AppState) -> list[str]:
    """Texts of the selected rows, in list order."""
    return [state.tasks[i] for i in state.selected_indices]


def delete_selected(state: AppState, targets: list[str] | None = None) -> int:
    """
    Remove the selected tasks and return how many were removed.

    When targets is given (task texts captured at the time the user was
    asked), only those tasks still present are removed, whatever the
    selection is now. Afterwards the row at the first removed position (or
    the last row, if that position is gone) is selected. Nothing to remove
    is a no-op.
    """
    if targets is None:
        indices = state.selected_indices
    else:
        found = (state.tasks.index_of(t) for t in targets)
        indices = sorted(i for i in found if i is not None)
    if not indices:
        return 0

    removed = state.tasks.remove_at(indices)
    size = len(state.tasks)
    if size > 0:
        state.select_only(min(indices[0], size - 1))
    else:
        state.clear_selection()
    state.status_text = STATUS_DELETED
    logger.info("Deleted %d task(s) at %s (remaining %d)", removed, indices, size)
    return removed


def clear_selection(state: AppState) -> None:
    state.clear_selection()


def exit_confirmation_message(state: AppState) -> str | None:
    """Prompt text for closing the window, or None when nothing is left."""
    if state.tasks.is_empty:
        return None
    return MSG_CONFIRM_EXIT.format(count=len(state.tasks))
