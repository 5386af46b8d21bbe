"""
ui_state.py - UI state container
"""
from todo_app.config import STATUS_READY
from todo_app.domain.task_list import TaskListModel


class AppState:
    def __init__(self, tasks: TaskListModel | None = None):
        self.tasks: TaskListModel = tasks if tasks is not None else TaskListModel()
        self.selected: set[int] = set()
        self.status_text: str = STATUS_READY
        self.input_focused: bool = False
        self.dialog_open: bool = False

    @property
    def selected_indices(self) -> list[int]:
        return sorted(self.selected)

    @property
    def can_delete(self) -> bool:
        return bool(self.selected)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self.tasks)

    def toggle_selection(self, index: int) -> None:
        if not self._valid(index):
            return
        if index in self.selected:
            self.selected.discard(index)
        else:
            self.selected.add(index)

    def select_only(self, index: int) -> None:
        self.selected = {index} if self._valid(index) else set()

    def clear_selection(self) -> None:
        self.selected.clear()
