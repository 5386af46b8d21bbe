"""
task_list.py - Task list model
Single responsibility: keep an ordered, duplicate-free list of task strings.
"""
from collections.abc import Iterable, Iterator

from todo_app.domain.errors import DuplicateTaskError, EmptyTaskError


def normalize(text: str | None) -> str:
    """Comparison key: trimmed and case-folded."""
    return (text or "").strip().casefold()


class TaskListModel:
    """
    Ordered collection of unique, trimmed, non-empty tasks.

    Only add() and remove_at() mutate the list. Duplicate checks ignore
    case and surrounding whitespace.
    """

    def __init__(self, tasks: Iterable[str] | None = None):
        self._tasks: list[str] = []
        for task in tasks or []:
            self.add(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> str:
        return self._tasks[index]

    def __repr__(self) -> str:
        return f"TaskListModel({self._tasks!r})"

    @property
    def tasks(self) -> tuple[str, ...]:
        return tuple(self._tasks)

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    def index_of(self, candidate: str | None) -> int | None:
        if candidate is None:
            return None
        key = normalize(candidate)
        for i, existing in enumerate(self._tasks):
            if normalize(existing) == key:
                return i
        return None

    def contains(self, candidate: str | None) -> bool:
        return self.index_of(candidate) is not None

    def add(self, raw_input: str | None) -> str:
        """
        Append the trimmed input and return it.

        Raises EmptyTaskError for blank input and DuplicateTaskError when an
        equal task (case/trim-insensitive) already exists.
        """
        task = (raw_input or "").strip()
        if not task:
            raise EmptyTaskError()
        if self.contains(task):
            raise DuplicateTaskError(task)
        self._tasks.append(task)
        return task

    def remove_at(self, indices: Iterable[int]) -> int:
        """Remove the given positions; out-of-range ones are ignored."""
        removed = 0
        # highest first so earlier removals don't shift later ones
        for idx in sorted(set(indices), reverse=True):
            if 0 <= idx < len(self._tasks):
                del self._tasks[idx]
                removed += 1
        return removed
