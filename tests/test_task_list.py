# tests/test_task_list.py

from __future__ import annotations

import pytest

from todo_app.domain.errors import (
    DuplicateTaskError,
    EmptyTaskError,
    TaskValidationError,
)
from todo_app.domain.task_list import TaskListModel, normalize


def test_add_trims_and_appends(model: TaskListModel) -> None:
    assert model.add("  first ") == "first"
    assert model.add("second") == "second"
    assert model.tasks == ("first", "second")


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_add_rejects_blank_input(model: TaskListModel, raw) -> None:
    with pytest.raises(EmptyTaskError):
        model.add(raw)
    assert model.is_empty


def test_duplicate_is_case_and_trim_insensitive(model: TaskListModel) -> None:
    model.add(" Buy milk ")
    with pytest.raises(DuplicateTaskError) as exc_info:
        model.add("buy milk")
    assert exc_info.value.task == "buy milk"
    assert str(exc_info.value) == "Task already exists."
    assert model.tasks == ("Buy milk",)


def test_validation_errors_are_value_errors(model: TaskListModel) -> None:
    with pytest.raises(ValueError):
        model.add(" ")
    assert issubclass(DuplicateTaskError, TaskValidationError)


def test_contains(model: TaskListModel) -> None:
    model.add("Write report")
    assert model.contains("write REPORT")
    assert model.contains("  Write report  ")
    assert not model.contains("Write")
    assert not model.contains(None)


def test_index_of(abc_model: TaskListModel) -> None:
    assert abc_model.index_of(" c ") == 2
    assert abc_model.index_of("z") is None


def test_normalize() -> None:
    assert normalize("  MiXeD ") == "mixed"
    assert normalize(None) == ""


def test_remove_non_adjacent_indices(abc_model: TaskListModel) -> None:
    assert abc_model.remove_at({0, 2}) == 2
    assert abc_model.tasks == ("B",)


def test_remove_is_order_independent(abc_model: TaskListModel) -> None:
    assert abc_model.remove_at([0, 1]) == 2
    assert abc_model.tasks == ("C",)


def test_remove_out_of_range_is_noop(abc_model: TaskListModel) -> None:
    assert abc_model.remove_at({5}) == 0
    assert abc_model.remove_at([-1, 3]) == 0
    assert abc_model.tasks == ("A", "B", "C")


def test_remove_mixed_valid_and_invalid(abc_model: TaskListModel) -> None:
    assert abc_model.remove_at([1, 1, 7, -2]) == 1
    assert abc_model.tasks == ("A", "C")


def test_remove_nothing(abc_model: TaskListModel) -> None:
    assert abc_model.remove_at([]) == 0
    assert len(abc_model) == 3


def test_remove_then_readd_same_task(model: TaskListModel) -> None:
    model.add("X")
    with pytest.raises(DuplicateTaskError):
        model.add("x")
    assert model.remove_at({0}) == 1
    assert model.is_empty
    assert model.add("x") == "x"
    assert list(model) == ["x"]


def test_seed_tasks_go_through_validation() -> None:
    with pytest.raises(DuplicateTaskError):
        TaskListModel(["a", "A"])


def test_tasks_snapshot_is_immutable(abc_model: TaskListModel) -> None:
    snapshot = abc_model.tasks
    abc_model.add("D")
    assert snapshot == ("A", "B", "C")
    assert abc_model[3] == "D"
