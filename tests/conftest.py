# tests/conftest.py

from __future__ import annotations

import pytest

from todo_app.domain.task_list import TaskListModel
from todo_app.ui_state import AppState


@pytest.fixture()
def model() -> TaskListModel:
    return TaskListModel()


@pytest.fixture()
def abc_model() -> TaskListModel:
    """Three-item list used by removal tests."""
    return TaskListModel(["A", "B", "C"])


@pytest.fixture()
def state(abc_model: TaskListModel) -> AppState:
    """AppState over ["A", "B", "C"] with nothing selected."""
    return AppState(tasks=abc_model)
