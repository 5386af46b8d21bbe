# tests/test_ui_state.py

from __future__ import annotations

from todo_app.ui_state import AppState


def test_initial_state() -> None:
    state = AppState()
    assert state.tasks.is_empty
    assert state.selected == set()
    assert state.status_text == "Ready"
    assert not state.can_delete
    assert not state.input_focused
    assert not state.dialog_open


def test_toggle_selection(state: AppState) -> None:
    state.toggle_selection(2)
    state.toggle_selection(0)
    assert state.selected_indices == [0, 2]
    assert state.can_delete

    state.toggle_selection(2)
    assert state.selected_indices == [0]


def test_out_of_range_selection_is_ignored(state: AppState) -> None:
    state.toggle_selection(3)
    state.toggle_selection(-1)
    assert state.selected == set()

    state.select_only(9)
    assert state.selected == set()


def test_select_only_replaces_selection(state: AppState) -> None:
    state.toggle_selection(0)
    state.toggle_selection(1)
    state.select_only(2)
    assert state.selected_indices == [2]


def test_clear_selection(state: AppState) -> None:
    state.toggle_selection(1)
    state.clear_selection()
    assert not state.can_delete

