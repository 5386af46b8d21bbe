# tests/test_helpers.py

from __future__ import annotations

import pytest

from todo_app.ui.helpers import (
    ADD,
    CLEAR_SELECTION,
    DELETE,
    FOCUS_INPUT,
    delete_button_text,
    resolve_shortcut,
    select_all_range,
)


@pytest.mark.parametrize(
    ("key", "ctrl", "alt", "expected"),
    [
        ("N", True, False, FOCUS_INPUT),
        ("A", False, True, ADD),
        ("D", False, True, DELETE),
        ("Escape", False, False, CLEAR_SELECTION),
        ("Delete", False, False, DELETE),
        ("N", False, False, None),
        ("Delete", True, False, None),
        ("X", True, False, None),
        ("", False, False, None),
        (None, False, False, None),
    ],
)
def test_resolve_shortcut(key, ctrl, alt, expected) -> None:
    assert resolve_shortcut(key, ctrl=ctrl, alt=alt) == expected


def test_delete_key_ignored_while_typing() -> None:
    assert resolve_shortcut("Delete", input_focused=True) is None
    # explicit shortcuts still work from the text field
    assert resolve_shortcut("D", alt=True, input_focused=True) == DELETE
    assert resolve_shortcut("Escape", input_focused=True) == CLEAR_SELECTION


def test_delete_button_text() -> None:
    assert delete_button_text(0) == "Delete"
    assert delete_button_text(1) == "Delete"
    assert delete_button_text(3) == "Delete (3)"


@pytest.mark.parametrize(
    ("key", "ctrl", "alt"),
    [("Delete", False, False), ("D", False, True), ("A", False, True), ("N", True, False)],
)
def test_shortcuts_disabled_while_dialog_open(key, ctrl, alt) -> None:
    assert resolve_shortcut(key, ctrl=ctrl, alt=alt, dialog_open=True) is None


def test_select_all_range() -> None:
    assert select_all_range("draft task") == (0, 10)
    assert select_all_range("") == (0, 0)
    assert select_all_range(None) == (0, 0)
