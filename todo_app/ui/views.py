"""
views.py - UI view builders
Single responsibility: build the main flet View and refresh it in place
from AppState.
"""

from dataclasses import dataclass, field

import flet as ft

from todo_app.config import (
    ADD_TOOLTIP,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MUTED,
    DELETE_TOOLTIP,
    INPUT_HINT,
    LIST_ROW_SPACING,
    MSG_EMPTY_LIST,
)
from todo_app.ui.components.task_row import TaskRow
from todo_app.ui.helpers import delete_button_text
from todo_app.ui_state import AppState


@dataclass
class MainViewRefs:
    """Controls that are updated in place after each mutation."""

    input: ft.Ref = field(default_factory=ft.Ref)
    task_list: ft.Ref = field(default_factory=ft.Ref)
    delete_button: ft.Ref = field(default_factory=ft.Ref)
    status: ft.Ref = field(default_factory=ft.Ref)


def _empty_placeholder() -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=48, color=COLOR_BORDER),
                ft.Text(MSG_EMPTY_LIST, color=COLOR_TEXT_MUTED, size=14),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=40,
    )


def build_task_rows(state: AppState, on_toggle_task) -> list[ft.Control]:
    if state.tasks.is_empty:
        return [_empty_placeholder()]
    return [
        TaskRow(
            index=i,
            task=task,
            selected=i in state.selected,
            on_toggle_callback=on_toggle_task,
        )
        for i, task in enumerate(state.tasks)
    ]


def refresh_main_view(refs: MainViewRefs, state: AppState, on_toggle_task) -> None:
    """Sync list rows, delete button and status label with the state."""
    task_list = refs.task_list.current
    if task_list is not None:
        task_list.controls = build_task_rows(state, on_toggle_task)
        task_list.update()

    delete_button = refs.delete_button.current
    if delete_button is not None:
        delete_button.disabled = not state.can_delete
        delete_button.content = delete_button_text(len(state.selected))
        delete_button.update()

    status = refs.status.current
    if status is not None:
        status.value = state.status_text
        status.update()


def build_main_view(
    state: AppState,
    refs: MainViewRefs,
    on_add,
    on_delete,
    on_toggle_task,
    on_input_focus_change,
) -> ft.View:
    task_field = ft.TextField(
        ref=refs.input,
        hint_text=INPUT_HINT,
        tooltip=INPUT_HINT,
        autofocus=True,
        expand=True,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=10),
        text_size=14,
        on_submit=on_add,
        on_focus=lambda _e: on_input_focus_change(True),
        on_blur=lambda _e: on_input_focus_change(False),
    )

    add_button = ft.FilledButton(
        "Add",
        icon=ft.Icons.ADD,
        tooltip=ADD_TOOLTIP,
        style=ft.ButtonStyle(
            bgcolor=COLOR_PRIMARY,
            color="white",
            shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
        ),
        on_click=on_add,
    )

    delete_button = ft.FilledButton(
        delete_button_text(len(state.selected)),
        ref=refs.delete_button,
        icon=ft.Icons.DELETE_OUTLINE,
        tooltip=DELETE_TOOLTIP,
        disabled=not state.can_delete,
        bgcolor=COLOR_DANGER,
        color="white",
        on_click=on_delete,
    )

    task_list = ft.ListView(
        ref=refs.task_list,
        controls=build_task_rows(state, on_toggle_task),
        spacing=LIST_ROW_SPACING,
        expand=True,
    )

    status_label = ft.Text(
        state.status_text,
        ref=refs.status,
        size=12,
        color=COLOR_TEXT_MUTED,
    )

    return ft.View(
        route="/",
        bgcolor=COLOR_BG,
        padding=ft.Padding.all(12),
        controls=[
            ft.Column(
                expand=True,
                spacing=8,
                controls=[
                    ft.Row(
                        controls=[task_field, add_button],
                        spacing=6,
                        vertical_alignment=ft.CrossAxisAlignment.CENTER,
                    ),
                    ft.Row(
                        expand=True,
                        spacing=8,
                        vertical_alignment=ft.CrossAxisAlignment.START,
                        controls=[
                            ft.Container(
                                content=task_list,
                                expand=True,
                                bgcolor=COLOR_CARD,
                                border=ft.border.all(1, COLOR_BORDER),
                                border_radius=BORDER_RADIUS_CARD,
                                padding=ft.Padding.all(6),
                            ),
                            ft.Column(
                                controls=[delete_button],
                                alignment=ft.MainAxisAlignment.START,
                            ),
                        ],
                    ),
                    ft.Container(
                        content=status_label,
                        padding=ft.Padding.symmetric(horizontal=8, vertical=4),
                    ),
                ],
            )
        ],
    )


async def scroll_to_last(refs: MainViewRefs) -> None:
    """Bring the newest row into view."""
    task_list = refs.task_list.current
    if task_list is not None:
        await task_list.scroll_to(offset=-1, duration=200)
