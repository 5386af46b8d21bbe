import flet as ft
from todo_app.config import (
    COLOR_CARD,
    COLOR_SELECTED,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    BORDER_RADIUS_BTN,
)


class TaskRow(ft.Container):
    def __init__(
        self,
        index: int,
        task: str,
        selected: bool,
        on_toggle_callback,
    ):
        super().__init__()
        self.task_index = index
        self.task_text = task
        self.is_selected = selected
        self.on_toggle_callback = on_toggle_callback

        self.padding = ft.Padding.symmetric(horizontal=8, vertical=2)
        self.bgcolor = COLOR_SELECTED if selected else COLOR_CARD
        self.border_radius = BORDER_RADIUS_BTN
        self.on_click = self._handle_click
        self.ink = True

        self.content = self._build_content()

    def _handle_click(self, e):
        if self.on_toggle_callback:
            self.on_toggle_callback(self.task_index)

    def _build_content(self):
        return ft.Row(
            controls=[
                ft.Checkbox(
                    value=self.is_selected,
                    active_color=COLOR_PRIMARY,
                    on_change=self._handle_click,
                ),
                ft.Text(
                    self.task_text,
                    size=14,
                    color=COLOR_TEXT_MAIN,
                    weight=ft.FontWeight.W_500 if self.is_selected else None,
                    max_lines=1,
                    overflow=ft.TextOverflow.ELLIPSIS,
                    expand=True,
                ),
            ],
            spacing=8,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
