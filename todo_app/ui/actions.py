"""
actions.py - UI-side dialogs
Single responsibility: modal notices and confirmations shown over the list.
"""

import flet as ft

from todo_app.config import (
    BORDER_RADIUS_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_WARNING,
)


def _dismiss(page: ft.Page, dialog: ft.AlertDialog, on_close=None) -> None:
    """Close the dialog and take it off the overlay."""
    dialog.open = False
    page.overlay[:] = [c for c in page.overlay if c is not dialog]
    page.update()
    if on_close:
        on_close()


def _show_message(
    page: ft.Page, title: str, message: str, icon, color: str, on_close=None
):
    dialog = ft.AlertDialog(
        modal=True,
        icon=ft.Icon(icon, color=color),
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Text(message, color=COLOR_TEXT_MAIN),
        actions=[
            ft.FilledButton(
                "OK",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda _e: _dismiss(page, dialog, on_close),
                autofocus=True,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog


def show_info(page: ft.Page, message: str, on_close=None):
    return _show_message(
        page, "Info", message, ft.Icons.INFO_OUTLINE, COLOR_PRIMARY, on_close
    )


def show_warning(page: ft.Page, message: str, on_close=None):
    return _show_message(
        page, "Warning", message, ft.Icons.WARNING_AMBER, COLOR_WARNING, on_close
    )


def show_error(page: ft.Page, message: str, on_close=None):
    return _show_message(
        page, "Error", message, ft.Icons.ERROR_OUTLINE, COLOR_DANGER, on_close
    )


def show_confirm_dialog(
    page: ft.Page,
    title: str,
    message: str,
    on_confirm,
    on_close=None,
    danger: bool = False,
):
    """Yes/No dialog; on_confirm runs only after "Yes", on_close after either."""

    def do_confirm(_e=None):
        _dismiss(page, dialog, on_close)
        on_confirm()

    def do_cancel(_e=None):
        _dismiss(page, dialog, on_close)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Text(message, color=COLOR_DANGER if danger else COLOR_TEXT_MAIN),
        actions=[
            ft.TextButton("No", on_click=do_cancel),
            ft.FilledButton(
                "Yes",
                bgcolor=COLOR_DANGER if danger else COLOR_PRIMARY,
                color="white",
                on_click=do_confirm,
                autofocus=True,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog
