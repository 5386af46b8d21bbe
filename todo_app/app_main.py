"""
app_main.py - To-Do List メインアプリケーション
To-Do List v1.0
"""

import logging

import flet as ft

from todo_app.config import (
    APP_TITLE,
    APP_VERSION,
    COLOR_BG,
    COLOR_PRIMARY,
    MSG_ADD_ERROR,
    MSG_DELETE_ERROR,
    MSG_NO_SELECTION,
    STATUS_ADD_ERROR,
    STATUS_DELETE_ERROR,
    WINDOW_HEIGHT,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_WIDTH,
)
from todo_app.domain.errors import TaskValidationError
from todo_app.services import task_service
from todo_app.ui import actions, views
from todo_app.ui.helpers import (
    ADD,
    CLEAR_SELECTION,
    DELETE,
    FOCUS_INPUT,
    resolve_shortcut,
    select_all_range,
)
from todo_app.ui_state import AppState

logger = logging.getLogger(__name__)


# ==========================================================================
# メインアプリ
# ==========================================================================


def main(page: ft.Page):
    logger.info("Starting %s v%s", APP_TITLE, APP_VERSION)
    page.title = APP_TITLE
    page.window.width = WINDOW_WIDTH
    page.window.height = WINDOW_HEIGHT
    page.window.min_width = WINDOW_MIN_WIDTH
    page.window.min_height = WINDOW_MIN_HEIGHT
    page.window.alignment = ft.Alignment.CENTER
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    # モデルはこのページが所有する（グローバル状態なし）
    state = AppState()
    refs = views.MainViewRefs()

    def refresh():
        views.refresh_main_view(refs, state, on_toggle_task)

    def dialog_closed():
        state.dialog_open = False

    def open_dialog(show, *args, **kwargs):
        state.dialog_open = True
        return show(page, *args, on_close=dialog_closed, **kwargs)

    async def focus_input(select_all: bool = False):
        field = refs.input.current
        if field is None:
            return
        if select_all:
            base, extent = select_all_range(field.value)
            field.selection = ft.TextSelection(base_offset=base, extent_offset=extent)
            field.update()
        await field.focus()

    # ------------------------------------------------------------------
    # 追加
    # ------------------------------------------------------------------
    async def on_add(_e=None):
        field = refs.input.current
        raw = field.value if field is not None else ""
        try:
            task_service.add_task(state, raw)
        except TaskValidationError as exc:
            refresh()
            open_dialog(actions.show_warning, str(exc))
            return
        except Exception:
            logger.exception("Unexpected error while adding task")
            state.status_text = STATUS_ADD_ERROR
            refresh()
            open_dialog(actions.show_error, MSG_ADD_ERROR)
            return

        if field is not None:
            field.value = ""
            field.update()
        refresh()
        await views.scroll_to_last(refs)
        await focus_input()

    # ------------------------------------------------------------------
    # 削除
    # ------------------------------------------------------------------
    def do_delete(targets: list[str] | None = None):
        try:
            task_service.delete_selected(state, targets)
        except Exception:
            logger.exception("Unexpected error while deleting task(s)")
            state.status_text = STATUS_DELETE_ERROR
            refresh()
            open_dialog(actions.show_error, MSG_DELETE_ERROR)
            return
        refresh()

    def on_delete(_e=None):
        if not state.can_delete:
            open_dialog(actions.show_info, MSG_NO_SELECTION)
            return
        if task_service.needs_delete_confirmation(state):
            # 確認時点のタスクだけを削除する
            targets = task_service.selected_tasks(state)
            open_dialog(
                actions.show_confirm_dialog,
                "Confirm Delete",
                task_service.delete_confirmation_message(len(targets)),
                on_confirm=lambda: do_delete(targets),
                danger=True,
            )
            return
        do_delete()

    def on_toggle_task(index: int):
        state.toggle_selection(index)
        refresh()

    def on_input_focus_change(focused: bool):
        state.input_focused = focused

    # ------------------------------------------------------------------
    # キーボードショートカット
    # ------------------------------------------------------------------
    async def on_keyboard(e: ft.KeyboardEvent):
        intent = resolve_shortcut(
            e.key,
            ctrl=e.ctrl,
            alt=e.alt,
            input_focused=state.input_focused,
            dialog_open=state.dialog_open,
        )
        if intent == FOCUS_INPUT:
            await focus_input(select_all=True)
        elif intent == ADD:
            await on_add()
        elif intent == DELETE:
            # ボタンが無効なら何もしない
            if state.can_delete:
                on_delete()
        elif intent == CLEAR_SELECTION:
            task_service.clear_selection(state)
            refresh()
            await focus_input()

    page.on_keyboard_event = on_keyboard

    # ------------------------------------------------------------------
    # 終了確認
    # ------------------------------------------------------------------
    async def close_window():
        page.window.prevent_close = False
        page.update()
        await page.window.close()

    async def on_window_event(e: ft.WindowEvent):
        if e.type != ft.WindowEventType.CLOSE or state.dialog_open:
            return
        message = task_service.exit_confirmation_message(state)
        logger.debug("Window close requested, tasks=%d", len(state.tasks))
        if message is None:
            await close_window()
            return
        open_dialog(
            actions.show_confirm_dialog,
            "Confirm Exit",
            message,
            on_confirm=lambda: page.run_task(close_window),
        )

    page.window.prevent_close = True
    page.window.on_event = on_window_event

    page.views.clear()
    page.views.append(
        views.build_main_view(
            state=state,
            refs=refs,
            on_add=on_add,
            on_delete=on_delete,
            on_toggle_task=on_toggle_task,
            on_input_focus_change=on_input_focus_change,
        )
    )
    page.update()


# ==========================================================================
# エントリーポイント
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
