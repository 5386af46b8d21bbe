"""
config.py - アプリ定数・ログ設定
To-Do List v1.0
"""

import logging
import os

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "To-Do List"
APP_VERSION = "1.0.0"

# ウィンドウサイズ (px)
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 400
WINDOW_MIN_WIDTH = 380
WINDOW_MIN_HEIGHT = 260

# ---------------------------------------------------------------------------
# ログ設定
# ---------------------------------------------------------------------------

LOG_LEVEL_ENV = "TODO_APP_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level() -> int:
    """環境変数からログレベルを返す。未知の値は INFO にフォールバック。"""
    name = (os.environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


# ---------------------------------------------------------------------------
# カラーパレット
# ---------------------------------------------------------------------------

COLOR_BG = "#F0F2F5"  # 背景
COLOR_CARD = "#FFFFFF"  # リスト行の背景
COLOR_SELECTED = "#E6F2FF"  # 選択中の行
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#0969DA"  # プライマリ（青）
COLOR_DANGER = "#CF222E"  # 危険色（赤）
COLOR_WARNING = "#BF8700"  # 警告色

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
LIST_ROW_SPACING = 4

# ---------------------------------------------------------------------------
# 表示テキスト
# ---------------------------------------------------------------------------

INPUT_HINT = "Enter a new task (no empty or duplicate tasks). Press Enter to add."
ADD_TOOLTIP = "Add the task (Alt + A)."
DELETE_TOOLTIP = "Delete selected task(s) (Alt + D)."

STATUS_READY = "Ready"
STATUS_ADDED = "Task added."
STATUS_ADD_FAILED = "Add failed: {reason}"
STATUS_DELETED = "Selected task(s) deleted."
STATUS_ADD_ERROR = "Unexpected error while adding task."
STATUS_DELETE_ERROR = "Unexpected error while deleting task(s)."

MSG_EMPTY_TASK = "Task cannot be empty."
MSG_DUPLICATE_TASK = "Task already exists."
MSG_NO_SELECTION = "No task selected to delete. Select a task first."
MSG_CONFIRM_DELETE = "Are you sure you want to delete the selected {count} tasks?"
MSG_CONFIRM_EXIT = (
    "You have {count} task(s) in the list.\nAre you sure you want to exit?"
)
MSG_ADD_ERROR = "An unexpected error occurred while adding the task."
MSG_DELETE_ERROR = "An unexpected error occurred while deleting the task(s)."
MSG_EMPTY_LIST = "No tasks yet"
