import logging
import sys

from todo_app.config import LOG_FORMAT, get_log_level

# ロギング設定
logging.basicConfig(
    level=get_log_level(),
    format=LOG_FORMAT,
)

if __name__ == "__main__":
    import flet as ft
    from todo_app.app_main import main

    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        # exit with non-zero so local runs notice failure
        sys.exit(1)
