# tests/test_build.py

from __future__ import annotations

from build import APP_NAME, build_args


def test_build_args_onefile_windowed() -> None:
    args = build_args()
    assert args[:2] == ["pyinstaller", "main.py"]
    assert args[args.index("--name") + 1] == APP_NAME
    assert "--onefile" in args
    assert args[args.index("--collect-all") + 1] == "flet_desktop"
    assert args[-1] == "--noconsole"


def test_build_args_console() -> None:
    assert "--noconsole" not in build_args(console=True)
