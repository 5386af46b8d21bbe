import subprocess
import sys
import os

APP_NAME = "TodoList"


def build_args(console: bool = False) -> list[str]:
    """PyInstaller arguments for a one-file desktop build."""
    args = [
        "pyinstaller",
        "main.py",
        "--name",
        APP_NAME,
        "--clean",
        "--onefile",
        "--collect-all",
        "flet_desktop",  # Bundle Flet desktop runtime
        "--collect-data",
        "flet",  # Bundle Flet data files (icons.json etc.)
    ]

    # CI環境（GitHub Actions等）でない場合のみ、--noconsole を追加する
    if not console:
        args.append("--noconsole")
    return args


def build():
    args = build_args(console=bool(os.environ.get("CI")))

    # Run PyInstaller
    print(f"Running: {' '.join(args)}")
    result = subprocess.run(args)

    if result.returncode == 0:
        print("\nBuild successful! Executable is in the 'dist' folder.")
    else:
        print("\nBuild failed.")
        sys.exit(result.returncode)


if __name__ == "__main__":
    build()
