"""
helpers.py - UI helper functions
Single responsibility: small mapping and formatting helpers used across UI.
"""

# Intent names returned by resolve_shortcut
FOCUS_INPUT = "focus_input"
ADD = "add"
DELETE = "delete"
CLEAR_SELECTION = "clear_selection"


def resolve_shortcut(
    key: str | None,
    ctrl: bool = False,
    alt: bool = False,
    input_focused: bool = False,
    dialog_open: bool = False,
) -> str | None:
    """Map a keyboard event to an intent name; None when unbound."""
    k = (key or "").strip().lower()
    # a modal dialog owns the keyboard until it is dismissed
    if not k or dialog_open:
        return None
    if ctrl and k == "n":
        return FOCUS_INPUT
    if alt and k == "a":
        return ADD
    if alt and k == "d":
        return DELETE
    if ctrl or alt:
        return None
    if k == "escape":
        return CLEAR_SELECTION
    # Delete in the text field edits the text, not the list
    if k == "delete" and not input_focused:
        return DELETE
    return None


def delete_button_text(selected_count: int) -> str:
    return f"Delete ({selected_count})" if selected_count > 1 else "Delete"


def select_all_range(text: str | None) -> tuple[int, int]:
    """(base, extent) offsets covering the whole text."""
    return 0, len(text or "")
