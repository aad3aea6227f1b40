"""Key-name table for the press-key tool."""

from typing import Optional

from selenium.webdriver.common.keys import Keys

KEY_MAP = {
    "enter": Keys.ENTER,
    "return": Keys.RETURN,
    "tab": Keys.TAB,
    "space": Keys.SPACE,
    "backspace": Keys.BACKSPACE,
    "delete": Keys.DELETE,
    "escape": Keys.ESCAPE,
    "esc": Keys.ESCAPE,
    "arrowup": Keys.ARROW_UP,
    "arrowdown": Keys.ARROW_DOWN,
    "arrowleft": Keys.ARROW_LEFT,
    "arrowright": Keys.ARROW_RIGHT,
    "arrow_up": Keys.ARROW_UP,
    "arrow_down": Keys.ARROW_DOWN,
    "arrow_left": Keys.ARROW_LEFT,
    "arrow_right": Keys.ARROW_RIGHT,
    "up": Keys.UP,
    "down": Keys.DOWN,
    "left": Keys.LEFT,
    "right": Keys.RIGHT,
    "home": Keys.HOME,
    "end": Keys.END,
    "pageup": Keys.PAGE_UP,
    "pagedown": Keys.PAGE_DOWN,
    "page_up": Keys.PAGE_UP,
    "page_down": Keys.PAGE_DOWN,
    "insert": Keys.INSERT,
    "shift": Keys.SHIFT,
    "control": Keys.CONTROL,
    "ctrl": Keys.CONTROL,
    "alt": Keys.ALT,
    "meta": Keys.META,
    "command": Keys.COMMAND,
    "f1": Keys.F1,
    "f2": Keys.F2,
    "f3": Keys.F3,
    "f4": Keys.F4,
    "f5": Keys.F5,
    "f6": Keys.F6,
    "f7": Keys.F7,
    "f8": Keys.F8,
    "f9": Keys.F9,
    "f10": Keys.F10,
    "f11": Keys.F11,
    "f12": Keys.F12,
}


def key_for(name: str) -> Optional[str]:
    """Map a key name (``Enter``, ``ArrowLeft``, ``PAGE_DOWN``...) to its key code.

    Returns None for names that are not in the table.
    """
    return KEY_MAP.get(name.strip().lower())
