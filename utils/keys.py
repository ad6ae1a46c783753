import curses

SPECIAL_KEYS = {
    curses.KEY_RIGHT: "right",
    curses.KEY_LEFT: "left",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_DC: "delete",
    curses.KEY_BTAB: "shift+tab",
    curses.KEY_RESIZE: "resize",
}

CONTROL_CHARS = {
    "\x03": "ctrl+c",
    "\x1b": "esc",
    "\t": "tab",
    "\n": "enter",
    "\r": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def key_name(key):
    """
    Translate a value returned by ``window.get_wch()`` into a key name.

    Args:
        key: A str for character input or an int for special keys

    Returns:
        str: A name such as "right", "shift+tab", "ctrl+c" or the typed
        character itself. None for keys with no name.
    """
    if isinstance(key, int):
        return SPECIAL_KEYS.get(key)
    if key in CONTROL_CHARS:
        return CONTROL_CHARS[key]
    if len(key) == 1 and key.isprintable():
        return key
    return None
