import curses

from key_events import Key, KeyEvent

QUIT_CODES = {3, 17, 24}  # Ctrl+C, Ctrl+Q, Ctrl+X
ENTER_CODES = {10, 13, curses.KEY_ENTER}
BACKSPACE_CODES = {8, 127, curses.KEY_BACKSPACE}
ESC = 27

SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
    curses.KEY_RESIZE: Key.RESIZE,
}

NORMAL_CHARS = {
    "k": Key.UP,
    "j": Key.DOWN,
    "h": Key.LEFT,
    "l": Key.RIGHT,
    "G": Key.END,
    "0": Key.LINE_START,
    "$": Key.LINE_END,
    "a": Key.SORT_ASC,
    "d": Key.SORT_DESC,
    "o": Key.RESTORE_ORDER,
    "/": Key.SEARCH_START,
    " ": Key.SPACE,
    "q": Key.QUIT,
}


class KeyMapper:
    """Translates raw curses input (get_wch/getch results) into KeyEvents."""

    def __init__(self):
        self.pending_g = False

    def translate(self, ch, text_entry: bool = False):
        """Return the KeyEvent for ``ch``, or None when the key means nothing (yet)."""
        if ch is None or ch == -1:
            return None

        # function keys arrive as ints >= 256, everything else as a char or its code
        if isinstance(ch, int) and ch >= 256:
            self.pending_g = False
            if ch in SPECIAL_KEYS:
                return KeyEvent(SPECIAL_KEYS[ch])
            if ch in ENTER_CODES:
                return KeyEvent(Key.ENTER)
            if ch in BACKSPACE_CODES:
                return KeyEvent(Key.BACKSPACE)
            return None
        else:
            try:
                text = ch if isinstance(ch, str) else chr(ch)
            except (ValueError, OverflowError):
                return None
            if len(text) != 1:
                return None
            code = ord(text)

        if code in QUIT_CODES:
            self.pending_g = False
            return KeyEvent(Key.QUIT)
        if code in ENTER_CODES:
            self.pending_g = False
            return KeyEvent(Key.ENTER)
        if code in BACKSPACE_CODES:
            self.pending_g = False
            return KeyEvent(Key.BACKSPACE)
        if code == ESC:
            self.pending_g = False
            return KeyEvent(Key.ESCAPE)

        if text_entry:
            self.pending_g = False
            return KeyEvent.of_char(text) if text.isprintable() else None

        # ---------- normal mode ----------
        if text == "g":
            if self.pending_g:
                self.pending_g = False
                return KeyEvent(Key.HOME)
            self.pending_g = True
            return None

        self.pending_g = False
        key = NORMAL_CHARS.get(text)
        return KeyEvent(key) if key is not None else None
