import curses


class GridPane:
    PAIR_CELL_TEXT = 1
    PAIR_HEADER = 2

    def __init__(self, use_colors=True):
        self.colors = False
        if not use_colors:
            return
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_CYAN, -1)
            self.colors = True
        except curses.error:
            pass

    def _attr(self, pair):
        return curses.color_pair(pair) if self.colors else curses.A_NORMAL

    @staticmethod
    def _put(win, y, x, text, attr):
        h, w = win.getmaxyx()
        if y >= h or x >= w or not text:
            return
        try:
            win.addnstr(y, x, text, w - x, attr)
        except curses.error:
            # writing the bottom-right cell moves the cursor off-window
            pass

    # ---------- rendering ----------
    def draw(self, win, snapshot):
        win.erase()
        base = self._attr(self.PAIR_CELL_TEXT)

        self._put(win, 0, 0, snapshot.header_line, self._attr(self.PAIR_HEADER) | curses.A_BOLD)

        # rows
        for r, cells in enumerate(snapshot.rows):
            y = 1 + r
            x = 0
            for c, cell in enumerate(cells):
                attr = base
                if r == snapshot.cursor_row and c == snapshot.cursor_col:
                    attr = base | curses.A_REVERSE
                self._put(win, y, x, cell, attr)
                x += len(cell)

        win.refresh()

    def draw_status(self, win, text, cursor_x=None):
        win.erase()
        _, w = win.getmaxyx()
        self._put(win, 0, 0, text, curses.A_NORMAL)
        if cursor_x is not None:
            try:
                win.move(0, min(cursor_x, w - 1))
            except curses.error:
                pass
        win.refresh()
