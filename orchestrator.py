import curses
import logging
import time

from grid_pane import GridPane
from key_events import Key
from key_mapper import KeyMapper
from render_snapshot import build_snapshot
from screen_layout import ScreenLayout
from search_engine import SearchEngine
from sort_engine import SortEngine
from state_machine import InteractionStateMachine
from status_bar import render_status
from viewport import ViewportController

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state, config):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.state = app_state
        self.config = config
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()
        self.mapper = KeyMapper()

        self.viewport = ViewportController(
            app_state.table,
            self.layout.table_h,
            self.layout.W,
            padding=config.get("COLUMN_PADDING", 2),
            max_col_width=config.get("MAX_COLUMN_WIDTH"),
        )
        self.sorter = SortEngine(app_state.table)
        self.searcher = SearchEngine(app_state.table, ignore_case=config.get("IGNORE_CASE", False))
        self.machine = InteractionStateMachine(
            app_state, self.viewport, self.sorter, self.searcher, self._set_status
        )

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=None):
        if seconds is None:
            seconds = self.config.get("STATUS_SECONDS", 3)
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        table = self.state.table
        sort_state = self.sorter.state
        sort_header = None
        if sort_state.active:
            sort_header = table.columns[sort_state.column].header
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "mode": self.state.mode.value,
            "search_buffer": self.state.search_buffer,
            "file_path": self.state.file_path,
            "row": self.viewport.curr_row,
            "total_rows": table.row_count,
            "col": self.viewport.curr_col,
            "total_cols": table.column_count,
            "sort_header": sort_header,
            "sort_direction": sort_state.direction.value,
        }

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)
        self.viewport.resize(self.layout.table_h, self.layout.W)

    # ---------------- UI ----------------

    def redraw(self):
        status = render_status(self._status_context(), self.layout.W)
        snapshot = build_snapshot(self.viewport, status)
        self.grid.draw(self.layout.table_win, snapshot)

        if self.state.text_entry:
            try:
                curses.curs_set(1)
            except curses.error:
                pass
            self.grid.draw_status(
                self.layout.status_win, snapshot.status, cursor_x=1 + len(self.state.search_buffer)
            )
        else:
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            self.grid.draw_status(self.layout.status_win, snapshot.status)

    def _read_key(self):
        try:
            return self.stdscr.get_wch()
        except curses.error:
            # timeout with no input
            return None

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()
            event = self.mapper.translate(ch, text_entry=self.state.text_entry)
            if event is None:
                self.redraw()
                continue

            if event.key is Key.RESIZE:
                self._resize()

            before = self.state.mode
            self.machine.handle(event)
            if self.state.mode is not before:
                logger.debug("mode %s -> %s", before.value, self.state.mode.value)

            if self.state.exiting:
                break

            self.redraw()
