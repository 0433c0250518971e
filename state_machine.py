import logging

from app_state import Mode
from key_events import Key
from sort_engine import SortDirection

logger = logging.getLogger(__name__)


class InteractionStateMachine:
    """
    Dispatches KeyEvents by (mode, key) to the viewport, sort and search engines.
    Keys without an entry for the current mode are ignored.
    """

    def __init__(self, state, viewport, sorter, searcher, set_status_cb):
        self.state = state
        self.viewport = viewport
        self.sorter = sorter
        self.searcher = searcher
        self._set_status = set_status_cb

        v = self.viewport
        self.transitions = {
            Mode.NORMAL: {
                Key.UP: v.move_up,
                Key.DOWN: v.move_down,
                Key.LEFT: v.move_left,
                Key.RIGHT: v.move_right,
                Key.PAGE_UP: v.page_up,
                Key.PAGE_DOWN: v.page_down,
                Key.HOME: v.home,
                Key.END: v.end,
                Key.LINE_START: v.line_start,
                Key.LINE_END: v.line_end,
                Key.SORT_ASC: lambda: self._sort(SortDirection.ASCENDING),
                Key.SORT_DESC: lambda: self._sort(SortDirection.DESCENDING),
                Key.RESTORE_ORDER: self._restore,
                Key.SEARCH_START: self._start_search,
                Key.SPACE: self._repeat_search,
                Key.QUIT: self._quit,
                Key.RESIZE: v.scroll,
            },
            Mode.SEARCH_ENTRY: {
                Key.CHAR: self._append_char,
                Key.BACKSPACE: self._delete_char,
                Key.ENTER: self._submit_search,
                Key.ESCAPE: self._cancel_search,
                Key.QUIT: self._quit,
                Key.RESIZE: v.scroll,
            },
            Mode.EXITING: {},
        }

    def handle(self, event) -> bool:
        """Apply one event. Returns False when the event was a no-op for this mode."""
        handler = self.transitions[self.state.mode].get(event.key)
        if handler is None:
            return False
        if event.key is Key.CHAR:
            handler(event.char)
        else:
            handler()
        return True

    # ---------- sort ----------
    def _sort(self, direction):
        if self.state.table.is_empty:
            self._set_status("Empty table")
            return
        col = self.viewport.curr_col
        self.sorter.sort(col, direction)
        self.viewport.scroll()
        header = self.state.table.columns[col].header
        self._set_status(f"Sorted by {header} {direction.value}")

    def _restore(self):
        if self.state.table.is_empty:
            self._set_status("Empty table")
            return
        self.sorter.restore()
        self.viewport.scroll()
        self._set_status("Original order")

    # ---------- search ----------
    def _start_search(self):
        self.state.begin_search(self.viewport.curr_col)
        logger.debug("search entry on column %d", self.viewport.curr_col)

    def _append_char(self, ch):
        self.state.search_buffer += ch

    def _delete_char(self):
        if not self.state.search_buffer:
            self._cancel_search()
            return
        self.state.search_buffer = self.state.search_buffer[:-1]

    def _cancel_search(self):
        self.state.end_search()
        logger.debug("search entry cancelled")

    def _submit_search(self):
        term = self.state.search_buffer
        column = self.state.search_column
        self.state.end_search()
        if not term:
            return
        if self.state.table.is_empty:
            self._set_status("Empty table")
            return
        found = self.searcher.search(term, column, self.viewport.curr_row)
        self._land(found, term)

    def _repeat_search(self):
        if self.searcher.state.is_empty or self.state.table.is_empty:
            return
        found = self.searcher.repeat(self.viewport.curr_row)
        self._land(found, self.searcher.state.term)

    def _land(self, row, term):
        if row is None:
            self._set_status(f"Pattern not found: {term}")
            return
        self.viewport.jump_to_row(row)

    def _quit(self):
        self.state.mode = Mode.EXITING
