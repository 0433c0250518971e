from dataclasses import dataclass
from typing import Optional

from table_model import OutOfBounds

HEADER_LINES = 1


@dataclass(frozen=True)
class Viewport:
    first_row: int
    first_col: int
    visible_rows: int
    visible_cols: int


class ViewportController:
    """
    Cursor and scroll window over a table, in display coordinates.
    Every move clamps the cursor and then scrolls just enough to keep it visible.
    """

    def __init__(self, table, height: int, width: int, padding: int = 2,
                 max_col_width: Optional[int] = None):
        self.table = table
        self.padding = max(0, padding)
        self.max_col_width = max_col_width

        self.curr_row = 0
        self.curr_col = 0
        self.row_offset = 0
        self.col_offset = 0
        self.rendered_col_widths: list[int] = []

        self.height = 0
        self.width = 0
        self.resize(height, width)

    # ---------- geometry ----------
    def resize(self, height: int, width: int):
        """Adopt a new table window size (header line included in height)."""
        self.height = max(HEADER_LINES + 1, height)
        self.width = max(1, width)
        self.scroll()

    @property
    def visible_rows(self) -> int:
        return self.height - HEADER_LINES

    @property
    def visible_cols(self) -> int:
        return self._fit_count(self.rendered_col_widths, self.col_offset)

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.row_offset, self.col_offset, self.visible_rows, self.visible_cols)

    def visible_row_range(self) -> range:
        n = self.table.row_count
        start = min(self.row_offset, n)
        return range(start, min(n, start + self.visible_rows))

    def column_widths(self) -> list[int]:
        """Header/visible-cell based widths for every column, padding included."""
        rows = self.visible_row_range()
        cells = self.table.rows_slice(rows.start, rows.stop, range(self.table.column_count))
        widths = []
        for c, header in enumerate(self.table.headers):
            longest = len(header)
            for row in cells:
                longest = max(longest, len(row[c]))
            w = longest + self.padding
            if self.max_col_width:
                w = min(w, self.max_col_width)
            widths.append(max(1, min(w, self.width)))
        return widths

    def _fit_count(self, widths, start) -> int:
        used = 0
        count = 0
        for cw in widths[start:]:
            if used + cw > self.width:
                break
            used += cw
            count += 1
        return max(1, count)

    # ---------- scrolling ----------
    def _scroll_rows(self):
        if self.curr_row < self.row_offset:
            self.row_offset = self.curr_row
        elif self.curr_row >= self.row_offset + self.visible_rows:
            self.row_offset = self.curr_row - self.visible_rows + 1
        # never leave blank rows below the data while earlier rows are hidden
        self.row_offset = max(0, min(self.row_offset, self.table.row_count - self.visible_rows))

    def _scroll_cols(self, widths):
        if self.curr_col < self.col_offset:
            self.col_offset = self.curr_col
        elif self.curr_col >= self.col_offset + self._fit_count(widths, self.col_offset):
            # leftmost start from which every column up to the cursor still fits
            first = self.curr_col
            used = widths[first]
            while first > 0 and used + widths[first - 1] <= self.width:
                first -= 1
                used += widths[first]
            self.col_offset = first
        self.col_offset = max(0, self.col_offset)

    def scroll(self):
        if self.table.is_empty:
            self.curr_row = self.curr_col = 0
            self.row_offset = self.col_offset = 0
            self.rendered_col_widths = self.column_widths()
            return
        self._scroll_rows()
        widths = self.column_widths()
        self._scroll_cols(widths)
        self.rendered_col_widths = widths

    def cursor_x(self) -> int:
        return sum(self.rendered_col_widths[self.col_offset:self.curr_col])

    # ---------- navigation ----------
    def _move_to(self, row=None, col=None):
        if self.table.is_empty:
            return
        if row is not None:
            self.curr_row = max(0, min(self.table.row_count - 1, row))
        if col is not None:
            self.curr_col = max(0, min(self.table.column_count - 1, col))
        self.scroll()

    def move_up(self):
        self._move_to(row=self.curr_row - 1)

    def move_down(self):
        self._move_to(row=self.curr_row + 1)

    def move_left(self):
        self._move_to(col=self.curr_col - 1)

    def move_right(self):
        self._move_to(col=self.curr_col + 1)

    def page_up(self):
        self._move_to(row=self.curr_row - self.visible_rows)

    def page_down(self):
        self._move_to(row=self.curr_row + self.visible_rows)

    def home(self):
        self._move_to(row=0)

    def end(self):
        self._move_to(row=self.table.row_count - 1)

    def line_start(self):
        self._move_to(col=0)

    def line_end(self):
        self._move_to(col=self.table.column_count - 1)

    def jump_to_row(self, row: int):
        if not 0 <= row < self.table.row_count:
            raise OutOfBounds(f"row {row} outside [0, {self.table.row_count})")
        self._move_to(row=row)
