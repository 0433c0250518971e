from dataclasses import dataclass

ELLIPSIS = "…"


@dataclass(frozen=True)
class ColumnView:
    index: int
    header: str
    width: int
    clipped: bool = False


@dataclass(frozen=True)
class RenderSnapshot:
    """Everything a backend needs to draw one frame."""

    columns: tuple
    rows: tuple
    cursor_row: int  # offset among the drawn data rows
    cursor_col: int  # offset among the drawn columns
    cursor_x: int
    status: str
    first_row: int = 0

    @property
    def header_line(self) -> str:
        return "".join(fit_cell(c.header, c.width) for c in self.columns)

    def lines(self) -> list[str]:
        return [self.header_line] + ["".join(cells) for cells in self.rows]


def fit_cell(value: str, width: int) -> str:
    """Pad ``value`` to exactly ``width`` chars, ending overlong values in an ellipsis."""
    if width <= 0:
        return ""
    if len(value) > width:
        return value[: width - 1] + ELLIPSIS
    return value.ljust(width)


def visible_columns(viewport) -> list[ColumnView]:
    """Whole columns that fit, plus a trailing partial one clipped to the space left."""
    table = viewport.table
    widths = viewport.rendered_col_widths
    views = []
    used = 0
    for c in range(viewport.col_offset, table.column_count):
        if used >= viewport.width:
            break
        w = widths[c]
        clipped = used + w > viewport.width
        if clipped:
            w = viewport.width - used
        views.append(ColumnView(c, table.columns[c].header, w, clipped))
        used += w
    return views


def build_snapshot(viewport, status: str = "") -> RenderSnapshot:
    table = viewport.table
    columns = visible_columns(viewport)
    rows = viewport.visible_row_range()
    cells = table.rows_slice(rows.start, rows.stop, [c.index for c in columns])
    display_rows = tuple(
        tuple(fit_cell(value, col.width) for value, col in zip(row, columns))
        for row in cells
    )
    return RenderSnapshot(
        columns=tuple(columns),
        rows=display_rows,
        cursor_row=viewport.curr_row - viewport.row_offset,
        cursor_col=viewport.curr_col - viewport.col_offset,
        cursor_x=viewport.cursor_x(),
        status=status,
        first_row=viewport.row_offset,
    )
