import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class OutOfBounds(IndexError):
    """A row or column index outside the table. Indicates a controller bug."""


@dataclass(frozen=True)
class Column:
    index: int
    header: str


class TableModel:
    """
    Owns the parsed cells and the order they are displayed in.
    Cells never change after construction; only the row order is replaced.
    """

    def __init__(self, header, rows):
        header = [str(h) for h in header]
        width = len(header)
        if width == 0:
            rows = []
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"row {i} has {len(row)} cells, expected {width}"
                )

        self.columns: list[Column] = [Column(i, h) for i, h in enumerate(header)]
        # positional labels keep duplicate headers apart
        self._frame = pd.DataFrame(
            [list(row) for row in rows], columns=range(width), dtype=object
        )
        self._frame = self._frame.fillna("").astype(str)
        self._order = np.arange(len(self._frame), dtype=np.intp)

    # ---------- shape ----------
    @property
    def row_count(self) -> int:
        return len(self._frame)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def headers(self) -> list[str]:
        return [c.header for c in self.columns]

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0 or self.column_count == 0

    # ---------- row order ----------
    @property
    def row_order(self) -> np.ndarray:
        view = self._order.view()
        view.setflags(write=False)
        return view

    def set_row_order(self, order):
        order = np.asarray(order, dtype=np.intp)
        n = self.row_count
        if order.shape != (n,) or not np.array_equal(np.sort(order), np.arange(n)):
            raise ValueError("row order must be a permutation of the row indices")
        self._order = order.copy()

    def original_index(self, row: int) -> int:
        self._check_row(row)
        return int(self._order[row])

    # ---------- lookup ----------
    def _check_row(self, row):
        if not 0 <= row < self.row_count:
            raise OutOfBounds(f"row {row} outside [0, {self.row_count})")

    def _check_col(self, col):
        if not 0 <= col < self.column_count:
            raise OutOfBounds(f"column {col} outside [0, {self.column_count})")

    def cell(self, row: int, col: int) -> str:
        self._check_row(row)
        self._check_col(col)
        return self._frame.iat[int(self._order[row]), col]

    def row(self, row: int) -> list[str]:
        self._check_row(row)
        return self._frame.iloc[int(self._order[row])].tolist()

    def column_values(self, col: int) -> np.ndarray:
        """Values of a column in display order."""
        self._check_col(col)
        return self._frame[col].to_numpy()[self._order]

    def load_order_values(self, col: int) -> np.ndarray:
        """Values of a column indexed by original row index."""
        self._check_col(col)
        return self._frame[col].to_numpy()

    def rows_slice(self, start: int, stop: int, cols) -> list[list[str]]:
        """Display rows [start, stop) restricted to the given column indices."""
        if start < 0 or stop > self.row_count or start > stop:
            raise OutOfBounds(f"rows [{start}, {stop}) outside [0, {self.row_count})")
        cols = list(cols)
        for c in cols:
            self._check_col(c)
        if start == stop or not cols:
            return [[] for _ in range(stop - start)]
        block = self._frame.iloc[self._order[start:stop], cols]
        return block.values.tolist()
