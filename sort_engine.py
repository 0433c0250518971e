import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Optional

import numpy as np
import pandas as pd

from table_model import OutOfBounds

logger = logging.getLogger(__name__)


class SortDirection(Enum):
    NONE = "none"
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass
class SortState:
    column: Optional[int] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def active(self) -> bool:
        return self.direction is not SortDirection.NONE


def _as_number(text):
    value = pd.to_numeric(text, errors="coerce")
    try:
        value = float(value)
    except (TypeError, ValueError):
        return math.nan
    return value


def _three_way(a, b) -> int:
    return int(a > b) - int(a < b)


def _compare_parsed(a: str, x: float, b: str, y: float) -> int:
    # x and y are the numeric parses of a and b, NaN when not numeric
    if a == "" or b == "":
        return _three_way(a != "", b != "")
    if not (math.isnan(x) or math.isnan(y)):
        return _three_way(x, y)
    return _three_way(a, b)


def compare_cells(a: str, b: str) -> int:
    """Three-way comparison used for sorting.

    Empty cells come first. Two numeric cells compare by value, anything else
    compares as plain strings.
    """
    return _compare_parsed(a, _as_number(a), b, _as_number(b))


class SortEngine:
    def __init__(self, table):
        self.table = table
        self.state = SortState()

    def _numeric(self, values) -> np.ndarray:
        parsed = pd.to_numeric(pd.Series(values, dtype=object), errors="coerce")
        return parsed.astype(float).to_numpy()

    def sort(self, column: int, direction: SortDirection) -> bool:
        """
        Stable sort of the current row order by ``column``. Equal cells keep
        the order they had before, so sorting by a second column and then a
        first one orders by both.
        """
        if self.table.is_empty:
            return False
        if not 0 <= column < self.table.column_count:
            raise OutOfBounds(f"column {column} outside [0, {self.table.column_count})")
        if direction is SortDirection.NONE:
            self.restore()
            return True

        values = self.table.load_order_values(column)
        numbers = self._numeric(values)

        def compare(i, j):
            return _compare_parsed(values[i], float(numbers[i]), values[j], float(numbers[j]))

        # reverse=True keeps equal items in their prior relative order
        order = sorted(
            self.table.row_order.tolist(),
            key=cmp_to_key(compare),
            reverse=direction is SortDirection.DESCENDING,
        )
        self.table.set_row_order(order)
        self.state = SortState(column, direction)
        logger.debug("sorted column %d %s", column, direction.value)
        return True

    def restore(self):
        self.table.set_row_order(np.arange(self.table.row_count))
        self.state = SortState()
        logger.debug("restored load order")
