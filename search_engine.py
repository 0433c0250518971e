import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from table_model import OutOfBounds

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    term: str = ""
    column: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.term or self.column is None


class SearchEngine:
    """Substring search down a single column, in display order, with wrap-around."""

    def __init__(self, table, ignore_case: bool = False):
        self.table = table
        self.ignore_case = ignore_case
        self.state = SearchState()

    def matches(self, term: str, column: int) -> np.ndarray:
        """Boolean mask over display rows whose cell contains ``term``."""
        values = pd.Series(self.table.column_values(column), dtype=object)
        mask = values.str.contains(term, case=not self.ignore_case, regex=False)
        return mask.to_numpy(dtype=bool)

    def find_next(self, term: str, column: int, start_row: int) -> Optional[int]:
        """
        Scan rows start_row+1 .. end, then 0 .. start_row, and return the first
        row matching ``term`` in ``column``. The start row is only reached
        after a full wrap. Returns None when nothing matches.
        """
        if not term or self.table.is_empty:
            return None
        if not 0 <= start_row < self.table.row_count:
            raise OutOfBounds(f"row {start_row} outside [0, {self.table.row_count})")

        hits = np.flatnonzero(self.matches(term, column))
        if hits.size == 0:
            return None
        after = hits[hits > start_row]
        found = int(after[0]) if after.size else int(hits[0])
        logger.debug("search %r in column %d from row %d -> %d", term, column, start_row, found)
        return found

    def search(self, term: str, column: int, start_row: int) -> Optional[int]:
        """Run a new search; the term is remembered only when it matches."""
        found = self.find_next(term, column, start_row)
        if found is not None:
            self.state = SearchState(term, column)
        return found

    def repeat(self, start_row: int) -> Optional[int]:
        if self.state.is_empty:
            return None
        return self.find_next(self.state.term, self.state.column, start_row)
