import logging
import os
import sys

import pandas as pd

from table_model import TableModel

logger = logging.getLogger(__name__)

ROW_NUMBER_HEADER = "#"
TAB_EXTENSIONS = {".tsv", ".tab"}


class TableLoadError(Exception):
    pass


def default_delimiter(path) -> str:
    if path and path != "-":
        _, ext = os.path.splitext(path)
        if ext.lower() in TAB_EXTENSIONS:
            return "\t"
    return ","


class TableLoader:
    def __init__(self, path=None, delimiter=None, quote='"', row_numbers=True):
        self.path = path
        self.delimiter = delimiter or default_delimiter(path)
        self.quote = quote
        self.row_numbers = row_numbers

    @property
    def from_stdin(self) -> bool:
        return self.path in (None, "-")

    @property
    def source_name(self) -> str:
        return "<stdin>" if self.from_stdin else str(self.path)

    def read_frame(self) -> pd.DataFrame:
        source = sys.stdin if self.from_stdin else self.path
        try:
            return pd.read_csv(
                source,
                sep=self.delimiter,
                quotechar=self.quote,
                header=None,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError as exc:
            raise TableLoadError("no data") from exc
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as exc:
            raise TableLoadError(str(exc)) from exc

    def load(self) -> TableModel:
        raw = self.read_frame()
        if raw.empty:
            raise TableLoadError("no data")

        raw = raw.fillna("")
        header = [str(v) for v in raw.iloc[0].tolist()]
        rows = raw.iloc[1:].astype(str).values.tolist()

        if self.row_numbers:
            header = [ROW_NUMBER_HEADER] + header
            rows = [[str(i)] + row for i, row in enumerate(rows, start=1)]

        logger.info("loaded %s: %d rows x %d columns", self.source_name, len(rows), len(header))
        return TableModel(header, rows)
