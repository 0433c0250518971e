import unittest

from render_snapshot import build_snapshot, fit_cell, visible_columns
from sort_engine import SortDirection, SortEngine
from table_model import TableModel
from viewport import ViewportController


def _small_table():
    header = ["#", "a", "bb", "c"]
    rows = [[str(i), f"{i}a", f"{i}bb", f"{i}c"] for i in range(1, 6)]
    return TableModel(header, rows)


class FitCellTests(unittest.TestCase):
    def test_pads_short_values(self):
        self.assertEqual(fit_cell("ab", 4), "ab  ")

    def test_truncates_with_ellipsis(self):
        self.assertEqual(fit_cell("abcdef", 4), "abc…")

    def test_zero_width(self):
        self.assertEqual(fit_cell("abc", 0), "")


class SnapshotTests(unittest.TestCase):
    def test_frame_matches_window(self):
        # 9 columns wide, header + 3 rows
        vc = ViewportController(_small_table(), height=4, width=9)
        snap = build_snapshot(vc, "status")
        self.assertEqual(
            snap.lines(),
            [
                "#  a   bb",
                "1  1a  1…",
                "2  2a  2…",
                "3  3a  3…",
            ],
        )
        self.assertEqual((snap.cursor_row, snap.cursor_col, snap.cursor_x), (0, 0, 0))
        self.assertEqual(snap.status, "status")
        self.assertTrue(snap.columns[-1].clipped)

    def test_scrolling_down_shifts_rows(self):
        vc = ViewportController(_small_table(), height=4, width=9)
        for _ in range(4):
            vc.move_down()
        snap = build_snapshot(vc)
        self.assertEqual(snap.lines()[1:], ["3  3a  3…", "4  4a  4…", "5  5a  5…"])
        self.assertEqual(snap.cursor_row, 2)
        self.assertEqual(snap.first_row, 2)

    def test_scrolling_right_shifts_columns(self):
        vc = ViewportController(_small_table(), height=4, width=9)
        vc.move_right()
        vc.move_right()
        snap = build_snapshot(vc)
        self.assertEqual(snap.lines()[0], "a   bb   ")
        self.assertEqual(snap.lines()[1], "1a  1bb  ")
        self.assertEqual((snap.cursor_col, snap.cursor_x), (1, 4))
        vc.move_right()
        snap = build_snapshot(vc)
        self.assertEqual(snap.lines()[0], "bb   c   ")

    def test_rows_follow_sort_order(self):
        table = _small_table()
        vc = ViewportController(table, height=4, width=40)
        SortEngine(table).sort(0, SortDirection.DESCENDING)
        vc.scroll()
        snap = build_snapshot(vc)
        self.assertEqual([row[0].strip() for row in snap.rows], ["5", "4", "3"])

    def test_empty_table_renders_headers_only(self):
        vc = ViewportController(TableModel(["x", "y"], []), height=5, width=20)
        snap = build_snapshot(vc)
        self.assertEqual(snap.lines(), ["x  y  "])
        self.assertEqual(snap.rows, ())

    def test_visible_columns_never_exceed_width(self):
        vc = ViewportController(_small_table(), height=4, width=7)
        views = visible_columns(vc)
        self.assertEqual(sum(v.width for v in views), 7)


if __name__ == "__main__":
    unittest.main()
