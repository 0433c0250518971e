import unittest

import numpy as np

from table_model import OutOfBounds, TableModel


def _table():
    return TableModel(["name", "qty"], [["pear", "3"], ["apple", "10"], ["fig", ""]])


class TableModelTests(unittest.TestCase):
    def test_shape_and_headers(self):
        table = _table()
        self.assertEqual(table.row_count, 3)
        self.assertEqual(table.column_count, 2)
        self.assertEqual(table.headers, ["name", "qty"])
        self.assertEqual([c.index for c in table.columns], [0, 1])
        self.assertFalse(table.is_empty)

    def test_cell_goes_through_row_order(self):
        table = _table()
        table.set_row_order([2, 0, 1])
        self.assertEqual(table.cell(0, 0), "fig")
        self.assertEqual(table.row(1), ["pear", "3"])
        self.assertEqual(table.original_index(2), 1)
        self.assertEqual(list(table.column_values(0)), ["fig", "pear", "apple"])
        self.assertEqual(list(table.load_order_values(0)), ["pear", "apple", "fig"])

    def test_lookup_out_of_bounds(self):
        table = _table()
        with self.assertRaises(OutOfBounds):
            table.cell(3, 0)
        with self.assertRaises(OutOfBounds):
            table.cell(0, 2)
        with self.assertRaises(OutOfBounds):
            table.cell(-1, 0)
        with self.assertRaises(IndexError):
            table.column_values(5)

    def test_row_order_must_be_permutation(self):
        table = _table()
        with self.assertRaises(ValueError):
            table.set_row_order([0, 0, 1])
        with self.assertRaises(ValueError):
            table.set_row_order([0, 1])
        np.testing.assert_array_equal(table.row_order, [0, 1, 2])

    def test_row_order_view_is_read_only(self):
        table = _table()
        with self.assertRaises(ValueError):
            table.row_order[0] = 2

    def test_ragged_rows_rejected(self):
        with self.assertRaises(ValueError):
            TableModel(["a", "b"], [["1"]])

    def test_duplicate_headers_kept(self):
        table = TableModel(["x", "x"], [["1", "2"]])
        self.assertEqual(table.headers, ["x", "x"])
        self.assertEqual(table.cell(0, 1), "2")

    def test_empty_tables(self):
        header_only = TableModel(["a"], [])
        self.assertTrue(header_only.is_empty)
        self.assertEqual(header_only.column_count, 1)
        self.assertEqual(header_only.rows_slice(0, 0, [0]), [])

        no_columns = TableModel([], [[], []])
        self.assertTrue(no_columns.is_empty)
        self.assertEqual(no_columns.row_count, 0)

    def test_rows_slice(self):
        table = _table()
        table.set_row_order([1, 2, 0])
        self.assertEqual(table.rows_slice(1, 3, [1]), [[""], ["3"]])
        with self.assertRaises(OutOfBounds):
            table.rows_slice(0, 4, [0])

    def test_missing_cells_become_empty(self):
        table = TableModel(["a", "b"], [["1", "x"], [None, "y"]])
        self.assertEqual(table.headers, ["a", "b"])
        self.assertEqual(table.cell(1, 0), "")


if __name__ == "__main__":
    unittest.main()
