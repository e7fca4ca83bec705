import unittest

from csvsearch.scan import is_empty_row, normalize_query, row_matches


class TestPredicate(unittest.TestCase):
    def test_empty_rows(self):
        self.assertTrue(is_empty_row([]))
        self.assertTrue(is_empty_row([""]))
        self.assertTrue(is_empty_row(["  \t"]))
        self.assertFalse(is_empty_row(["x"]))
        # two blank fields is a (ragged) row, not an empty one
        self.assertFalse(is_empty_row(["", ""]))

    def test_case_insensitive_substring(self):
        q = normalize_query("PaR")
        self.assertTrue(row_matches(["Alice", "Paris"], q))
        self.assertTrue(row_matches(["SPARROW"], q))
        self.assertFalse(row_matches(["Lyon", "Berlin"], q))

    def test_empty_query_matches_everything(self):
        self.assertTrue(row_matches(["anything"], normalize_query("")))
        self.assertTrue(row_matches(["anything"], normalize_query(None)))

    def test_query_is_not_split(self):
        q = normalize_query("alice paris")
        self.assertFalse(row_matches(["Alice", "Paris"], q))
        self.assertTrue(row_matches(["Alice Paris"], q))

    def test_none_cells_tolerated(self):
        self.assertFalse(row_matches([None, "x"], "y"))


if __name__ == "__main__":
    unittest.main()
