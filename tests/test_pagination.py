import unittest

from csvsearch.pagination import PageLink, page_links, total_pages


def _labels(links):
    out = []
    for link in links:
        if link.kind == "gap":
            out.append("...")
        elif link.kind == "current":
            out.append(f"[{link.page}]")
        elif link.kind in ("prev", "next"):
            out.append(f"{link.kind}:{link.page}")
        else:
            out.append(str(link.page))
    return out


class TestTotalPages(unittest.TestCase):
    def test_floor_of_one(self):
        self.assertEqual(total_pages(0, 1000), 1)
        self.assertEqual(total_pages(1000, 1000), 1)
        self.assertEqual(total_pages(1001, 1000), 2)
        self.assertEqual(total_pages(2500, 1000), 3)


class TestPageLinks(unittest.TestCase):
    def test_single_page_has_no_links(self):
        self.assertEqual(page_links(1, 1), [])

    def test_first_page(self):
        self.assertEqual(
            _labels(page_links(1, 3)),
            ["[1]", "2", "3", "next:2"],
        )

    def test_middle_page_with_gaps(self):
        self.assertEqual(
            _labels(page_links(10, 20, radius=2)),
            ["prev:9", "1", "...", "8", "9", "[10]", "11", "12", "...", "20", "next:11"],
        )

    def test_no_gap_when_adjacent(self):
        # start == 2 and end == total - 1: first/last shown without ellipsis
        self.assertEqual(
            _labels(page_links(4, 7, radius=2)),
            ["prev:3", "1", "2", "3", "[4]", "5", "6", "7", "next:5"],
        )

    def test_last_page(self):
        links = page_links(20, 20)
        self.assertEqual(links[-1], PageLink("current", 20))
        self.assertEqual(links[0], PageLink("prev", 19))
        self.assertEqual(links[1], PageLink("page", 1))
        self.assertEqual(links[2], PageLink("gap"))


if __name__ == "__main__":
    unittest.main()
