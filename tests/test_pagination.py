import unittest

from grimoire.core.pagination import (
    max_spread,
    page_count,
    page_at,
    read_page,
    spread_page_indices,
    write_page,
)


def numbered(count: int, prefix: str = "line") -> str:
    return "\n".join(f"{prefix} {n}" for n in range(count))


class TestPageCount(unittest.TestCase):
    def test_empty_buffer_has_two_pages(self) -> None:
        self.assertEqual(page_count(""), 2)

    def test_rounds_up_partial_pages(self) -> None:
        self.assertEqual(page_count(numbered(45), 20), 3)
        self.assertEqual(page_count(numbered(60), 20), 3)
        self.assertEqual(page_count(numbered(61), 20), 4)

    def test_never_below_two(self) -> None:
        for buffer in ["", "x", numbered(20), numbered(39)]:
            self.assertGreaterEqual(page_count(buffer, 20), 2)

    def test_rejects_non_positive_capacity(self) -> None:
        with self.assertRaises(ValueError):
            page_count("abc", 0)


class TestSpreads(unittest.TestCase):
    def test_max_spread(self) -> None:
        self.assertEqual(max_spread(2), 0)
        self.assertEqual(max_spread(3), 1)
        self.assertEqual(max_spread(4), 1)
        self.assertEqual(max_spread(5), 2)

    def test_spread_page_indices(self) -> None:
        self.assertEqual(spread_page_indices(0), (0, 1))
        self.assertEqual(spread_page_indices(3), (6, 7))


class TestReadPage(unittest.TestCase):
    def test_reads_fixed_slice(self) -> None:
        buffer = numbered(45)
        page = read_page(buffer, 1, 20).split("\n")
        self.assertEqual(len(page), 20)
        self.assertEqual(page[0], "line 20")
        self.assertEqual(page[-1], "line 39")

    def test_last_page_is_partial(self) -> None:
        expected = "\n".join(f"line {n}" for n in range(40, 45))
        self.assertEqual(read_page(numbered(45), 2, 20), expected)

    def test_out_of_range_is_empty(self) -> None:
        self.assertEqual(read_page(numbered(45), 7, 20), "")
        self.assertEqual(read_page(numbered(45), -1, 20), "")
        self.assertEqual(read_page("", 1, 20), "")


class TestWritePage(unittest.TestCase):
    def test_round_trip_identity(self) -> None:
        buffers = ["", "x", "a\nb\n", numbered(20), numbered(45), numbered(60)]
        for buffer in buffers:
            for i in range(page_count(buffer, 20) + 1):
                with self.subTest(lines=buffer.count("\n") + 1, page=i):
                    self.assertEqual(write_page(buffer, i, read_page(buffer, i, 20), 20), buffer)

    def test_shrinking_page_reflows_following_pages(self) -> None:
        buffer = numbered(45)
        self.assertEqual(page_count(buffer, 20), 3)

        updated = write_page(buffer, 0, numbered(5, "new"), 20)

        self.assertEqual(len(updated.split("\n")), 30)
        self.assertEqual(page_count(updated, 20), 2)
        self.assertEqual(max_spread(page_count(updated, 20)), 0)
        self.assertEqual(read_page(updated, 0, 20).split("\n")[5], "line 20")

    def test_growing_page_pushes_lines_forward(self) -> None:
        updated = write_page(numbered(45), 0, numbered(25, "new"), 20)

        self.assertEqual(page_count(updated, 20), 3)
        page = read_page(updated, 1, 20).split("\n")
        self.assertEqual(page[0], "new 20")
        self.assertEqual(page[5], "line 20")

    def test_only_target_page_lines_are_replaced(self) -> None:
        updated = write_page(numbered(45), 1, "middle", 20)
        lines = updated.split("\n")

        self.assertEqual(len(lines), 26)
        self.assertEqual(lines[19], "line 19")
        self.assertEqual(lines[20], "middle")
        self.assertEqual(lines[21], "line 40")

    def test_page_past_end_is_appended(self) -> None:
        self.assertEqual(write_page("a", 3, "z", 20), "a\nz")

    def test_negative_index_is_ignored(self) -> None:
        self.assertEqual(write_page("a\nb", -1, "z", 20), "a\nb")


class TestPageAt(unittest.TestCase):
    def test_page_view(self) -> None:
        page = page_at(numbered(45), 2, 20)

        self.assertEqual(page.index, 2)
        self.assertEqual(page.first_line, 40)
        self.assertEqual(page.content, read_page(numbered(45), 2, 20))

    def test_pages_cover_buffer(self) -> None:
        buffer = numbered(45)
        pages = [page_at(buffer, i, 20) for i in range(page_count(buffer, 20))]

        self.assertEqual("\n".join(p.content for p in pages), buffer)

    def test_page_past_end_is_empty(self) -> None:
        self.assertEqual(page_at("", 1, 20).content, "")

if __name__ == "__main__":
    unittest.main(verbosity=2)
