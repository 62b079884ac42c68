import unittest

from ..listing.page_sequence import ELLIPSIS, EllipsisToken, generate_page_sequence

E = ELLIPSIS


class TestGeneratePageSequence(unittest.TestCase):
    def test_small_counts_list_every_page(self):
        for page_count in range(0, 8):
            for current in range(1, 10):
                with self.subTest(page_count=page_count, current=current):
                    self.assertEqual(
                        generate_page_sequence(current, page_count),
                        list(range(1, page_count + 1)),
                    )

    def test_no_ellipsis_at_six_and_seven_pages(self):
        for page_count in (6, 7):
            for current in range(1, page_count + 1):
                tokens = generate_page_sequence(current, page_count)
                self.assertNotIn(E, tokens)

    def test_eight_pages_is_first_truncated_count(self):
        self.assertEqual(generate_page_sequence(1, 8), [1, 2, 3, 4, E, 7, 8])
        self.assertEqual(generate_page_sequence(8, 8), [1, 2, E, 5, 6, 7, 8])
        self.assertEqual(generate_page_sequence(4, 8), [1, 2, E, 3, 4, 5, E, 7, 8])

    def test_near_start(self):
        self.assertEqual(generate_page_sequence(1, 16), [1, 2, 3, 4, E, 15, 16])
        self.assertEqual(generate_page_sequence(3, 16), [1, 2, 3, 4, E, 15, 16])

    def test_near_end(self):
        self.assertEqual(generate_page_sequence(16, 16), [1, 2, E, 13, 14, 15, 16])
        self.assertEqual(generate_page_sequence(14, 16), [1, 2, E, 13, 14, 15, 16])

    def test_middle(self):
        self.assertEqual(generate_page_sequence(8, 16), [1, 2, E, 7, 8, 9, E, 15, 16])
        self.assertEqual(generate_page_sequence(13, 16), [1, 2, E, 12, 13, 14, E, 15, 16])

    def test_current_page_past_the_end_does_not_fail(self):
        tokens = generate_page_sequence(40, 16)
        self.assertEqual(tokens, [1, 2, E, 13, 14, 15, 16])
        self.assertNotIn(40, tokens)
        self.assertEqual(generate_page_sequence(5, 0), [])

    def test_shape_holds_for_all_inputs(self):
        for page_count in range(0, 30):
            for current in range(1, page_count + 4):
                tokens = generate_page_sequence(current, page_count)
                numbers = [t for t in tokens if not isinstance(t, EllipsisToken)]
                with self.subTest(page_count=page_count, current=current):
                    self.assertEqual(numbers, sorted(numbers))
                    for a, b in zip(tokens, tokens[1:]):
                        self.assertFalse(a is E and b is E)
                    if page_count >= 1:
                        self.assertIn(1, numbers)
                        self.assertIn(page_count, numbers)

    def test_is_pure(self):
        self.assertEqual(generate_page_sequence(8, 16), generate_page_sequence(8, 16))

    def test_invalid_input(self):
        with self.assertRaises(ValueError):
            generate_page_sequence(0, 5)
        with self.assertRaises(ValueError):
            generate_page_sequence(1, -1)

    def test_ellipsis_is_a_singleton(self):
        self.assertIs(EllipsisToken(), ELLIPSIS)
        self.assertEqual(str(ELLIPSIS), "...")


if __name__ == "__main__":
    unittest.main()
