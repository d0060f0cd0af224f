import unittest

from crossword_csp.core.constants import BLANK
from crossword_csp.core.exceptions import InvalidInputError
from crossword_csp.engine.placements import generate_placements


class PlacementTests(unittest.TestCase):
    def test_every_offset_is_enumerated_left_to_right(self) -> None:
        placements = generate_placements("cat", 5)
        self.assertEqual([p.line for p in placements], ["cat##", "#cat#", "##cat"])
        self.assertEqual([p.offset for p in placements], [0, 1, 2])

    def test_placement_count_matches_padding(self) -> None:
        for word in ("a", "to", "word", "lattice"):
            for length in range(len(word), len(word) + 6):
                placements = generate_placements(word, length)
                self.assertEqual(len(placements), length - len(word) + 1)
                for placement in placements:
                    line = placement.line
                    self.assertEqual(len(line), length)
                    self.assertEqual(line[placement.offset:placement.offset + len(word)], word)
                    self.assertEqual(line.replace(word, "", 1), BLANK * (length - len(word)))

    def test_word_longer_than_line_has_no_placements(self) -> None:
        self.assertEqual(generate_placements("crossword", 4), [])
        self.assertEqual(generate_placements("a", 0), [])

    def test_exact_fit_has_single_placement(self) -> None:
        placements = generate_placements("abcd", 4)
        self.assertEqual(len(placements), 1)
        self.assertEqual(placements[0].line, "abcd")

    def test_rejects_empty_word_and_negative_length(self) -> None:
        with self.assertRaises(InvalidInputError):
            generate_placements("", 3)
        with self.assertRaises(InvalidInputError):
            generate_placements("ab", -1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
