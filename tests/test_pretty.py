import io
import unittest

from crossword_csp.engine.generator import CrosswordGenerator, GeneratorConfig
from crossword_csp.utils.pretty import format_board, pretty_print_board, print_solve_stats


class PrettyPrintTests(unittest.TestCase):
    def setUp(self) -> None:
        config = GeneratorConfig(rows=3, columns=3, seed=5)
        self.result = CrosswordGenerator(config).generate(["cat", "cot"])

    def test_format_board_has_header_and_rows(self) -> None:
        lines = format_board(self.result.board).splitlines()
        self.assertEqual(lines[0], "     0  1  2")
        self.assertEqual(lines[2], " 0 |  c  a  t")
        self.assertEqual(lines[3], " 1 |  #  #  #")
        self.assertEqual(len(lines), 5)

    def test_pretty_print_board_writes_label(self) -> None:
        stream = io.StringIO()
        pretty_print_board(self.result.board, label="demo", stream=stream)
        self.assertTrue(stream.getvalue().startswith("demo\n"))

    def test_print_solve_stats(self) -> None:
        stream = io.StringIO()
        print_solve_stats(self.result, stream=stream)
        text = stream.getvalue()
        self.assertIn("Letters:       6 (67%)", text)
        self.assertIn("Distribution:  3:2", text)
        self.assertIn("Seed: 5", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
