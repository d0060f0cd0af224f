import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from crossword_csp.core.constants import MultisetStrategy
from crossword_csp.core.exceptions import InvalidInputError, NoSolutionError
from crossword_csp.engine.generator import CrosswordGenerator, GeneratorConfig


class GeneratorTests(unittest.TestCase):
    def test_explicit_words_are_designed_once(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(rows=3, columns=3))
        result = generator.generate(["cat", "cot"])
        self.assertEqual(result.board.rows_as_text(), ["cat", "###", "cot"])
        self.assertEqual(result.attempts, 1)
        self.assertEqual(result.words, ["cat", "cot"])
        self.assertEqual(result.validation_messages, [])

    def test_explicit_words_without_board_raise(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(rows=2, columns=2, retry_limit=5))
        with self.assertRaises(NoSolutionError):
            generator.generate(["ab", "cd"])

    def test_invalid_words_are_rejected_before_search(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(rows=3, columns=3))
        with self.assertRaises(InvalidInputError):
            generator.generate(["c#t"])

    def test_invalid_dimensions_are_rejected(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(rows=0, columns=3))
        with self.assertRaises(InvalidInputError):
            generator.generate(["cat"])

    def test_journal_strategy_is_used(self) -> None:
        config = GeneratorConfig(rows=2, columns=2, strategy=MultisetStrategy.JOURNAL)
        result = CrosswordGenerator(config).generate(["ab", "ab", "aa", "bb"])
        self.assertEqual(result.board.rows_as_text(), ["ab", "ab"])

    def test_random_selection_retries_until_solved(self) -> None:
        selector = MagicMock()
        selector.select.side_effect = [["ab", "cd"], ["ab"]]
        config = GeneratorConfig(rows=2, columns=2, word_limit=2, retry_limit=2)
        result = CrosswordGenerator(config, selector=selector).generate()
        self.assertEqual(result.attempts, 2)
        self.assertEqual(result.words, ["ab"])
        self.assertEqual(result.board.rows_as_text(), ["ab", "##"])
        self.assertEqual(selector.select.call_count, 2)

    def test_random_selection_gives_up_after_retries(self) -> None:
        selector = MagicMock()
        selector.select.return_value = ["ab", "cd"]
        config = GeneratorConfig(rows=2, columns=2, word_limit=2, retry_limit=3)
        with self.assertRaises(NoSolutionError):
            CrosswordGenerator(config, selector=selector).generate()
        self.assertEqual(selector.select.call_count, 3)

    def test_words_drawn_from_supplied_lemmas(self) -> None:
        config = GeneratorConfig(rows=3, columns=3, word_limit=1, seed=3)
        result = CrosswordGenerator(config, lemmas=["abc", "de"]).generate()
        self.assertEqual(len(result.words), 1)
        self.assertIn(result.words[0], {"abc", "de"})
        self.assertIn(result.words[0], result.board.get_row(0))

    def test_words_drawn_from_lemma_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "lemma.al.txt"
            path.write_text("1 100 cat n\n2 90 the det\n3 80 elephant n\n", encoding="utf-8")
            config = GeneratorConfig(rows=3, columns=3, lemma_path=path, word_limit=1, seed=1)
            result = CrosswordGenerator(config).generate()
        self.assertEqual(result.words, ["cat"])
        self.assertEqual(result.board.rows_as_text(), ["cat", "###", "###"])

    def test_missing_lemma_source_is_invalid(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(rows=3, columns=3))
        with self.assertRaises(InvalidInputError):
            generator.generate()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
