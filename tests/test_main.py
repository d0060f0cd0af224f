import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import main


class MainCliTests(unittest.TestCase):
    def test_designs_board_from_words(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                status = main.main([
                    "--rows", "3", "--columns", "3",
                    "--words", "cat", "cot",
                    "--output", str(output),
                    "--log-level", "WARNING",
                ])
            self.assertEqual(status, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["board"], ["cat", "###", "cot"])
        self.assertEqual(payload["words"], ["cat", "cot"])
        self.assertIn(" c  a  t", buffer.getvalue())

    def test_reports_unsolvable_words(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            status = main.main([
                "--rows", "2", "--columns", "2",
                "--words", "ab", "cd",
                "--log-level", "WARNING",
            ])
        self.assertEqual(status, 1)
        self.assertIn("No board could be designed.", buffer.getvalue())

    def test_words_file_is_read(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words_file = Path(tmpdir) / "words.txt"
            words_file.write_text("# pair\nab\nab\naa\nbb\n", encoding="utf-8")
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                status = main.main([
                    "--rows", "2", "--columns", "2",
                    "--words-file", str(words_file),
                    "--strategy", "journal",
                    "--log-level", "WARNING",
                ])
        self.assertEqual(status, 0)

    def test_requires_a_word_source(self) -> None:
        with self.assertRaises(SystemExit):
            main.main(["--rows", "3", "--columns", "3"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
