"""CLI entrypoint for the crossword board designer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from crossword_csp.core.constants import MultisetStrategy
from crossword_csp.core.exceptions import CrosswordError, NoSolutionError
from crossword_csp.data.lemmas import read_word_list
from crossword_csp.engine.generator import CrosswordGenerator, GeneratorConfig
from crossword_csp.utils.logger import configure_logging
from crossword_csp.utils.pretty import format_board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Design a crossword board where every row and column run is a chosen word",
    )
    parser.add_argument("--rows", type=int, default=15, help="Board height in cells")
    parser.add_argument("--columns", type=int, default=15, help="Board width in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit word multiset (repeat a word to use it more than once)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--lemmas",
        type=Path,
        metavar="FILE",
        help="BNC lemma list to draw random words from",
    )
    parser.add_argument("--word-limit", type=int, default=10, help="Number of words to draw")
    parser.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Allow the same lemma to be drawn more than once",
    )
    parser.add_argument("--retries", type=int, default=3, help="Random draws to try before giving up")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--strategy",
        type=str,
        choices=[s.value for s in MultisetStrategy],
        default=MultisetStrategy.COPY.value,
        help="How consumed words are restored on backtrack",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    has_user_words = bool(args.words or args.words_file)
    if not has_user_words and args.lemmas is None:
        parser.error("provide --words / --words-file or --lemmas")

    user_words: Optional[List[str]] = None
    if has_user_words:
        user_words = []
        if args.words:
            user_words.extend(args.words)
        if args.words_file:
            user_words.extend(read_word_list(args.words_file))

    config = GeneratorConfig(
        rows=args.rows,
        columns=args.columns,
        lemma_path=args.lemmas,
        word_limit=args.word_limit,
        seed=args.seed,
        retry_limit=args.retries,
        allow_duplicates=args.allow_duplicates,
        strategy=MultisetStrategy(args.strategy),
    )

    try:
        result = CrosswordGenerator(config).generate(user_words)
    except NoSolutionError:
        print("No board could be designed.")
        return 1
    except CrosswordError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    payload: Dict[str, Any] = {
        "rows": result.board.rows,
        "columns": result.board.columns,
        "words": result.words,
        "board": result.board.to_jsonable(),
        "attempts": result.attempts,
        "stats": result.stats.__dict__,
    }

    if args.output:
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(format_board(result.board))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
