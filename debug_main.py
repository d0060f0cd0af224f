"""Convenience entrypoint with predefined design settings for debugging.

Usage in a Python console (Jupyter-style)::

    import debug_main
    state = debug_main.prepare_state(rows=4, columns=4, words=["ab", "ab", "aa", "bb"])
    debug_main.step_select(state)
    debug_main.step_solve(state)
    debug_main.step_validate(state)
    result = debug_main.build_result(state)

Call :func:`run_debug` for a one-liner, or execute the functions above one by
one to inspect intermediate state.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from crossword_csp.core.constants import MultisetStrategy
from crossword_csp.core.exceptions import CrosswordError
from crossword_csp.data.lemmas import load_lemmas
from crossword_csp.data.selection import WordSelector
from crossword_csp.engine.generator import CrosswordResult, GeneratorConfig
from crossword_csp.engine.solver import solve_board
from crossword_csp.engine.validator import GridValidator
from crossword_csp.utils.logger import configure_logging
from crossword_csp.utils.pretty import pretty_print_board, print_solve_stats

DEFAULT_DEBUG_ARGS: Dict[str, Any] = {
    "rows": 5,
    "columns": 5,
    "words": None,                  # explicit word multiset; None draws from the lemma list
    "lemma_path": Path("src/lemma.al.txt"),
    "word_limit": 4,
    "seed": None,
    "allow_duplicates": False,
    "strategy": MultisetStrategy.COPY,
}

LOGGER = logging.getLogger(__name__)


def prepare_state(**overrides: Any) -> Dict[str, Any]:
    """Return a mutable state dictionary used by the step helpers."""

    args = {**DEFAULT_DEBUG_ARGS, **overrides}
    configure_logging(logging.DEBUG if args.get("verbose") else logging.INFO)
    config = GeneratorConfig(
        rows=int(args["rows"]),
        columns=int(args["columns"]),
        lemma_path=args["lemma_path"],
        word_limit=int(args["word_limit"]),
        seed=int(args["seed"]) if args.get("seed") is not None else None,
        allow_duplicates=bool(args["allow_duplicates"]),
        strategy=MultisetStrategy(args["strategy"]),
    )
    return {
        "config": config,
        "rng": random.Random(config.seed),
        "user_words": list(args["words"]) if args.get("words") is not None else None,
        "words": [],
        "solve": None,
        "validation": None,
    }


def load_lemma_dataframe(state: Dict[str, Any], *, limit: int | None = 10):
    """Return the filtered lemma list as a pandas DataFrame.

    ``limit`` controls how many rows are printed (``None`` disables the preview).
    """

    try:
        import pandas as pd
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "Viewing the lemma list requires pandas. Install it via 'pip install crossword-csp[debug]'."
        ) from exc

    config: GeneratorConfig = state["config"]
    entries = load_lemmas(config.to_lemma_config())
    df = pd.DataFrame(
        [(entry.word, entry.frequency, entry.pos) for entry in entries],
        columns=["word", "frequency", "pos"],
    )
    df["length"] = df["word"].str.len()
    if limit is not None:
        print(df.head(limit))
    return df


def step_select(state: Dict[str, Any]) -> List[str]:
    config: GeneratorConfig = state["config"]
    if state["user_words"] is not None:
        state["words"] = list(state["user_words"])
        return state["words"]
    entries = load_lemmas(config.to_lemma_config())
    selector = WordSelector((entry.word for entry in entries), rng=state["rng"])
    state["words"] = selector.select(
        config.word_limit,
        max_length=config.max_word_length,
        allow_duplicates=config.allow_duplicates,
    )
    return state["words"]


def step_solve(state: Dict[str, Any]):
    config: GeneratorConfig = state["config"]
    state["solve"] = solve_board(config.rows, config.columns, state["words"], config.strategy)
    pretty_print_board(state["solve"].board, label=f"solved={state['solve'].solved}")
    return state["solve"]


def step_validate(state: Dict[str, Any]):
    state["validation"] = GridValidator().validate(state["solve"].board, state["words"])
    return state["validation"]


def build_result(state: Dict[str, Any], attempts: int = 1) -> CrosswordResult:
    messages = state["validation"].messages if state["validation"] else []
    return CrosswordResult(
        board=state["solve"].board,
        words=state["words"],
        attempts=attempts,
        stats=state["solve"].stats,
        validation_messages=messages,
        seed=state["config"].seed,
    )


def run_debug(max_runs: int = 5, **overrides: Any) -> CrosswordResult:
    """Execute the pipeline, drawing new words until a board validates."""

    last_error: Optional[Exception] = None
    state = prepare_state(**overrides)
    for attempt in range(1, max_runs + 1):
        step_select(state)
        solve = step_solve(state)
        if not solve.solved:
            last_error = CrosswordError(f"No board for {state['words']}")
            LOGGER.warning("Attempt %s/%s failed: %s", attempt, max_runs, last_error)
            if state["user_words"] is not None:
                break
            continue
        validation = step_validate(state)
        if not validation.ok:
            raise CrosswordError(f"Validation failed: {validation.messages}")
        result = build_result(state, attempts=attempt)
        print_solve_stats(result)
        return result
    raise CrosswordError("Unable to design a board after retries") from last_error


def main() -> None:  # pragma: no cover - manual helper
    result = run_debug()
    print(f"Words: {', '.join(result.words)}")
    print(f"Validation: {result.validation_messages or 'ok'}")


if __name__ == "__main__":
    main()
