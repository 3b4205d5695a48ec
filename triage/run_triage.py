# word_triage/triage/run_triage.py
"""Command-line front-end for triaging a word list.

Typical invocation from a directory holding ``known.txt``, ``unknown.txt``
and ``skip.txt`` (all three must exist, empty is fine):

``python -m triage.run_triage words.txt``

Each word not yet present in one of the category files is shown full screen;
press ``y`` if you know it, ``n`` or space if you don't, ``s`` to skip it. Any
other key stops the run. Progress is saved both on completion and when the
run is stopped early.

Use ``--config`` to point at a YAML file overriding file locations or key
bindings (see ``configs/default.yaml``) and ``--json`` to receive a
machine-readable summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass, field, is_dataclass
from pathlib import Path
from typing import Any, List

try:  # Support both package-style (`python -m`) and script-style invocation.
    from .config import TriageConfig, load_config
    from .persistence import load_state, save_state
    from .prompter import CursesPrompter, Prompter, TriageTerminated
    from .triage_engine import Triager
    from .word_lists import load_input_words
except ImportError:  # pragma: no cover - executed only when run as a stand-alone script.
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
    from triage.config import TriageConfig, load_config
    from triage.persistence import load_state, save_state
    from triage.prompter import CursesPrompter, Prompter, TriageTerminated
    from triage.triage_engine import Triager
    from triage.word_lists import load_input_words


USAGE_LINES = (
    "word-triager words.txt",
    "type (y/n)",
)


@dataclass
class TriageRunResult:
    """Summary of a completed triage pass."""

    input_path: Path
    input_words: int
    prompted: int
    already_classified: int
    known: int
    unknown: int
    skip: int
    written_paths: List[Path] = field(default_factory=list)


def run(config: TriageConfig, prompter: Prompter) -> TriageRunResult:
    """Triage every word of ``config.input_path`` and persist the result.

    If the prompter raises ``TriageTerminated`` the remaining words are not
    visited; whatever was classified so far is saved and the termination is
    re-raised.
    """
    state = load_state(config.paths)
    words = load_input_words(config.input_path)
    logging.info("Triaging %d word(s) from %s", len(words), config.input_path)

    triager = Triager(state, prompter)
    terminated: TriageTerminated | None = None
    with prompter:
        try:
            for word in words:
                triager.triage(word)
        except TriageTerminated as exc:
            terminated = exc

    if terminated is not None:
        logging.warning("Triage stopped after %d prompt(s) (%s); saving progress.", triager.prompted, terminated)
        try:
            save_state(state, config.paths, sort_unknown=config.sort_unknown)
        except OSError as exc:
            logging.error("Failed to save progress: %s", exc)
        raise terminated

    written = save_state(state, config.paths, sort_unknown=config.sort_unknown)
    counts = state.counts()
    return TriageRunResult(
        input_path=config.input_path,
        input_words=len(words),
        prompted=triager.prompted,
        already_classified=triager.already_classified,
        known=counts["known"],
        unknown=counts["unknown"],
        skip=counts["skip"],
        written_paths=written,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``word-triage`` command."""
    parser = argparse.ArgumentParser(description="Sort a word list into known, unknown and skipped words.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML configuration file with a 'triage' section.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the run summary as JSON.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        type=Path,
        help="Word list to triage, one word per line.",
    )
    args, extra = parser.parse_known_args(argv)
    # Unrecognised options count as extra positionals.
    words = [str(word) for word in args.words] + extra

    if len(words) != 1:
        for line in USAGE_LINES:
            print(line)
        return 0

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        config = load_config(Path(words[0]), args.config)
        prompter = CursesPrompter(config.keys)
        result = run(config, prompter)
    except (OSError, KeyError, ValueError, RuntimeError) as exc:
        logging.error("%s", exc)
        return 1

    _emit_result(result, args.json)
    return 0


def _emit_result(result: TriageRunResult, as_json: bool) -> None:
    summary = (
        "Triaged {prompted} new word(s) from {input} ({existing} already classified): "
        "known={known}, unknown={unknown}, skip={skip}.".format(
            prompted=result.prompted,
            input=result.input_path,
            existing=result.already_classified,
            known=result.known,
            unknown=result.unknown,
            skip=result.skip,
        )
    )
    if as_json:
        payload = {"summary": summary, "result": _to_serialisable(result)}
        print(json.dumps(payload, indent=2))
    else:
        print(summary)


def _to_serialisable(obj: Any) -> Any:
    if is_dataclass(obj):
        data = asdict(obj)
        return {key: _to_serialisable(value) for key, value in data.items()}
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, dict):
        return {key: _to_serialisable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [_to_serialisable(value) for value in obj]
    return obj


__all__ = [
    "TriageRunResult",
    "main",
    "run",
]


if __name__ == "__main__":
    sys.exit(main())
