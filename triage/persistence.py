# word_triage/triage/persistence.py
"""Load and save the three category files.

Layout on disk (one word per line, each line terminated by ``\\n``):

- ``known.txt``   - sorted
- ``unknown.txt`` - order in which words were classified
- ``skip.txt``    - sorted

Saving always rewrites every file in full, in the fixed order known, unknown,
skip. A failure part-way through leaves earlier files as written; there is no
multi-file transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from .prompter import Classification
from .triage_engine import TriageState
from .word_lists import load_words


@dataclass
class CategoryPaths:
    """Locations of the persisted category files."""

    known: Path = Path("known.txt")
    unknown: Path = Path("unknown.txt")
    skip: Path = Path("skip.txt")

    def in_order(self) -> List[tuple[Classification, Path]]:
        return [
            (Classification.KNOWN, self.known),
            (Classification.UNKNOWN, self.unknown),
            (Classification.SKIP, self.skip),
        ]


def load_state(paths: CategoryPaths) -> TriageState:
    """Build a ``TriageState`` from existing category files.

    Every file must exist (an empty file is fine); a missing one raises
    ``FileNotFoundError`` instead of starting from an empty list.
    """
    state = TriageState()
    for classification, path in paths.in_order():
        state.words_for(classification).extend(load_words(path))
    counts = state.counts()
    logging.info(
        "Loaded %d known, %d unknown and %d skipped word(s)",
        counts["known"],
        counts["unknown"],
        counts["skip"],
    )
    return state


def save_state(state: TriageState, paths: CategoryPaths, *, sort_unknown: bool = False) -> List[Path]:
    """Write ``state`` to ``paths`` and return the files written, in order."""

    state.known.sort()
    state.skip.sort()
    if sort_unknown:
        state.unknown.sort()

    written: List[Path] = []
    for classification, path in paths.in_order():
        _write_words(state.words_for(classification), path)
        written.append(path)
    counts = state.counts()
    logging.info(
        "Saved %d known, %d unknown and %d skipped word(s)",
        counts["known"],
        counts["unknown"],
        counts["skip"],
    )
    return written


def _write_words(words: Iterable[str], path: Path) -> None:
    with Path(path).open("w", encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        for word in words:
            handle.write(word)
            handle.write("\n")


__all__ = [
    "CategoryPaths",
    "load_state",
    "save_state",
]
