# word_triage/triage/triage_engine.py
"""Classify each word exactly once.

``TriageState`` owns the three in-memory word lists for a run. ``Triager``
walks words through a sticky state machine: a word that already matches an
entry (case-insensitively) in any list is left alone, otherwise the prompter
is asked and the answer appended to the matching list. A
:class:`~triage.prompter.TriageTerminated` raised by the prompter propagates
untouched so the driver can save progress before exiting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .prompter import Classification, Prompter


@dataclass
class TriageState:
    """Known, unknown and skipped words held for the duration of a run."""

    known: List[str] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    skip: List[str] = field(default_factory=list)

    def words_for(self, classification: Classification) -> List[str]:
        if classification is Classification.KNOWN:
            return self.known
        if classification is Classification.UNKNOWN:
            return self.unknown
        if classification is Classification.SKIP:
            return self.skip
        raise ValueError(f"Unsupported classification: {classification!r}")

    def contains(self, word: str) -> bool:
        folded = word.casefold()
        return any(
            folded == existing.casefold()
            for words in (self.known, self.unknown, self.skip)
            for existing in words
        )

    def add(self, classification: Classification, word: str) -> None:
        self.words_for(classification).append(word)

    def counts(self) -> Dict[str, int]:
        return {
            Classification.KNOWN.value: len(self.known),
            Classification.UNKNOWN.value: len(self.unknown),
            Classification.SKIP.value: len(self.skip),
        }


class Triager:
    """Route unseen words through a prompter into a ``TriageState``."""

    def __init__(self, state: TriageState, prompter: Prompter):
        self.state = state
        self.prompter = prompter
        self.prompted = 0
        self.already_classified = 0

    def triage(self, word: str) -> Optional[Classification]:
        """Classify ``word`` unless it is already present in the state.

        Returns the new classification, or ``None`` when the word was already
        classified and nothing changed.
        """
        if self.state.contains(word):
            self.already_classified += 1
            logging.debug("Skipping already classified word %r", word)
            return None

        classification = self.prompter.ask(word)
        self.prompted += 1
        self.state.add(classification, word)
        logging.debug("Classified %r as %s", word, classification.value)
        return classification


__all__ = [
    "TriageState",
    "Triager",
]
