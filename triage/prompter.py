# word_triage/triage/prompter.py
"""Ask the user to classify a single word.

The triage engine only depends on the :class:`Prompter` interface: ``ask``
blocks until a classifying key is pressed and returns a
:class:`Classification`, or raises :class:`TriageTerminated` when the user
quits, presses an unbound key, or the input device fails.

:class:`CursesPrompter` is the terminal implementation. It clears the screen,
draws the word in the middle and waits for one key press. Key bindings are
case-insensitive and default to the classic ``y`` / ``n`` (or space) / ``s``
layout; they can be overridden through the ``keys`` stanza of the YAML
configuration (see :mod:`triage.config`).
"""

from __future__ import annotations

import curses
import logging
from abc import ABC, abstractmethod
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple


class Classification(Enum):
    """Terminal categories a word can be assigned to."""

    KNOWN = "known"
    UNKNOWN = "unknown"
    SKIP = "skip"


class TriageTerminated(RuntimeError):
    """Raised by a prompter when the triage pass has to stop."""

    def __init__(self, message: str = "terminated", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


@dataclass(frozen=True)
class KeyBindings:
    """Keys mapped to each classification (matched case-insensitively)."""

    known: Tuple[str, ...] = ("y",)
    unknown: Tuple[str, ...] = ("n", " ")
    skip: Tuple[str, ...] = ("s",)

    def __post_init__(self) -> None:
        seen: dict[str, Classification] = {}
        for classification, keys in self._groups():
            if not keys:
                raise ValueError(f"No keys bound to '{classification.value}'.")
            for key in keys:
                if not isinstance(key, str) or len(key) != 1:
                    raise ValueError(f"Key bindings must be single characters, got {key!r}")
                folded = key.lower()
                if folded in seen and seen[folded] is not classification:
                    raise ValueError(
                        f"Key {key!r} is bound to both '{seen[folded].value}' and '{classification.value}'."
                    )
                seen[folded] = classification

    def resolve(self, key: str) -> Optional[Classification]:
        folded = key.lower()
        for classification, keys in self._groups():
            if any(folded == candidate.lower() for candidate in keys):
                return classification
        return None

    def _groups(self) -> Sequence[Tuple[Classification, Tuple[str, ...]]]:
        return (
            (Classification.KNOWN, self.known),
            (Classification.UNKNOWN, self.unknown),
            (Classification.SKIP, self.skip),
        )


class Prompter(ABC):
    """Blocking ``word -> Classification`` capability used by the triager."""

    @abstractmethod
    def ask(self, word: str) -> Classification:
        """Return the user's classification for ``word`` or raise ``TriageTerminated``."""

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> "Prompter":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class CursesPrompter(Prompter):
    """Full-screen terminal prompter backed by :mod:`curses`.

    Pass ``screen`` to drive an existing curses window (or a stand-in with the
    same ``getmaxyx``/``erase``/``addstr``/``refresh``/``get_wch`` methods);
    in that case ``open`` and ``close`` leave the terminal alone.
    """

    def __init__(self, bindings: Optional[KeyBindings] = None, screen: Any = None):
        self.bindings = bindings or KeyBindings()
        self._screen = screen
        self._owns_screen = screen is None

    def open(self) -> None:
        if not self._owns_screen:
            return
        try:
            self._screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self._screen.keypad(True)
        except curses.error as exc:
            self._restore_terminal()
            self._screen = None
            raise RuntimeError(f"Unable to initialise terminal: {exc}") from exc
        with suppress(curses.error):
            curses.curs_set(0)

    def close(self) -> None:
        if not self._owns_screen or self._screen is None:
            return
        with suppress(curses.error):
            self._screen.keypad(False)
        self._restore_terminal()
        self._screen = None

    def ask(self, word: str) -> Classification:
        if self._screen is None:
            raise RuntimeError("CursesPrompter used outside of its context manager.")
        while True:
            try:
                self._draw(word)
                key = self._screen.get_wch()
            except KeyboardInterrupt:
                raise TriageTerminated() from None
            except curses.error as exc:
                raise TriageTerminated(f"terminal input failed: {exc}", cause=exc) from exc

            if key == curses.KEY_RESIZE:
                logging.debug("Terminal resized while prompting for %r", word)
                continue
            if isinstance(key, str):
                classification = self.bindings.resolve(key)
                if classification is not None:
                    return classification
            logging.debug("Unbound key %r pressed while prompting for %r", key, word)
            raise TriageTerminated()

    def _draw(self, word: str) -> None:
        screen = self._screen
        screen.erase()
        height, width = screen.getmaxyx()
        # Undecodable input bytes are shown as replacement characters.
        printable = word.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
        text = printable[: max(width - 1, 0)]
        screen.addstr(height // 2, max((width - len(text)) // 2, 0), text)
        screen.refresh()

    @staticmethod
    def _restore_terminal() -> None:
        for restore in (curses.nocbreak, curses.echo, curses.endwin):
            with suppress(curses.error):
                restore()


__all__ = [
    "Classification",
    "CursesPrompter",
    "KeyBindings",
    "Prompter",
    "TriageTerminated",
]
