# word_triage/triage/__init__.py
"""Expose the modules of the word triage tool."""

from . import (
    config,
    persistence,
    prompter,
    run_triage,
    triage_engine,
    word_lists,
)

__all__ = [
    "config",
    "persistence",
    "prompter",
    "run_triage",
    "triage_engine",
    "word_lists",
]
