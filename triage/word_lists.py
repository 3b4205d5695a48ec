# word_triage/triage/word_lists.py
"""Read newline-delimited word lists from disk.

Two flavours are provided:

- :func:`load_words` returns the lines of a category file (``known.txt``,
  ``unknown.txt``, ``skip.txt``) exactly as they were written, minus any
  trailing empty lines left behind by a final newline.
- :func:`load_input_words` is used for the list being triaged. Each line is
  stripped of surrounding whitespace and blank lines are dropped.

Example
-------
```python
from pathlib import Path
from triage import word_lists

words = word_lists.load_input_words(Path("words.txt"))
```

A missing file is always an error; neither loader treats it as an empty list.
Bytes that are not valid UTF-8 are kept as surrogate escapes, so
:mod:`triage.persistence` writes them back unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List


def load_words(path: Path) -> List[str]:
    """Return the raw lines of ``path`` without trailing empty entries."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with path.open("r", encoding="utf-8", errors="surrogateescape") as handle:
        content = handle.read()

    words = content.split("\n")
    while words and words[-1] == "":
        words.pop()
    logging.debug("Loaded %d line(s) from %s", len(words), path)
    return words


def load_input_words(path: Path) -> List[str]:
    """Return the stripped, non-blank words of the list to triage."""

    words = [line.strip() for line in load_words(path)]
    return [word for word in words if word]


__all__ = [
    "load_input_words",
    "load_words",
]
