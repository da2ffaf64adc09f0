"""Title normalization for cross-library game matching.

Titles entered by hand and titles imported from different metadata providers
disagree on trademark glyphs, subtitle separators, quote styles and stray
whitespace. ``normalize_title`` maps all of those variants onto one token
sequence so the title can serve as a fallback match key.
"""

import re

# Deleted outright: never used as a word separator
_TRADEMARK_GLYPHS = re.compile(r"[™®©]")

# Replaced with a space so "Persia: The" and "Persia - The" tokenize alike
_PUNCTUATION = re.compile(r"[:\-–—'’`‘\"“”.!?()\[\]{}]")

_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Normalize a game title for comparison.

    Steps:
    1. Lowercase
    2. Delete ™ ® ©
    3. Replace separators, quotes, brackets and sentence punctuation with a space
    4. Collapse whitespace and trim

    A title made only of punctuation normalizes to "", which is a valid key.
    """
    title = title.lower()
    title = _TRADEMARK_GLYPHS.sub("", title)
    title = _PUNCTUATION.sub(" ", title)
    return _WHITESPACE.sub(" ", title).strip()
