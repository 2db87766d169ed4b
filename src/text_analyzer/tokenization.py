from __future__ import annotations

import unicodedata
from typing import Iterator, List

# Combining marks (Devanagari vowel signs and the like) belong to the word.
MARK_CATEGORIES = frozenset({"Mn", "Mc"})


def split_tokens(text: str) -> List[str]:
    """Split text on runs of whitespace; never yields empty tokens."""
    return text.split()


def is_word_char(ch: str) -> bool:
    """Return True for letters, digits and combining marks."""
    return ch.isalnum() or unicodedata.category(ch) in MARK_CATEGORIES


def normalize_word(token: str) -> str:
    """Strip non-alphanumeric characters from both ends and lowercase the rest."""
    start = 0
    end = len(token)
    while start < end and not is_word_char(token[start]):
        start += 1
    while end > start and not is_word_char(token[end - 1]):
        end -= 1
    return token[start:end].lower()


def iter_words(text: str) -> Iterator[str]:
    """Yield the non-empty normalized words of ``text`` in document order."""
    for token in split_tokens(text):
        word = normalize_word(token)
        if word:
            yield word


def count_lines(text: str) -> int:
    """
    Count newline-delimited segments.

    A trailing newline does not open a new line and the empty string has none.
    Only ``"\\n"`` separates lines, so ``"\\r\\n"`` endings count once.
    """
    if not text:
        return 0
    breaks = text.count("\n")
    return breaks if text.endswith("\n") else breaks + 1
