from __future__ import annotations

import logging
from collections import Counter

from .models import TextStats, WordCount
from .tokenization import count_lines, iter_words

LOGGER = logging.getLogger(__name__)


def analyze(text: str) -> TextStats:
    """Compute character, line and word statistics plus a ranked word list."""
    char_count = len(text)
    char_count_no_spaces = sum(1 for ch in text if not ch.isspace())
    line_count = count_lines(text)

    frequencies: Counter[str] = Counter()
    word_count = 0
    total_word_chars = 0
    for word in iter_words(text):
        word_count += 1
        total_word_chars += len(word)
        frequencies[word] += 1

    avg_word_length = total_word_chars / word_count if word_count else 0.0

    ranking = [
        WordCount(word=word, count=count)
        for word, count in sorted(
            frequencies.items(), key=lambda item: (-item[1], item[0])
        )
    ]

    LOGGER.debug(
        "Analyzed %d characters: %d lines, %d words (%d unique).",
        char_count,
        line_count,
        word_count,
        len(ranking),
    )
    return TextStats(
        char_count=char_count,
        char_count_no_spaces=char_count_no_spaces,
        line_count=line_count,
        word_count=word_count,
        unique_word_count=len(frequencies),
        avg_word_length=avg_word_length,
        word_frequencies=ranking,
    )
