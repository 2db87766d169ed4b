from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, NamedTuple


class WordCount(NamedTuple):
    """A normalized word and the number of times it occurred."""

    word: str
    count: int


@dataclass(frozen=True, slots=True)
class TextStats:
    """Descriptive statistics computed for a single document."""

    char_count: int = 0
    char_count_no_spaces: int = 0
    line_count: int = 0
    word_count: int = 0
    unique_word_count: int = 0
    avg_word_length: float = 0.0
    word_frequencies: List[WordCount] = field(default_factory=list)

    def top(self, n: int) -> List[WordCount]:
        """Return the ``n`` highest ranked words (fewer if the ranking is shorter)."""
        if n <= 0:
            return []
        return self.word_frequencies[:n]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the statistics."""
        return {
            "char_count": self.char_count,
            "char_count_no_spaces": self.char_count_no_spaces,
            "line_count": self.line_count,
            "word_count": self.word_count,
            "unique_word_count": self.unique_word_count,
            "avg_word_length": self.avg_word_length,
            "word_frequencies": [
                {"word": entry.word, "count": entry.count}
                for entry in self.word_frequencies
            ],
        }
