from __future__ import annotations

from pathlib import Path
from typing import List, TypedDict

from .models import TextStats

BANNER_RULE = "=" * 29
SECTION_RULE = "-" * 29


class WordPayload(TypedDict):
    rank: int
    word: str
    count: int


class SummaryPayload(TypedDict):
    lines: int
    characters: int
    characters_no_spaces: int
    words: int
    unique_words: int
    avg_word_length: float


class ReportPayload(TypedDict):
    file: str
    summary: SummaryPayload
    top_words: List[WordPayload]


def render_report(stats: TextStats, top_n: int, word_width: int = 15) -> str:
    """
    Render the fixed-format, human-readable report.

    Parameters
    ----------
    stats:
        Statistics produced by :func:`text_analyzer.analysis.analyze`.
    top_n:
        Number of ranked words to list; fewer are shown when the ranking is shorter.
    word_width:
        Column width the word is left-aligned in.
    """
    lines = [
        BANNER_RULE,
        "  Text Analyzer",
        BANNER_RULE,
        "",
        f"Lines:                        {stats.line_count}",
        f"Characters (with spaces):     {stats.char_count}",
        f"Characters (no spaces):       {stats.char_count_no_spaces}",
        f"Words:                        {stats.word_count}",
        f"Unique words:                 {stats.unique_word_count}",
        f"Average word length:          {stats.avg_word_length:.2f}",
        "",
        f"Top {top_n} words:",
        SECTION_RULE,
    ]
    for rank, (word, count) in enumerate(stats.top(top_n), start=1):
        lines.append(f"{rank:>2}. {word:<{word_width}} {count}")
    return "\n".join(lines)


def build_payload(stats: TextStats, top_n: int, source: str | Path) -> ReportPayload:
    """Create a JSON-serializable summary mirroring the text report."""
    return {
        "file": str(source),
        "summary": {
            "lines": stats.line_count,
            "characters": stats.char_count,
            "characters_no_spaces": stats.char_count_no_spaces,
            "words": stats.word_count,
            "unique_words": stats.unique_word_count,
            "avg_word_length": stats.avg_word_length,
        },
        "top_words": [
            {"rank": rank, "word": entry.word, "count": entry.count}
            for rank, entry in enumerate(stats.top(top_n), start=1)
        ],
    }
