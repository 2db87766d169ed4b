from __future__ import annotations

from pathlib import Path

SAMPLE_TEXT = (
    "The storm clouds rolled over the bay.\n"
    "Sailors watched the winds, and the storm passed.\n"
)


def write_sample_text(path: Path, text: str = SAMPLE_TEXT) -> Path:
    """Write ``text`` to ``path`` as UTF-8 and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
