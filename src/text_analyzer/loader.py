from __future__ import annotations

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class ReadError(RuntimeError):
    """Raised when a file cannot be read as text."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not read file '{path}': {cause}")


def read_text_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the full contents of ``path`` decoded with ``encoding``."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        LOGGER.warning("Failed to read %s: %s", file_path, exc)
        raise ReadError(path, exc) from exc
    LOGGER.debug("Read %d characters from %s", len(text), file_path)
    return text
